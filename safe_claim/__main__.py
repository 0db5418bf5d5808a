import sys

from safe_claim.cli import main

sys.exit(main())
