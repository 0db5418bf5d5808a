"""Logging bootstrap.

Log records go to stderr through a rich handler: stdout carries the MCP
stdio stream and must stay clean.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

_HANDLER_NAME = "safe_claim.rich"


def setup_logging(level: str = "INFO") -> logging.Logger:
    logger = logging.getLogger("safe_claim")
    logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    if not any(h.get_name() == _HANDLER_NAME for h in logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        logger.addHandler(handler)
        logger.propagate = False
    return logger
