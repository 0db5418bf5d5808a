"""Command line entry point: run the MCP server or claim a task directly."""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from rich.console import Console

from safe_claim.claim_engine import ClaimService
from safe_claim.claim_engine.protocol import LAYOUTS
from safe_claim.config import Config
from safe_claim.logging_setup import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="safe-claim", description="Lock-protected task claiming for agent teams.")
    parser.add_argument("--tasks-dir", default=None, help="Base tasks directory (default: ~/.claude/tasks)")
    parser.add_argument("--layout", choices=sorted(LAYOUTS), default=None, help="On-disk task layout")
    parser.add_argument("--log-level", default=None, help="Logging level (default: LOG_LEVEL or INFO)")

    sub = parser.add_subparsers(dest="command")
    sub.add_parser("serve", help="Run the MCP server over stdio (default)")

    claim_parser = sub.add_parser("claim", help="Claim a task once and print the result")
    claim_parser.add_argument("task_id")
    claim_parser.add_argument("--owner", required=True, help="Agent name claiming the task")
    claim_parser.add_argument("--team", default=None, help="Team name (default: first team directory)")

    sub.add_parser("teams", help="List team directories in resolution order")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = Config.from_env(tasks_dir=args.tasks_dir, layout=args.layout, log_level=args.log_level)
    setup_logging(config.effective_log_level)
    console = Console()

    command = args.command or "serve"
    if command == "serve":
        from safe_claim.mcp_server import main as serve

        serve(config)
        return 0

    service = ClaimService.from_config(config)
    if command == "teams":
        for name in service.resolver.list_teams():
            console.print(name, markup=False, highlight=False, soft_wrap=True)
        return 0

    result = service.safe_claim(args.task_id, args.owner, args.team)
    console.print(result, markup=False, highlight=False, soft_wrap=True)
    return 1 if result.startswith("Error:") else 0


if __name__ == "__main__":
    sys.exit(main())
