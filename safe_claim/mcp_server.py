"""Safe task claim MCP server (stdio)."""

from __future__ import annotations

import logging
from typing import Optional

from mcp.server.fastmcp import FastMCP

from safe_claim.claim_engine import ClaimService
from safe_claim.config import Config
from safe_claim.logging_setup import setup_logging
from safe_claim.prompts.safe_claim_prompt import safe_claim_prompt, server_instructions

SERVER_NAME = "safe-task-claim"

logger = logging.getLogger(__name__)


def create_server(service: Optional[ClaimService] = None, config: Optional[Config] = None) -> FastMCP:
    if service is None:
        service = ClaimService.from_config(config or Config.from_env())

    mcp = FastMCP(SERVER_NAME, instructions=server_instructions)

    @mcp.tool(name="safe_claim", description=safe_claim_prompt)
    def safe_claim(task_id: str, owner: str, team: Optional[str] = None) -> str:
        return service.safe_claim(task_id, owner, team)

    logger.debug("registered safe_claim tool, tasks_dir=%s", service.resolver.tasks_dir)
    return mcp


def main(config: Optional[Config] = None) -> None:
    config = config or Config.from_env()
    setup_logging(config.effective_log_level)
    server = create_server(config=config)
    logger.info("serving %s over stdio (tasks_dir=%s, layout=%s)", SERVER_NAME, config.tasks_dir, config.layout)
    server.run()


if __name__ == "__main__":
    main()
