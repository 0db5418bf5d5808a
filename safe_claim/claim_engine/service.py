"""Claim orchestration: resolve -> lock -> load -> claim -> save -> release."""

from __future__ import annotations

import logging
from typing import Optional

from . import file_lock
from .claim import ClaimOutcome, claim, normalize_request
from .errors import AlreadyClaimed, SafeClaimError
from .task_store import create_task_store
from .team_resolver import TeamResolver

logger = logging.getLogger(__name__)


class ClaimService:
    def __init__(self, resolver: TeamResolver, store=None):
        self.resolver = resolver
        self.store = store if store is not None else create_task_store()

    @classmethod
    def from_config(cls, config) -> "ClaimService":
        resolver = TeamResolver(config.tasks_dir, document_name=config.document_name)
        return cls(resolver, create_task_store(config.layout))

    def claim(self, task_id: str, owner: str, team: Optional[str] = None) -> ClaimOutcome:
        task_id, owner = normalize_request(task_id, owner)
        paths = self.resolver.resolve(team)
        with file_lock.acquire(paths.lock_path) as guard:
            document = self.store.load(paths, guard, task_id)
            outcome = claim(document, task_id, owner)
            self.store.save(paths, outcome.document, guard)
        logger.info("team=%s task=%s claimed by %s", paths.name, outcome.task_id, outcome.owner)
        return outcome

    def safe_claim(self, task_id: str, owner: str, team: Optional[str] = None) -> str:
        """Claim and render the result as a single human-readable line."""
        try:
            outcome = self.claim(task_id, owner, team)
        except AlreadyClaimed as exc:
            logger.info("task=%s claim by %s rejected: %s", task_id, owner, exc.message)
            return f"Error: {exc.message}"
        except SafeClaimError as exc:
            logger.warning("task=%s claim by %s failed [%s]: %s", task_id, owner, exc.code, exc.message)
            return f"Error: {exc.message}"
        return outcome.message
