"""Claim state transition for a single task record."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any, Dict, Tuple

from .errors import AlreadyClaimed, InvalidRequest, NotFound
from .protocol import (
    TASK_STATUS_DELETED,
    TASK_STATUS_IN_PROGRESS,
    UNCLAIMABLE_STATUSES,
    record_owner,
    record_status,
)

TaskDocument = Dict[str, Dict[str, Any]]


@dataclass
class ClaimOutcome:
    document: TaskDocument
    task_id: str
    owner: str
    description: str

    @property
    def message(self) -> str:
        return f"Claimed task {self.task_id}: {self.description}"


def _describe(record: Dict[str, Any]) -> str:
    for key in ("subject", "description"):
        value = record.get(key)
        if isinstance(value, str) and value.strip():
            return value
    return ""


def normalize_request(task_id: str, owner: str) -> Tuple[str, str]:
    """Strip both values and reject blanks with ``InvalidRequest``."""
    tid = str(task_id or "").strip()
    owner_name = str(owner or "").strip()
    if not tid:
        raise InvalidRequest("task_id is required")
    if not owner_name:
        raise InvalidRequest("owner is required")
    return tid, owner_name


def claim(document: TaskDocument, task_id: str, owner: str) -> ClaimOutcome:
    """Validate and apply a claim of ``task_id`` by ``owner``.

    Returns a new document; ``document`` itself is never mutated, so a
    failed claim leaves nothing to persist. First writer wins: any existing
    owner, including ``owner`` itself, rejects the claim.
    """
    tid, owner_name = normalize_request(task_id, owner)
    record = document.get(tid)
    if record is None:
        raise NotFound(f"task not found: {tid}")

    existing = record_owner(record)
    status = record_status(record)
    if existing:
        raise AlreadyClaimed(f"already claimed by {existing}", owner=existing, status=status)
    if status == TASK_STATUS_DELETED:
        raise AlreadyClaimed("task is deleted", status=status)
    if status in UNCLAIMABLE_STATUSES:
        raise AlreadyClaimed(f"task is already {status}", status=status)

    updated = copy.deepcopy(document)
    target = updated[tid]
    target["owner"] = owner_name
    target["status"] = TASK_STATUS_IN_PROGRESS
    return ClaimOutcome(
        document=updated,
        task_id=tid,
        owner=owner_name,
        description=_describe(target),
    )
