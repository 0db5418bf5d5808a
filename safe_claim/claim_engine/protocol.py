"""Protocol constants for task claiming."""

from __future__ import annotations

from typing import Any, Dict


TASK_STATUS_PENDING = "pending"
TASK_STATUS_CLAIMED = "claimed"
TASK_STATUS_IN_PROGRESS = "in_progress"
TASK_STATUS_COMPLETED = "completed"
TASK_STATUS_DELETED = "deleted"
TASK_STATUSES = {
    TASK_STATUS_PENDING,
    TASK_STATUS_CLAIMED,
    TASK_STATUS_IN_PROGRESS,
    TASK_STATUS_COMPLETED,
    TASK_STATUS_DELETED,
}

# Statuses that block a new claim regardless of owner.
UNCLAIMABLE_STATUSES = {
    TASK_STATUS_CLAIMED,
    TASK_STATUS_IN_PROGRESS,
    TASK_STATUS_COMPLETED,
    TASK_STATUS_DELETED,
}

LAYOUT_DOCUMENT = "document"
LAYOUT_PER_TASK = "per_task"
LAYOUTS = {LAYOUT_DOCUMENT, LAYOUT_PER_TASK}

LOCK_FILE_NAME = ".lock"
DEFAULT_DOCUMENT_NAME = "tasks.json"


def validate_team_name(raw: str) -> str:
    """Return the team name unchanged, or raise ValueError if it is not a plain directory name."""
    value = (raw or "").strip()
    if not value:
        raise ValueError("team name is empty")
    if value in {".", ".."}:
        raise ValueError(f"invalid team name: {raw}")
    if "/" in value or "\\" in value or "\x00" in value:
        raise ValueError(f"team name must not contain path separators: {raw}")
    return value


def validate_task_record(task_id: str, record: Any) -> Dict[str, Any]:
    """Validate minimal task-record shape."""
    if not isinstance(record, dict):
        raise ValueError(f"task {task_id} is not an object")
    status = record.get("status")
    if status is not None and not isinstance(status, str):
        raise ValueError(f"task {task_id} has non-string status")
    owner = record.get("owner")
    if owner is not None and not isinstance(owner, str):
        raise ValueError(f"task {task_id} has non-string owner")
    return record


def record_owner(record: Dict[str, Any]) -> str:
    return str(record.get("owner") or "").strip()


def record_status(record: Dict[str, Any]) -> str:
    return str(record.get("status") or TASK_STATUS_PENDING)
