from .claim import ClaimOutcome, claim
from .errors import (
    AlreadyClaimed,
    CorruptData,
    InvalidRequest,
    IoError,
    NoTeamsFound,
    NotFound,
    SafeClaimError,
    SetupError,
)
from .service import ClaimService
from .task_store import DocumentTaskStore, PerTaskFileStore, create_task_store
from .team_resolver import TeamPaths, TeamResolver

__all__ = [
    "AlreadyClaimed",
    "ClaimOutcome",
    "ClaimService",
    "CorruptData",
    "DocumentTaskStore",
    "InvalidRequest",
    "IoError",
    "NoTeamsFound",
    "NotFound",
    "PerTaskFileStore",
    "SafeClaimError",
    "SetupError",
    "TeamPaths",
    "TeamResolver",
    "claim",
    "create_task_store",
]
