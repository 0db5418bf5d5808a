"""Shared errors for the claim engine."""

from __future__ import annotations

from typing import Optional


class SafeClaimError(Exception):
    """Typed error carrying a stable code for tool-level mapping."""

    code = "INTERNAL_ERROR"

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.code = str(code or self.code)
        self.message = str(message or "")


class SetupError(SafeClaimError):
    """Team directory or lock path is unusable."""

    code = "SETUP_ERROR"


class NoTeamsFound(SafeClaimError):
    code = "NO_TEAMS_FOUND"


class CorruptData(SafeClaimError):
    """Task document is missing or cannot be parsed."""

    code = "CORRUPT_DATA"


class NotFound(SafeClaimError):
    code = "NOT_FOUND"


class AlreadyClaimed(SafeClaimError):
    """Task is owned or no longer claimable."""

    code = "ALREADY_CLAIMED"

    def __init__(self, message: str, owner: str = "", status: str = ""):
        super().__init__(message)
        self.owner = owner
        self.status = status


class IoError(SafeClaimError):
    """Writing the task document failed."""

    code = "IO_ERROR"


class InvalidRequest(SafeClaimError):
    code = "INVALID_PARAM"
