"""Exclusive advisory lock on a team's lock file."""

from __future__ import annotations

import fcntl
import logging
import os
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from .errors import SetupError

logger = logging.getLogger(__name__)


class LockGuard:
    """Handle for one held lock. ``held`` drops to False once released."""

    def __init__(self, path: Path):
        self.path = path
        self.held = False

    def __repr__(self) -> str:
        return f"LockGuard(path={str(self.path)!r}, held={self.held})"


@contextmanager
def acquire(lock_path: Path | str) -> Iterator[LockGuard]:
    """Block until an exclusive ``flock`` on ``lock_path`` is obtained.

    There is no timeout. The lock file is created if missing, but its parent
    directory must already exist. The lock is released and the descriptor
    closed on every exit path.
    """
    path = Path(lock_path)
    if not path.parent.is_dir():
        raise SetupError(f"lock directory not found: {path.parent}")
    try:
        fd = os.open(str(path), os.O_RDWR | os.O_CREAT, 0o644)
    except OSError as exc:
        raise SetupError(f"cannot open lock: {path}: {exc.strerror or exc}") from exc

    guard = LockGuard(path)
    try:
        started = time.monotonic()
        logger.debug("waiting for lock %s", path)
        fcntl.flock(fd, fcntl.LOCK_EX)
        guard.held = True
        logger.debug("acquired lock %s after %.3fs", path, time.monotonic() - started)
        yield guard
    finally:
        if guard.held:
            guard.held = False
            fcntl.flock(fd, fcntl.LOCK_UN)
            logger.debug("released lock %s", path)
        os.close(fd)
