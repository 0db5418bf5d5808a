"""File-based task document stores.

A store only reads or writes while the caller holds the team lock; every
method takes the ``LockGuard`` returned by :func:`file_lock.acquire` and
refuses to run against a guard that is released or belongs to another team.
"""

from __future__ import annotations

import json
import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Optional

from .errors import CorruptData, IoError, SetupError
from .file_lock import LockGuard
from .protocol import LAYOUT_DOCUMENT, LAYOUT_PER_TASK, validate_task_record
from .team_resolver import TeamPaths

logger = logging.getLogger(__name__)

TaskDocument = Dict[str, Dict[str, Any]]


def _require_lock(paths: TeamPaths, guard: Optional[LockGuard]) -> None:
    if guard is None or not guard.held:
        raise SetupError(f"team lock not held for {paths.name}")
    if Path(guard.path) != paths.lock_path:
        raise SetupError(f"lock {guard.path} does not guard team {paths.name}")


def _dump(payload: Any) -> str:
    return json.dumps(payload, ensure_ascii=False, indent=2)


def _atomic_write(path: Path, text: str) -> None:
    """Write via a temp file in the same directory, then rename into place."""
    try:
        tmp_fd, tmp_path = tempfile.mkstemp(dir=str(path.parent), prefix=f".{path.name}.", suffix=".tmp")
    except OSError as exc:
        raise IoError(f"cannot write {path.name}: {exc.strerror or exc}") from exc
    try:
        with os.fdopen(tmp_fd, "w", encoding="utf-8") as f:
            # mkstemp creates 0600; keep the mode of the file being replaced.
            try:
                os.fchmod(f.fileno(), stat.S_IMODE(path.stat().st_mode))
            except FileNotFoundError:
                pass
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_path, str(path))
    except OSError as exc:
        try:
            os.unlink(tmp_path)
        except FileNotFoundError:
            pass
        raise IoError(f"cannot write {path.name}: {exc.strerror or exc}") from exc


def _read_json(path: Path, label: str) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise CorruptData(f"{label} not found: {path}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise CorruptData(f"cannot read {label}: {path}: {exc}") from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise CorruptData(f"invalid JSON in {label}: {path}: {exc.msg}") from exc


class DocumentTaskStore:
    """Whole team collection stored as one JSON mapping of id -> record."""

    layout = LAYOUT_DOCUMENT

    def load(self, paths: TeamPaths, guard: LockGuard, task_id: Optional[str] = None) -> TaskDocument:
        # The whole mapping is rewritten on save, so task_id never narrows the load.
        _require_lock(paths, guard)
        payload = _read_json(paths.document_path, "task document")
        if not isinstance(payload, dict):
            raise CorruptData(f"task document is not a mapping: {paths.document_path}")
        document: TaskDocument = {}
        for task_id, record in payload.items():
            try:
                document[str(task_id)] = validate_task_record(task_id, record)
            except ValueError as exc:
                raise CorruptData(f"{exc} in {paths.document_path}") from exc
        logger.debug("loaded %d tasks from %s", len(document), paths.document_path)
        return document

    def save(self, paths: TeamPaths, document: TaskDocument, guard: LockGuard) -> None:
        _require_lock(paths, guard)
        _atomic_write(paths.document_path, _dump(document))
        logger.debug("saved %d tasks to %s", len(document), paths.document_path)


class PerTaskFileStore:
    """One ``<id>.json`` file per task inside the team directory.

    The file stem is the task id. A claim loads only the requested task's
    file, so a broken file for another task never blocks it. Saving rewrites
    only the records whose content differs from what is on disk.
    """

    layout = LAYOUT_PER_TASK

    @staticmethod
    def _task_path(paths: TeamPaths, task_id: str) -> Path:
        return paths.team_dir / f"{task_id}.json"

    def _task_paths(self, paths: TeamPaths, task_id: Optional[str]) -> List[Path]:
        if task_id is not None:
            tid = str(task_id)
            if not tid or tid.startswith(".") or "/" in tid or "\\" in tid or "\x00" in tid:
                return []
            path = self._task_path(paths, tid)
            return [path] if path.exists() else []
        try:
            return sorted(p for p in paths.team_dir.glob("*.json") if not p.name.startswith("."))
        except OSError as exc:
            raise SetupError(f"cannot list team directory {paths.team_dir}: {exc.strerror or exc}") from exc

    def load(self, paths: TeamPaths, guard: LockGuard, task_id: Optional[str] = None) -> TaskDocument:
        """Load every task file, or only ``<task_id>.json`` when given.

        A missing task file yields an empty document rather than an error.
        """
        _require_lock(paths, guard)
        if not paths.team_dir.is_dir():
            raise CorruptData(f"task directory not found: {paths.team_dir}")
        document: TaskDocument = {}
        for path in self._task_paths(paths, task_id):
            record = _read_json(path, "task file")
            try:
                document[path.stem] = validate_task_record(path.stem, record)
            except ValueError as exc:
                raise CorruptData(f"{exc} in {path}") from exc
        logger.debug("loaded %d task files from %s", len(document), paths.team_dir)
        return document

    def save(self, paths: TeamPaths, document: TaskDocument, guard: LockGuard) -> None:
        _require_lock(paths, guard)
        written = 0
        for task_id, record in document.items():
            path = self._task_path(paths, task_id)
            try:
                if json.loads(path.read_text(encoding="utf-8")) == record:
                    continue
            except (OSError, ValueError):
                # missing or unreadable: rewrite it
                pass
            _atomic_write(path, _dump(record))
            written += 1
        logger.debug("saved %d changed task files to %s", written, paths.team_dir)


def create_task_store(layout: str = LAYOUT_DOCUMENT):
    if layout == LAYOUT_DOCUMENT:
        return DocumentTaskStore()
    if layout == LAYOUT_PER_TASK:
        return PerTaskFileStore()
    raise ValueError(f"unknown task store layout: {layout}")
