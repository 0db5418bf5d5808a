"""测试辅助工具

提供临时任务目录、团队和任务文档的创建函数。
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional


def write_document(team_dir: Path, tasks: Dict[str, Dict[str, Any]], name: str = "tasks.json") -> Path:
    path = team_dir / name
    path.write_text(json.dumps(tasks, ensure_ascii=False, indent=2), encoding="utf-8")
    return path


def read_document(team_dir: Path, name: str = "tasks.json") -> Dict[str, Any]:
    return json.loads((team_dir / name).read_text(encoding="utf-8"))


def make_team(
    tasks_dir: Path,
    team: str = "demo",
    tasks: Optional[Dict[str, Dict[str, Any]]] = None,
) -> Path:
    """Create a team directory with a ``tasks.json`` document (skipped when tasks is None)."""
    team_dir = tasks_dir / team
    team_dir.mkdir(parents=True, exist_ok=True)
    if tasks is not None:
        write_document(team_dir, tasks)
    return team_dir


def make_task_files(team_dir: Path, tasks: Dict[str, Dict[str, Any]]) -> None:
    """Per-task layout: one ``<id>.json`` per record."""
    team_dir.mkdir(parents=True, exist_ok=True)
    for task_id, record in tasks.items():
        (team_dir / f"{task_id}.json").write_text(json.dumps(record, indent=2), encoding="utf-8")


def task(subject: str = "Test task", status: str = "pending", owner: Optional[str] = None, **extra: Any) -> Dict[str, Any]:
    row: Dict[str, Any] = {"subject": subject, "description": "", "status": status}
    if owner is not None:
        row["owner"] = owner
    row.update(extra)
    return row
