"""Map a team name to its on-disk directory, lock and document paths."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from .errors import NoTeamsFound, SetupError
from .protocol import DEFAULT_DOCUMENT_NAME, LOCK_FILE_NAME, validate_team_name


@dataclass(frozen=True)
class TeamPaths:
    name: str
    team_dir: Path
    lock_path: Path
    document_path: Path


class TeamResolver:
    def __init__(self, tasks_dir: Path | str, document_name: str = DEFAULT_DOCUMENT_NAME):
        self.tasks_dir = Path(tasks_dir).expanduser()
        self.document_name = document_name

    def paths_for(self, team_name: str) -> TeamPaths:
        team_dir = self.tasks_dir / team_name
        return TeamPaths(
            name=team_name,
            team_dir=team_dir,
            lock_path=team_dir / LOCK_FILE_NAME,
            document_path=team_dir / self.document_name,
        )

    def list_teams(self) -> List[str]:
        """Team directories in lexicographic order, hidden entries skipped."""
        if not self.tasks_dir.is_dir():
            return []
        names: List[str] = []
        try:
            for item in self.tasks_dir.iterdir():
                if item.name.startswith("."):
                    continue
                if item.is_dir():
                    names.append(item.name)
        except OSError as exc:
            raise SetupError(f"cannot read {self.tasks_dir}: {exc.strerror or exc}") from exc
        return sorted(names)

    def resolve(self, team: Optional[str] = None) -> TeamPaths:
        if team is not None and str(team).strip():
            try:
                name = validate_team_name(team)
            except ValueError as exc:
                raise SetupError(str(exc)) from exc
            paths = self.paths_for(name)
            if not paths.team_dir.is_dir():
                raise SetupError(f"team directory not found: {paths.team_dir}")
            return paths

        teams = self.list_teams()
        if not teams:
            raise NoTeamsFound(f"no team directories found in {self.tasks_dir}")
        return self.paths_for(teams[0])
