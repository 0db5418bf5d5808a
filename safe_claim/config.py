"""配置管理"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, field_validator

from safe_claim.claim_engine.protocol import DEFAULT_DOCUMENT_NAME, LAYOUT_DOCUMENT, LAYOUTS


_ENV_LOADED = False


def load_env() -> None:
    """Load .env once if available (no override)."""
    global _ENV_LOADED
    if _ENV_LOADED:
        return
    from dotenv import find_dotenv, load_dotenv

    dotenv_path = find_dotenv(usecwd=True)
    if dotenv_path:
        load_dotenv(dotenv_path, override=False)
    _ENV_LOADED = True


def default_tasks_dir() -> Path:
    try:
        home = Path.home()
    except RuntimeError:
        home = Path("/tmp")
    return home / ".claude" / "tasks"


class Config(BaseModel):
    """safe-claim 配置类"""

    # 任务存储
    tasks_dir: Path = default_tasks_dir()
    layout: str = LAYOUT_DOCUMENT
    document_name: str = DEFAULT_DOCUMENT_NAME

    # 系统配置
    debug: bool = False
    log_level: str = "INFO"

    @field_validator("layout")
    @classmethod
    def _check_layout(cls, value: str) -> str:
        if value not in LAYOUTS:
            raise ValueError(f"layout must be one of {sorted(LAYOUTS)}, got {value!r}")
        return value

    @field_validator("tasks_dir")
    @classmethod
    def _expand_tasks_dir(cls, value: Path) -> Path:
        return Path(value).expanduser()

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level.upper()

    @classmethod
    def from_env(cls, **overrides: Any) -> "Config":
        """从环境变量创建配置；显式传入的非 None 参数优先"""
        load_env()
        tasks_dir_raw: Optional[str] = os.getenv("SAFE_CLAIM_TASKS_DIR")
        values: Dict[str, Any] = {
            "tasks_dir": Path(tasks_dir_raw) if tasks_dir_raw else default_tasks_dir(),
            "layout": os.getenv("SAFE_CLAIM_LAYOUT", LAYOUT_DOCUMENT),
            "document_name": os.getenv("SAFE_CLAIM_DOCUMENT_NAME", DEFAULT_DOCUMENT_NAME),
            "debug": os.getenv("DEBUG", "false").lower() in {"1", "true", "yes", "y", "on"},
            "log_level": os.getenv("LOG_LEVEL", "INFO"),
        }
        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典"""
        return self.model_dump()
