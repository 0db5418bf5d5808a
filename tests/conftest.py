"""Pytest 配置和共享 fixtures"""

import pytest

from safe_claim.claim_engine import ClaimService, TeamResolver, create_task_store


@pytest.fixture
def tasks_dir(tmp_path):
    path = tmp_path / "tasks"
    path.mkdir()
    return path


@pytest.fixture
def service(tasks_dir):
    return ClaimService(TeamResolver(tasks_dir), create_task_store("document"))


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    for key in ("SAFE_CLAIM_TASKS_DIR", "SAFE_CLAIM_LAYOUT", "SAFE_CLAIM_DOCUMENT_NAME", "LOG_LEVEL", "DEBUG"):
        monkeypatch.delenv(key, raising=False)
