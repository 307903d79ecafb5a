"""
Shared test fixtures and configuration.
"""

from pathlib import Path

import pytest

from strap.adapters.memory import MemoryFilesystem
from strap.core.models.config import ResolvedConfig


@pytest.fixture
def project_fs() -> MemoryFilesystem:
    """An in-memory project root containing only package.json."""
    return MemoryFilesystem({"package.json": "{}"})


@pytest.fixture
def config() -> ResolvedConfig:
    """All-default resolved configuration."""
    return ResolvedConfig()


@pytest.fixture
def project_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A temporary project root on disk, set as the working directory."""
    (tmp_path / "package.json").write_text("{}")
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("STRAP_LOG_LEVEL", raising=False)
    monkeypatch.delenv("STRAP_LOG_FILE", raising=False)
    return tmp_path
