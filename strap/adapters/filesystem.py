"""
Filesystem adapter — the narrow file capability used by the core.

The core never touches ``pathlib`` or ``os`` directly for project files.
Every read, existence check and write goes through a ``Filesystem``,
addressed by paths relative to the project root. This keeps template
resolution and expansion testable against ``MemoryFilesystem``.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path, PurePosixPath

logger = logging.getLogger(__name__)


class Filesystem(ABC):
    """Abstract file capability rooted at a project directory.

    All paths are relative ``PurePosixPath`` values. Implementations raise
    ``OSError`` (or a subclass) on failure; callers decide how to report it.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """The adapter identifier (e.g., 'local', 'memory')."""

    @abstractmethod
    def exists(self, path: PurePosixPath) -> bool:
        """Whether anything (file or directory) exists at ``path``."""

    @abstractmethod
    def is_dir(self, path: PurePosixPath) -> bool:
        """Whether ``path`` is an existing directory."""

    @abstractmethod
    def is_file(self, path: PurePosixPath) -> bool:
        """Whether ``path`` is an existing regular file."""

    @abstractmethod
    def read_text(self, path: PurePosixPath) -> str:
        """Read a UTF-8 text file."""

    @abstractmethod
    def write_text(self, path: PurePosixPath, content: str) -> None:
        """Write a UTF-8 text file, replacing any existing content.

        The parent directory must already exist.
        """

    @abstractmethod
    def mkdir(self, path: PurePosixPath) -> None:
        """Create a directory and any missing parents. No-op if present."""

    @abstractmethod
    def list_dir(self, path: PurePosixPath) -> list[str]:
        """Entry names (one level, sorted) of the directory at ``path``."""

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"


class LocalFilesystem(Filesystem):
    """Real disk access, with every relative path resolved under ``root``."""

    def __init__(self, root: Path):
        self._root = root

    @property
    def name(self) -> str:
        return "local"

    @property
    def root(self) -> Path:
        return self._root

    def _resolve(self, path: PurePosixPath) -> Path:
        target = Path(path)
        if not target.is_absolute():
            target = self._root / target
        return target

    def exists(self, path: PurePosixPath) -> bool:
        return self._resolve(path).exists()

    def is_dir(self, path: PurePosixPath) -> bool:
        return self._resolve(path).is_dir()

    def is_file(self, path: PurePosixPath) -> bool:
        return self._resolve(path).is_file()

    def read_text(self, path: PurePosixPath) -> str:
        return self._resolve(path).read_text(encoding="utf-8")

    def write_text(self, path: PurePosixPath, content: str) -> None:
        target = self._resolve(path)
        target.write_text(content, encoding="utf-8")
        logger.debug("Wrote %d bytes to %s", len(content), target)

    def mkdir(self, path: PurePosixPath) -> None:
        self._resolve(path).mkdir(parents=True, exist_ok=True)

    def list_dir(self, path: PurePosixPath) -> list[str]:
        target = self._resolve(path)
        if not target.is_dir():
            raise NotADirectoryError(f"Not a directory: {target}")
        return sorted(p.name for p in target.iterdir())
