"""
Memory filesystem — in-process test double for ``Filesystem``.

Holds files and directories in dictionaries, records every mutating call,
and can be told to fail specific operations so that partial-write paths
are testable without touching disk.
"""

from __future__ import annotations

from pathlib import PurePosixPath

from strap.adapters.filesystem import Filesystem


def _key(path: PurePosixPath | str) -> str:
    return str(PurePosixPath(path))


class MemoryFilesystem(Filesystem):
    """In-memory filesystem.

    Args:
        files: Optional initial ``{relative path: content}`` mapping. Parent
            directories are created implicitly.
    """

    def __init__(self, files: dict[str, str] | None = None):
        self._files: dict[str, str] = {}
        self._dirs: set[str] = {"."}
        self._failures: dict[tuple[str, str], str] = {}
        self._call_log: list[tuple[str, str]] = []
        for path, content in (files or {}).items():
            self.add_file(path, content)

    @property
    def name(self) -> str:
        return "memory"

    @property
    def files(self) -> dict[str, str]:
        """Snapshot of every file, keyed by relative path."""
        return dict(self._files)

    @property
    def call_log(self) -> list[tuple[str, str]]:
        """``(operation, path)`` for every mkdir/write received."""
        return self._call_log

    @property
    def writes(self) -> list[str]:
        """Paths passed to ``write_text``, in call order."""
        return [path for op, path in self._call_log if op == "write"]

    # ── Setup helpers ───────────────────────────────────────────

    def add_file(self, path: str, content: str = "") -> None:
        """Seed a file without logging it as a call."""
        key = _key(path)
        self._add_parents(key)
        self._files[key] = content

    def add_dir(self, path: str) -> None:
        """Seed a directory (and its parents) without logging it."""
        key = _key(path)
        self._add_parents(key)
        self._dirs.add(key)

    def set_failure(self, operation: str, path: str, error: str = "Mock failure") -> None:
        """Make ``operation`` ('read', 'write', 'mkdir') on ``path`` raise."""
        self._failures[(operation, _key(path))] = error

    def _add_parents(self, key: str) -> None:
        for parent in PurePosixPath(key).parents:
            self._dirs.add(str(parent))

    def _check_failure(self, operation: str, key: str) -> None:
        error = self._failures.get((operation, key))
        if error is not None:
            raise OSError(error)

    # ── Filesystem protocol ─────────────────────────────────────

    def exists(self, path: PurePosixPath) -> bool:
        key = _key(path)
        return key in self._files or key in self._dirs

    def is_dir(self, path: PurePosixPath) -> bool:
        return _key(path) in self._dirs

    def is_file(self, path: PurePosixPath) -> bool:
        return _key(path) in self._files

    def read_text(self, path: PurePosixPath) -> str:
        key = _key(path)
        self._check_failure("read", key)
        if key in self._dirs:
            raise IsADirectoryError(f"Is a directory: {key}")
        if key not in self._files:
            raise FileNotFoundError(f"No such file: {key}")
        return self._files[key]

    def write_text(self, path: PurePosixPath, content: str) -> None:
        key = _key(path)
        self._call_log.append(("write", key))
        self._check_failure("write", key)
        parent = str(PurePosixPath(key).parent)
        if parent not in self._dirs:
            raise FileNotFoundError(f"No such directory: {parent}")
        if key in self._dirs:
            raise IsADirectoryError(f"Is a directory: {key}")
        self._files[key] = content

    def mkdir(self, path: PurePosixPath) -> None:
        key = _key(path)
        self._call_log.append(("mkdir", key))
        self._check_failure("mkdir", key)
        if key in self._files:
            raise FileExistsError(f"File exists: {key}")
        self._add_parents(key)
        self._dirs.add(key)

    def list_dir(self, path: PurePosixPath) -> list[str]:
        key = _key(path)
        if key not in self._dirs:
            raise NotADirectoryError(f"Not a directory: {key}")
        prefix = "" if key == "." else key + "/"
        names = set()
        for entry in list(self._files) + list(self._dirs):
            if entry == key or not entry.startswith(prefix) or entry == ".":
                continue
            names.add(entry[len(prefix):].split("/", 1)[0])
        return sorted(names)
