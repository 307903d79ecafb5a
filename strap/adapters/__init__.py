"""Adapters — filesystem bindings for the core.

Public re-exports for convenient access.
"""

from strap.adapters.filesystem import Filesystem, LocalFilesystem
from strap.adapters.memory import MemoryFilesystem

__all__ = [
    "Filesystem",
    "LocalFilesystem",
    "MemoryFilesystem",
]
