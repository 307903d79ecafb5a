"""
Component models — what to generate and which template to generate it from.
"""

from __future__ import annotations

from enum import StrEnum
from pathlib import PurePosixPath
from typing import Literal

from pydantic import BaseModel, ConfigDict


class ComponentKind(StrEnum):
    """Style variant of a generated component."""

    FUNCTIONAL = "functional"
    CLASS = "class"

    @classmethod
    def from_config(cls, value: str | None) -> ComponentKind:
        """Map a ``componentType`` config value to a kind.

        Matching is case-sensitive. Anything unrecognised is Functional.
        """
        if value in ("functional", "func"):
            return cls.FUNCTIONAL
        if value == "class":
            return cls.CLASS
        return cls.FUNCTIONAL

    @property
    def label(self) -> str:
        return self.value.capitalize()


class ComponentRequest(BaseModel):
    """A single generation request after name splitting.

    Attributes:
        raw_name:  Name as typed on the command line (``foo/bar/Baz.tsx``).
        name:      Leaf component name, extension stripped (``Baz``).
        directory: Nested directory prefix, possibly empty (``foo/bar``).
        kind:      Functional or Class.
        extension: Extension for generated files (``.js`` / ``.ts``).
        force:     Overwrite an existing component.
    """

    model_config = ConfigDict(frozen=True)

    raw_name: str
    name: str
    directory: str = ""
    kind: ComponentKind = ComponentKind.FUNCTIONAL
    extension: str = ".js"
    force: bool = False


class TemplateRef(BaseModel):
    """Where a component's template lives, if anywhere.

    ``source`` is ``"none"`` when no custom template was found and the
    built-in defaults apply.
    """

    model_config = ConfigDict(frozen=True)

    source: Literal["none", "file", "directory"] = "none"
    path: str | None = None

    @property
    def found(self) -> bool:
        return self.source != "none"

    @classmethod
    def none(cls) -> TemplateRef:
        return cls()

    @classmethod
    def single_file(cls, path: PurePosixPath) -> TemplateRef:
        return cls(source="file", path=str(path))

    @classmethod
    def directory(cls, path: PurePosixPath) -> TemplateRef:
        return cls(source="directory", path=str(path))
