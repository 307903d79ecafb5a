"""
Configuration models — the config file schema and the resolved settings.

``StrapConfig`` mirrors ``strap-config.json`` exactly: every key is optional
and absent keys stay ``None``. ``ResolvedConfig`` is what the rest of the
program sees after CLI flags, file values and defaults have been merged.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from strap.core.models.component import ComponentKind

DEFAULT_BASE_PATH = "src/components"
TEMPLATES_DIR = ".templates"


class StrapConfig(BaseModel):
    """Contents of ``strap-config.json``.

    Keys are camelCase on disk; attributes are snake_case.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    base_path: str | None = Field(default=None, alias="basePath")
    template_path: str | None = Field(default=None, alias="templatePath")
    component_type: str | None = Field(default=None, alias="componentType")
    verbose_output: bool | None = Field(default=None, alias="verboseOutput")
    typescript: bool | None = None
    force: bool | None = None


class ResolvedConfig(BaseModel):
    """Final settings for one invocation. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    base_path: str = DEFAULT_BASE_PATH
    template_path: str = f"{DEFAULT_BASE_PATH}/{TEMPLATES_DIR}"
    component_kind: ComponentKind = ComponentKind.FUNCTIONAL
    verbose: bool = False
    typescript: bool = False
    force: bool = False

    @property
    def extension(self) -> str:
        """Extension for generated files (``.ts`` or ``.js``)."""
        return ".ts" if self.typescript else ".js"
