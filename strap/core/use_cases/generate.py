"""
Generate use case — resolve a component request and write its files.

Takes the raw NAME from the command line plus the resolved config and:

    1. checks that it runs from a project root,
    2. splits NAME into a directory prefix and a leaf name,
    3. refuses to touch an existing component unless forced,
    4. locates a custom template (or falls back to the defaults),
    5. builds the output plan and writes it.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import PurePosixPath
from typing import Any

from strap.adapters.filesystem import Filesystem
from strap.core.errors import ComponentExistsError, InvalidNameError, ProjectRootError
from strap.core.models.component import ComponentRequest, TemplateRef
from strap.core.models.config import ResolvedConfig
from strap.core.models.template import GeneratedFile
from strap.core.services.template_expander import build_plan, write_plan
from strap.core.services.template_locator import locate

logger = logging.getLogger(__name__)

# File that marks the project root
PROJECT_MARKER = "package.json"

_SEPARATORS = re.compile(r"[/\\]")


@dataclass
class GenerateResult:
    """Outcome of a generate request."""

    request: ComponentRequest
    config: ResolvedConfig
    template: TemplateRef
    output_dir: PurePosixPath
    plan: list[GeneratedFile] = field(default_factory=list)
    written: list[str] = field(default_factory=list)
    dry_run: bool = False

    @property
    def component_dir(self) -> PurePosixPath:
        return self.output_dir / self.request.name

    @property
    def display_path(self) -> str:
        """Where the component went, as shown to the user."""
        return str(self.output_dir)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.request.name,
            "path": str(self.component_dir),
            "kind": self.request.kind.value,
            "extension": self.request.extension,
            "template": self.template.path,
            "files": [str(self.component_dir / f.path) for f in self.plan],
            "dry_run": self.dry_run,
        }


def split_name(raw_name: str) -> tuple[str, str]:
    """Split NAME into ``(directory prefix, leaf name)``.

    The leaf loses anything from its first ``.`` onward, so
    ``foo/bar/Baz.tsx`` becomes ``("foo/bar", "Baz")``.

    Raises:
        InvalidNameError: If no leaf name is left.
    """
    parts = _SEPARATORS.split(raw_name.strip())
    leaf = parts[-1].split(".")[0]
    directory = "/".join(p for p in parts[:-1] if p)
    if not leaf:
        raise InvalidNameError(f'"{raw_name}" is not a valid component name')
    return directory, leaf


def build_request(raw_name: str, config: ResolvedConfig) -> ComponentRequest:
    """Combine NAME with the resolved config into a request."""
    directory, name = split_name(raw_name)
    return ComponentRequest(
        raw_name=raw_name,
        name=name,
        directory=directory,
        kind=config.component_kind,
        extension=config.extension,
        force=config.force,
    )


def check_project_root(fs: Filesystem) -> None:
    """Raise ``ProjectRootError`` unless the project marker is present."""
    if not fs.is_file(PurePosixPath(PROJECT_MARKER)):
        raise ProjectRootError("Invoke strap from your project's root directory")


def generate_component(
    fs: Filesystem,
    raw_name: str,
    config: ResolvedConfig,
    *,
    use_template_extension: bool = False,
    dry_run: bool = False,
) -> GenerateResult:
    """Generate one component.

    Args:
        fs: Filesystem rooted at the project.
        raw_name: NAME as typed, possibly with a nested path and extension.
        config: Resolved configuration for this invocation.
        use_template_extension: Take member extensions from directory
            template file names instead of the configured extension.
        dry_run: Build the plan but write nothing.

    Raises:
        ProjectRootError: Not run from a project root.
        InvalidNameError: NAME has no leaf.
        ComponentExistsError: The component exists and overwrite is off.
        TemplateIOError: A template read or an output write failed.
    """
    check_project_root(fs)

    request = build_request(raw_name, config)
    output_dir = PurePosixPath(config.base_path) / request.directory
    component_dir = output_dir / request.name

    if fs.exists(component_dir):
        if not request.force:
            raise ComponentExistsError(
                f'A component with name "{request.name}" already exists'
            )
        logger.info("Overwriting existing component at %s", component_dir)

    template = locate(fs, config, request.kind)
    plan = build_plan(fs, template, request, use_template_extension)

    result = GenerateResult(
        request=request,
        config=config,
        template=template,
        output_dir=output_dir,
        plan=plan,
        dry_run=dry_run,
    )

    if dry_run:
        logger.info("Dry run: %d file(s) planned, nothing written", len(plan))
        return result

    result.written = write_plan(fs, plan, component_dir)
    return result
