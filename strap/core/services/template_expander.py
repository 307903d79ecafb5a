"""
Template expander — turn a located template into files on disk.

Expansion happens in two phases:

    1. ``build_plan`` reads every template file and produces the full
       output plan (relative path + substituted content) in memory.
    2. ``write_plan`` creates the component directory and writes the plan.

A read failure therefore aborts before anything is written. A write
failure aborts immediately; files already written stay on disk.
"""

from __future__ import annotations

import logging
from pathlib import PurePosixPath

from strap.adapters.filesystem import Filesystem
from strap.core.errors import TemplateIOError
from strap.core.models.component import ComponentRequest, TemplateRef
from strap.core.models.template import PLACEHOLDER, GeneratedFile
from strap.core.services.default_templates import default_plan

logger = logging.getLogger(__name__)


def substitute(text: str, name: str) -> str:
    """Replace every occurrence of the placeholder with ``name``."""
    return text.replace(PLACEHOLDER, name)


def template_extension(filename: str) -> str:
    """Extension encoded in a template member name.

    Everything from the first ``.`` onward: ``_component.spec.js`` gives
    ``.spec.js``. A name without a dot has no extension.
    """
    dot = filename.find(".")
    return "" if dot < 0 else filename[dot:]


def member_name(
    filename: str,
    request: ComponentRequest,
    use_template_extension: bool = False,
) -> str:
    """Output name for a directory-template member.

    Members whose name contains the placeholder become ``<name><ext>``;
    any other member keeps its name.
    """
    if PLACEHOLDER not in filename:
        return filename
    extension = template_extension(filename) if use_template_extension else request.extension
    return f"{request.name}{extension}"


# ── Planning ────────────────────────────────────────────────────


def _read(fs: Filesystem, path: PurePosixPath) -> str:
    try:
        return fs.read_text(path)
    except (OSError, UnicodeDecodeError) as e:
        raise TemplateIOError("read", path, e) from e


def _plan_single_file(
    fs: Filesystem, template: PurePosixPath, request: ComponentRequest
) -> list[GeneratedFile]:
    content = substitute(_read(fs, template), request.name)
    return [
        GeneratedFile(
            path=f"{request.name}{request.extension}",
            content=content,
            source=str(template),
        )
    ]


def _plan_directory(
    fs: Filesystem,
    template_dir: PurePosixPath,
    request: ComponentRequest,
    use_template_extension: bool,
    prefix: PurePosixPath = PurePosixPath(),
) -> list[GeneratedFile]:
    try:
        entries = fs.list_dir(template_dir)
    except OSError as e:
        raise TemplateIOError("list", template_dir, e) from e

    plan: list[GeneratedFile] = []
    for entry in entries:
        source = template_dir / entry
        if fs.is_dir(source):
            # Subdirectories are mirrored under the same name.
            plan.extend(
                _plan_directory(
                    fs, source, request, use_template_extension, prefix / entry
                )
            )
            continue

        target = prefix / member_name(entry, request, use_template_extension)
        plan.append(
            GeneratedFile(
                path=str(target),
                content=substitute(_read(fs, source), request.name),
                source=str(source),
            )
        )
    return plan


def build_plan(
    fs: Filesystem,
    template: TemplateRef,
    request: ComponentRequest,
    use_template_extension: bool = False,
) -> list[GeneratedFile]:
    """Materialise every output file for ``request`` without writing.

    Raises:
        TemplateIOError: If a template file or directory cannot be read.
    """
    if template.source == "none":
        plan = default_plan(request)
    elif template.source == "file":
        plan = _plan_single_file(fs, PurePosixPath(template.path), request)
    elif template.source == "directory":
        plan = _plan_directory(
            fs, PurePosixPath(template.path), request, use_template_extension
        )
    else:
        raise ValueError(f"Unknown template source: {template.source!r}")

    seen: set[str] = set()
    for item in plan:
        if item.path in seen:
            logger.warning(
                "Template maps more than one file to %s; the last one wins", item.path
            )
        seen.add(item.path)

    logger.debug("Planned %d file(s) for %s", len(plan), request.name)
    return plan


# ── Writing ─────────────────────────────────────────────────────


def write_plan(
    fs: Filesystem,
    plan: list[GeneratedFile],
    component_dir: PurePosixPath,
) -> list[str]:
    """Write ``plan`` under ``component_dir``, creating directories as needed.

    Returns:
        Paths written, relative to the project root.

    Raises:
        TemplateIOError: On the first directory or write failure.
    """
    written: list[str] = []
    try:
        fs.mkdir(component_dir)
    except OSError as e:
        raise TemplateIOError("create directory", component_dir, e) from e
    created = {component_dir}

    for item in plan:
        target = component_dir / item.path
        parent = target.parent
        if parent not in created:
            try:
                fs.mkdir(parent)
            except OSError as e:
                raise TemplateIOError("create directory", parent, e) from e
            created.add(parent)

        try:
            fs.write_text(target, item.content)
        except OSError as e:
            raise TemplateIOError("write", target, e) from e

        logger.info("Wrote %s", target)
        written.append(str(target))

    return written
