"""
Template locator — find the custom template for a component kind.

Looks in the template root for ``<kind>.js`` (single-file template) and
then ``<kind>`` (directory template). The first one that exists wins.
Nothing else is matched.
"""

from __future__ import annotations

import logging
from pathlib import PurePosixPath

from strap.adapters.filesystem import Filesystem
from strap.core.models.component import ComponentKind, TemplateRef
from strap.core.models.config import ResolvedConfig

logger = logging.getLogger(__name__)

SINGLE_FILE_SUFFIX = ".js"


def candidates(template_root: PurePosixPath, kind: ComponentKind) -> list[PurePosixPath]:
    """Template paths checked for ``kind``, in precedence order."""
    return [
        template_root / f"{kind.value}{SINGLE_FILE_SUFFIX}",
        template_root / kind.value,
    ]


def locate(fs: Filesystem, config: ResolvedConfig, kind: ComponentKind) -> TemplateRef:
    """Return the template to use for ``kind``, or ``TemplateRef.none()``.

    A single-file template takes priority over a directory template of the
    same kind.
    """
    template_root = PurePosixPath(config.template_path)

    for candidate in candidates(template_root, kind):
        logger.debug("Checking template candidate %s", candidate)
        if not fs.exists(candidate):
            continue
        if fs.is_dir(candidate):
            ref = TemplateRef.directory(candidate)
        else:
            ref = TemplateRef.single_file(candidate)
        logger.info("Using %s template %s", ref.source, candidate)
        return ref

    logger.info("No custom %s template under %s", kind.value, template_root)
    return TemplateRef.none()
