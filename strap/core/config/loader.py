"""
Configuration loader — reads strap-config.json into domain models.

Reads JSON, validates against the ``StrapConfig`` schema, and merges it
with command-line flags into a ``ResolvedConfig``.
"""

from __future__ import annotations

import json
import logging
from pathlib import PurePosixPath

from pydantic import ValidationError

from strap.adapters.filesystem import Filesystem
from strap.core.errors import ConfigError
from strap.core.models.component import ComponentKind
from strap.core.models.config import (
    DEFAULT_BASE_PATH,
    TEMPLATES_DIR,
    ResolvedConfig,
    StrapConfig,
)

logger = logging.getLogger(__name__)

# Default config filename
CONFIG_FILE = "strap-config.json"

__all__ = ["CONFIG_FILE", "ConfigError", "load_config", "resolve_config", "default_config"]


def load_config(fs: Filesystem, filename: str = CONFIG_FILE) -> StrapConfig:
    """Load the config file from the project root.

    Args:
        fs: Filesystem rooted at the project.
        filename: Config file name relative to the root.

    Returns:
        The parsed config. A missing file yields an all-empty config.

    Raises:
        ConfigError: If the file cannot be read, is not JSON, or does not
            match the schema.
    """
    path = PurePosixPath(filename)
    if not fs.is_file(path):
        logger.debug("No %s found, using defaults", filename)
        return StrapConfig()

    logger.debug("Loading config from %s", filename)

    try:
        raw = fs.read_text(path)
    except OSError as e:
        raise ConfigError(f"Cannot read {filename}: {e}") from e
    except UnicodeDecodeError as e:
        raise ConfigError(f"{filename} is not valid UTF-8: {e}") from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {filename}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a JSON object in {filename}, got {type(data).__name__}")

    try:
        return StrapConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {filename}: {e}") from e


def resolve_config(
    config: StrapConfig,
    *,
    func: bool = False,
    cls: bool = False,
    verbose: bool = False,
    typescript: bool = False,
    force: bool = False,
) -> ResolvedConfig:
    """Merge CLI flags over file values over hard-coded defaults.

    Boolean flags can only switch a setting on; a ``false`` in the file
    and an absent flag both leave it off.
    """
    base_path = config.base_path if config.base_path is not None else DEFAULT_BASE_PATH
    template_path = config.template_path
    if template_path is None:
        template_path = f"{base_path}/{TEMPLATES_DIR}" if base_path else TEMPLATES_DIR

    kind = ComponentKind.from_config(config.component_type)
    if cls:
        kind = ComponentKind.CLASS
    if func:
        kind = ComponentKind.FUNCTIONAL

    return ResolvedConfig(
        base_path=base_path,
        template_path=template_path,
        component_kind=kind,
        verbose=verbose or bool(config.verbose_output),
        typescript=typescript or bool(config.typescript),
        force=force or bool(config.force),
    )


def default_config() -> StrapConfig:
    """The config written by ``strap --init``."""
    return StrapConfig(
        base_path=DEFAULT_BASE_PATH,
        template_path=f"{DEFAULT_BASE_PATH}/{TEMPLATES_DIR}",
        component_type=ComponentKind.FUNCTIONAL.value,
        typescript=False,
        verbose_output=False,
        force=False,
    )
