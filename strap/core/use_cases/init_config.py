"""
Init use case — write a strap-config.json populated with the defaults.
"""

from __future__ import annotations

import json
import logging
from pathlib import PurePosixPath

from strap.adapters.filesystem import Filesystem
from strap.core.config.loader import CONFIG_FILE, default_config
from strap.core.errors import ConfigError

logger = logging.getLogger(__name__)


def render_default_config() -> str:
    """The default config as pretty-printed JSON."""
    data = default_config().model_dump(by_alias=True)
    return json.dumps(data, indent=2) + "\n"


def write_default_config(fs: Filesystem, filename: str = CONFIG_FILE) -> str:
    """Write the default config to the project root, replacing any existing one.

    Returns:
        The path written, relative to the project root.
    """
    path = PurePosixPath(filename)
    if fs.exists(path):
        logger.info("Replacing existing %s", path)
    try:
        fs.write_text(path, render_default_config())
    except OSError as e:
        raise ConfigError(f"Cannot write {path}: {e}") from e
    return str(path)
