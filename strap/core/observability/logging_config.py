"""
Logging configuration — one-time setup for the CLI process.

Every module does ``logger = logging.getLogger(__name__)``; this module
decides where those records go. Console output goes to stderr so it
never mixes with ``--json`` output on stdout.

Console level precedence:
    --debug  >  --verbose  >  STRAP_LOG_LEVEL  >  WARNING

STRAP_LOG_FILE adds a file that always receives DEBUG records.
"""

from __future__ import annotations

import logging
import os
import sys

ENV_LEVEL = "STRAP_LOG_LEVEL"
ENV_FILE = "STRAP_LOG_FILE"

# (most verbose level the format applies to, format, date format)
_CONSOLE_FORMATS: list[tuple[int, str, str | None]] = [
    (logging.DEBUG, "%(asctime)s %(levelname)s %(name)s:%(lineno)d %(message)s", "%H:%M:%S"),
    (logging.INFO, "%(asctime)s %(name)s: %(message)s", "%H:%M:%S"),
    (logging.CRITICAL, "%(message)s", None),
]

_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s:%(lineno)d %(message)s"


def level_from_flags(debug: bool = False, verbose: bool = False) -> str:
    """Pick the console level name from CLI flags and the environment."""
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"
    return os.environ.get(ENV_LEVEL, "WARNING")


def parse_level(name: str | None) -> int:
    """Numeric value of a level name; unknown or empty names mean WARNING."""
    if not name:
        return logging.WARNING
    return logging.getLevelNamesMapping().get(name.upper(), logging.WARNING)


def _console_handler(level: int) -> logging.Handler:
    fmt, datefmt = next(
        (f, d) for threshold, f, d in _CONSOLE_FORMATS if level <= threshold
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    return handler


def setup_logging(level: str = "WARNING", log_file: str | None = None) -> None:
    """Configure the root logger, replacing any handlers already on it.

    Args:
        level: Console level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional path of a file that receives every DEBUG record.
    """
    console_level = parse_level(level)
    handlers = [_console_handler(console_level)]

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
        handlers.append(file_handler)

    root = logging.getLogger()
    root.handlers[:] = handlers
    root.setLevel(min(h.level for h in handlers))
    logging.raiseExceptions = False


def setup_cli_logging(debug: bool = False, verbose: bool = False) -> None:
    """``setup_logging`` driven by CLI flags and STRAP_* env vars."""
    setup_logging(level_from_flags(debug, verbose), os.environ.get(ENV_FILE))
