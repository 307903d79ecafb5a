"""
Error types raised by the core.

Core code raises these; only the CLI entrypoint catches them, prints the
message and exits with status 1.
"""

from __future__ import annotations


class StrapError(Exception):
    """Base class for every fatal strap error."""

    #: How the CLI labels the message ("Error" or "Warning").
    label = "Error"


class ConfigError(StrapError):
    """Raised when strap-config.json cannot be read or is invalid."""


class ProjectRootError(StrapError):
    """Raised when strap is not invoked from a project root."""


class InvalidNameError(StrapError):
    """Raised when a component name has no usable leaf."""


class ComponentExistsError(StrapError):
    """Raised when the target component exists and overwrite is off."""

    label = "Warning"


class TemplateIOError(StrapError):
    """Raised when reading a template or writing output fails.

    ``cause`` is the underlying ``OSError``, or the ``UnicodeDecodeError``
    of a template file that is not UTF-8 text.
    """

    def __init__(self, operation: str, path: object, cause: Exception):
        self.operation = operation
        self.path = str(path)
        self.cause = cause
        super().__init__(f"Cannot {operation} {self.path}: {cause}")
