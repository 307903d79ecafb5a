"""strap — scaffold UI component boilerplate from templates."""

__version__ = "0.1.0"
