"""
Domain models — Pydantic types for strap.

All models are re-exported here for convenient access:

    from strap.core.models import ComponentKind, ResolvedConfig, TemplateRef
"""

from strap.core.models.component import ComponentKind, ComponentRequest, TemplateRef
from strap.core.models.config import ResolvedConfig, StrapConfig
from strap.core.models.template import GeneratedFile

__all__ = [
    # component.py
    "ComponentKind",
    "ComponentRequest",
    # template.py
    "GeneratedFile",
    # config.py
    "ResolvedConfig",
    "StrapConfig",
    "TemplateRef",
]
