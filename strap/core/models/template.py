"""
Generated file model — one entry of an output plan.
"""

from __future__ import annotations

from pydantic import BaseModel

# Literal token replaced by the component name in template text and in
# directory-template member names.
PLACEHOLDER = "_component"


class GeneratedFile(BaseModel):
    """A file to be written for a component.

    Attributes:
        path:    Path relative to the component directory.
        content: Full file content, placeholder already substituted.
        source:  Template the content came from (``"default:index"``,
                 ``"default:class"`` or a template path).
    """

    path: str
    content: str
    source: str = ""
