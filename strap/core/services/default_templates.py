"""
Default templates — built-in fallbacks used when no custom template exists.

Produces an ``index`` re-export plus one component file whose body depends
on the component kind.
"""

from __future__ import annotations

from strap.core.models.component import ComponentKind, ComponentRequest
from strap.core.models.template import PLACEHOLDER, GeneratedFile


# ── Template text ───────────────────────────────────────────────


INDEX_TEMPLATE = f"""\
export {{ default }} from "./{PLACEHOLDER}";
"""

FUNCTIONAL_TEMPLATE = f"""\
import React from "react";

const {PLACEHOLDER} = () => {{
  return <div>{PLACEHOLDER}</div>;
}};

export default {PLACEHOLDER};
"""

CLASS_TEMPLATE = f"""\
import React, {{ Component }} from "react";

class {PLACEHOLDER} extends Component {{
  render() {{
    return <div>{PLACEHOLDER}</div>;
  }}
}}

export default {PLACEHOLDER};
"""

_KIND_TEMPLATES: dict[ComponentKind, str] = {
    ComponentKind.FUNCTIONAL: FUNCTIONAL_TEMPLATE,
    ComponentKind.CLASS: CLASS_TEMPLATE,
}


def default_plan(request: ComponentRequest) -> list[GeneratedFile]:
    """Build the output plan for a component from the built-in templates.

    Returns ``index<ext>`` followed by ``<name><ext>``, both with every
    placeholder replaced by the component name.
    """
    name, ext = request.name, request.extension
    return [
        GeneratedFile(
            path=f"index{ext}",
            content=INDEX_TEMPLATE.replace(PLACEHOLDER, name),
            source="default:index",
        ),
        GeneratedFile(
            path=f"{name}{ext}",
            content=_KIND_TEMPLATES[request.kind].replace(PLACEHOLDER, name),
            source=f"default:{request.kind.value}",
        ),
    ]
