"""Mako template for the generated routes module."""

from __future__ import annotations

from typing import TYPE_CHECKING

from mako.template import Template

if TYPE_CHECKING:
    from pagewright.emit.emitter import GeneratedArtifact

# Values are embedded with repr() so any page text becomes a valid literal.
MODULE_TEMPLATE = Template(
    '''"""Page routes generated by pagewright from ${source}.

Do not edit by hand; rerun ``pagewright generate`` instead.
"""

# ruff: noqa

HOME = ${repr(artifact.home)}

ROUTES = [
% for route in artifact.routes:
    (${repr(route.path)}, ${repr(route.identifier)}, ${repr(route.params)}),
% endfor
]
% for view in artifact.views:


def ${view.identifier}():
    return {
        "title": ${repr(view.title)},
        "content": ${repr(view.content)},
        "home": HOME,
    }
% endfor


VIEWS = {
% for view in artifact.views:
    ${repr(view.identifier)}: ${view.identifier},
% endfor
}
'''
)


def render_module(artifact: GeneratedArtifact, *, source: str = "pages") -> str:
    """Render *artifact* as Python source.

    Args:
        artifact: Emitted route table and views.
        source: Pages directory as shown in the module docstring.

    """
    return MODULE_TEMPLATE.render(artifact=artifact, source=source)
