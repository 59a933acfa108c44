"""Fragment model and CSS rendering."""

from .fragment import Block, Declaration, Fragment, fragment
from .render import flatten, join_css, render_block, render_fragment, render_rule

__all__ = [
    "Block",
    "Declaration",
    "Fragment",
    "fragment",
    "flatten",
    "join_css",
    "render_block",
    "render_fragment",
    "render_rule",
]
