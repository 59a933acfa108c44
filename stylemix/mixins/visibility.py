"""Accessible hiding: remove from visual flow, keep for screen readers."""

from __future__ import annotations

from ..context import StyleContext, resolve_context
from ..css.fragment import Fragment


def visually_hidden(context: StyleContext | None = None) -> Fragment:
    ctx = resolve_context(context)
    frag = Fragment().add("position", "absolute", important=True)
    if ctx.legacy_ie:
        # IE6/7 only understand the space-separated form
        frag.add("clip", "rect(1px 1px 1px 1px)")
    return (
        frag.add("clip", "rect(1px, 1px, 1px, 1px)")
        .add("height", "1px")
        .add("width", "1px")
        .add("overflow", "hidden")
        .add("padding", "0")
        .add("border", "0")
        .add("white-space", "nowrap")
    )


def visually_shown() -> Fragment:
    """Undo `visually_hidden`, e.g. for skip links on focus."""
    return (
        Fragment()
        .add("position", "static", important=True)
        .add("clip", "auto")
        .add("height", "auto")
        .add("width", "auto")
        .add("overflow", "visible")
        .add("white-space", "normal")
    )
