"""Breakpoint-gated display helpers."""

from __future__ import annotations

from ..context import StyleContext, resolve_context
from ..css.fragment import Fragment


def media(breakpoint: str, content: Fragment, context: StyleContext | None = None) -> Fragment:
    """Wrap `content` in the media query for `breakpoint`."""
    ctx = resolve_context(context)
    return Fragment().nest(f"@media {ctx.media_query(breakpoint)}", content)


def hide_until(breakpoint: str, display: str = "block", context: StyleContext | None = None) -> Fragment:
    """Hidden below `breakpoint`, displayed from it upwards."""
    body = Fragment().add("display", display)
    return Fragment().add("display", "none").merge(media(breakpoint, body, context))


def show_until(breakpoint: str, context: StyleContext | None = None) -> Fragment:
    """Displayed below `breakpoint`, hidden from it upwards."""
    return media(breakpoint, Fragment().add("display", "none"), context)
