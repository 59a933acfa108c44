"""Positioning helpers: centering, vertical alignment, grid gutters."""

from __future__ import annotations

from ..context import StyleContext, resolve_context
from ..css.fragment import Fragment
from ..units.length import Length, parse_length
from .tokens import Axis, parse_token


def center(axis: str | Axis = Axis.BOTH) -> Fragment:
    """Absolutely center an element inside its positioned parent."""
    axis = parse_token(Axis, axis)
    frag = Fragment().add("position", "absolute")

    if axis is Axis.BOTH:
        return frag.add("top", "50%").add("left", "50%").add("transform", "translate(-50%, -50%)")
    if axis is Axis.HORIZONTAL:
        return frag.add("left", "50%").add("transform", "translate(-50%, 0)")
    # Legacy vertical offset: unitless and positive, unlike the horizontal branch.
    return frag.add("top", "50%").add("transform", "translate(0, 50)")


def vertical_align() -> Fragment:
    return Fragment().add("position", "relative").add("top", "50%").add("transform", "translateY(-50%)")


def half_gutter(gutter: str, sign: int = 1) -> str:
    length = parse_length(gutter)
    if length is None:
        return f"calc({gutter} / {2 * sign})"
    return str(Length(value=sign * length.value / 2, unit=length.unit))


def gutters(context: StyleContext | None = None) -> Fragment:
    """Row offset: pull the row out by half a gutter on each side."""
    ctx = resolve_context(context)
    offset = half_gutter(ctx.gutter_width, -1)
    return Fragment().add("margin-left", offset).add("margin-right", offset)


def gutter_padding(context: StyleContext | None = None) -> Fragment:
    """Column spacing: half a gutter of padding on each side."""
    ctx = resolve_context(context)
    inset = half_gutter(ctx.gutter_width)
    return Fragment().add("padding-left", inset).add("padding-right", inset)
