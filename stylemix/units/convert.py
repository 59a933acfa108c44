"""Unit conversion: px/rem dual declarations and px-to-em/percentage functions.

The `rem` mixin emits a pixel declaration first (when the fallback flag is on)
and the rem declaration second, so browsers with rem support use the latter.
"""

from __future__ import annotations

import warnings
from typing import Any

from ..context import StyleContext, resolve_context
from ..css.fragment import Fragment
from .length import Length, parse_length, round_half_up, split_values, to_css


def convert_lengths(values: Any, base_font_size: float) -> tuple[list[str], list[str]]:
    """Convert a value list into parallel px and rem token lists.

    Args:
        values: Value list ("10px auto 2rem", a list of tokens, or one token)
        base_font_size: Pixels per rem

    Returns:
        (px_values, rem_values), both the same length as the input
    """
    px_values: list[str] = []
    rem_values: list[str] = []

    for token in split_values(values):
        length = parse_length(token)
        if length is not None and length.value == 0:
            # Zero needs no conversion: emitted as written in both lists
            length = None
        if length is not None and length.is_px:
            px_values.append(str(Length(value=round_half_up(length.value), unit="px")))
            rem_values.append(str(Length(value=length.value / base_font_size, unit="rem")))
        elif length is not None and length.is_rem:
            px_values.append(str(Length(value=round_half_up(length.value * base_font_size), unit="px")))
            rem_values.append(str(length))
        else:
            passthrough = to_css(token)
            px_values.append(passthrough)
            rem_values.append(passthrough)

    return px_values, rem_values


def rem(
    property: str,
    values: Any,
    fallback: bool | None = None,
    context: StyleContext | None = None,
) -> Fragment:
    """Emit `property` in rem, optionally preceded by a px fallback.

    Args:
        property: CSS property name (e.g. "margin")
        values: Value list in px and/or rem; other tokens pass through
        fallback: Emit the px declaration; None uses the context default
        context: Style context supplying base font size and fallback default

    Returns:
        Fragment with the px declaration (if any) followed by the rem one

    Raises:
        ValueError: If `values` is empty
    """
    ctx = resolve_context(context)
    if fallback is None:
        fallback = ctx.rem_fallback

    px_values, rem_values = convert_lengths(values, ctx.base_font_size)
    if not rem_values:
        raise ValueError(f"rem: no values given for {property!r}")

    frag = Fragment()
    if fallback:
        frag.add(property, " ".join(px_values))
    frag.add(property, " ".join(rem_values))
    return frag


def _magnitude(value: Any, name: str) -> float:
    length = parse_length(value)
    if length is None:
        raise ValueError(f"{name} must be a number or length, got {value!r}")
    if length.unit not in ("", "px"):
        warnings.warn(f"{name} {length} is not in px; using its magnitude as pixels")
    return length.value


def px_to_rem(px: Any, context: StyleContext | None = None) -> Length:
    """Convert a pixel value to rem against the base font size."""
    ctx = resolve_context(context)
    return Length(value=_magnitude(px, "px") / ctx.base_font_size, unit="rem")


def px_to_em(px: Any, context: Any = None) -> Length:
    """Convert a pixel value to em.

    Args:
        px: Pixel value (number or px length)
        context: Pixel size of the parent font; defaults to the base font size

    Returns:
        Length in em
    """
    if context is None:
        base = resolve_context(None).base_font_size
    elif isinstance(context, StyleContext):
        base = context.base_font_size
    else:
        base = _magnitude(context, "context")
    if base == 0:
        raise ValueError("context must be non-zero")
    return Length(value=_magnitude(px, "px") / base, unit="em")


def px_to_percent(target: Any, context: Any) -> Length:
    """Express `target` as a percentage of `context` (fluid widths)."""
    base = _magnitude(context, "context")
    if base == 0:
        raise ValueError("context must be non-zero")
    return Length(value=_magnitude(target, "target") / base * 100, unit="%")
