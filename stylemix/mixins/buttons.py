"""Button styling."""

from __future__ import annotations

import colorsys
import re

from ..context import StyleContext, resolve_context
from ..css.fragment import Fragment
from ..units.length import round_half_up

HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def _hex_to_rgb(code: str) -> tuple[int, int, int]:
    code = code.lstrip("#")
    if len(code) == 3:
        code = f"{code[0]*2}{code[1]*2}{code[2]*2}"
    return int(code[0:2], 16), int(code[2:4], 16), int(code[4:6], 16)


def darken(color: str, amount: float = 10) -> str:
    """Reduce HSL lightness by `amount` percentage points.

    Only hex colours are adjusted; keywords, rgb() and variables are returned as-is.
    """
    if not HEX_COLOR.match(color):
        return color

    r, g, b = (c / 255 for c in _hex_to_rgb(color))
    h, lightness, s = colorsys.rgb_to_hls(r, g, b)
    lightness = max(0.0, lightness - amount / 100)
    r, g, b = colorsys.hls_to_rgb(h, lightness, s)
    return "#" + "".join(f"{round_half_up(c * 255):02x}" for c in (r, g, b))


def button(
    background: str = "primary",
    color: str = "white",
    padding: str = "10px 20px",
    radius: str = "3px",
    context: StyleContext | None = None,
) -> Fragment:
    ctx = resolve_context(context)
    background = ctx.color(background)

    frag = Fragment().add("display", "inline-block")
    if ctx.legacy_ie:
        frag.add("*display", "inline").add("*zoom", "1")
    frag = (
        frag.add("padding", padding)
        .add("background-color", background)
        .add("color", ctx.color(color))
        .add("border", "0")
        .add("border-radius", radius)
        .add("cursor", "pointer")
        .add("text-align", "center")
        .add("text-decoration", "none")
    )
    return frag.nest("&:hover, &:focus", Fragment().add("background-color", darken(background)))
