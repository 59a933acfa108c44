"""CSS border triangles."""

from __future__ import annotations

from ..context import StyleContext, resolve_context
from ..css.fragment import Fragment
from .tokens import Direction, parse_token

# direction -> (transparent sides, coloured side)
ARROW_BORDERS = {
    Direction.UP: (("left", "right"), "bottom"),
    Direction.DOWN: (("left", "right"), "top"),
    Direction.LEFT: (("top", "bottom"), "right"),
    Direction.RIGHT: (("top", "bottom"), "left"),
}


def arrow(
    direction: str | Direction = Direction.DOWN,
    size: str = "5px",
    color: str = "currentColor",
    context: StyleContext | None = None,
) -> Fragment:
    """Zero-size box whose borders draw a triangle pointing `direction`."""
    ctx = resolve_context(context)
    sides, filled = ARROW_BORDERS[parse_token(Direction, direction)]

    frag = Fragment().add("width", "0").add("height", "0")
    for side in sides:
        frag.add(f"border-{side}", f"{size} solid transparent")
    return frag.add(f"border-{filled}", f"{size} solid {ctx.color(color)}")
