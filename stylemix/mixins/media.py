"""High-density display media queries."""

from __future__ import annotations

from ..config import RETINA_DPI_PER_RATIO
from ..css.fragment import Fragment
from ..units.length import format_number


def retina_query(ratio: float = 2) -> str:
    return (
        f"@media (-webkit-min-device-pixel-ratio: {format_number(ratio)}), "
        f"(min-resolution: {format_number(ratio * RETINA_DPI_PER_RATIO)}dpi)"
    )


def retina(content: Fragment, ratio: float = 2) -> Fragment:
    """Apply `content` only on screens with at least `ratio` device pixels per CSS pixel."""
    return Fragment().nest(retina_query(ratio), content)
