"""@font-face generation."""

from __future__ import annotations

from ..context import StyleContext, resolve_context
from ..css.fragment import Block, Fragment

# (extension, format) in emission order: legacy EOT first for old IE.
FONT_FORMATS = (
    ("eot?#iefix", "embedded-opentype"),
    ("woff2", "woff2"),
    ("woff", "woff"),
    ("ttf", "truetype"),
)


def font_sources(file: str, path: str) -> list[str]:
    """One `url() format()` entry per font format."""
    base = path.rstrip("/")
    return [f'url("{base}/{file}.{ext}") format("{fmt}")' for ext, fmt in FONT_FORMATS]


def font_face(
    family: str,
    file: str | None = None,
    path: str | None = None,
    weight: str = "normal",
    style: str = "normal",
) -> Block:
    """Build an `@font-face` block.

    Args:
        family: Font family name
        file: File name without extension (defaults to the family)
        path: Directory holding the files (defaults to the family)
        weight: font-weight descriptor
        style: font-style descriptor

    Returns:
        Top-level `@font-face` block
    """
    file = file or family
    path = path or family

    body = (
        Fragment()
        .add("font-family", f'"{family}"')
        .add("src", ", ".join(font_sources(file, path)))
        .add("font-weight", weight)
        .add("font-style", style)
    )
    return Block(prelude="@font-face", body=body)


def font_stack(context: StyleContext | None = None) -> Fragment:
    ctx = resolve_context(context)
    return Fragment().add("font-family", ", ".join(ctx.font_stack))
