"""Assemble a stylesheet from a description and write it to disk."""

import hashlib
from pathlib import Path

from pydantic import BaseModel

from ..context import StyleContext
from ..css.fragment import Fragment
from ..css.render import join_css, render_block, render_rule
from ..mixins.fonts import font_face
from ..mixins.media import retina
from ..mixins.registry import include
from ..mixins.responsive import media
from ..units.length import to_css
from .spec import RuleSpec, StylesheetSpec, load_spec


class BuildResult(BaseModel):
    """Result of building a stylesheet."""

    model_config = {"arbitrary_types_allowed": True}

    output_path: Path | None
    rules_count: int
    font_faces_count: int
    bytes: int
    sha256: str
    warnings: list[str]


def compute_sha256(content: bytes | str) -> str:
    if isinstance(content, str):
        content = content.encode("utf-8")
    return hashlib.sha256(content).hexdigest()


def build_rule(rule: RuleSpec, ctx: StyleContext, warnings: list[str]) -> Fragment:
    """Resolve a rule's includes and declarations into one fragment.

    Includes come first so explicit declarations win by cascade order.
    """
    frag = Fragment()

    for inc in rule.include:
        frag = frag + include(inc.mixin, inc.args, ctx)

    for prop, value in rule.declarations.items():
        frag.add(prop, to_css(value))

    if rule.retina:
        frag = retina(frag)
    if rule.media:
        frag = media(rule.media, frag, ctx)
    return frag


def build_stylesheet(spec: StylesheetSpec) -> tuple[str, list[str]]:
    """Render a full stylesheet.

    Args:
        spec: Validated stylesheet description

    Returns:
        (css_text, warnings)
    """
    ctx = spec.style_context()
    warnings: list[str] = []
    chunks: list[str] = []

    for face in spec.font_faces:
        block = font_face(face.family, face.file, face.path, face.weight, face.style)
        chunks.append(render_block(block))

    for rule in spec.rules:
        frag = build_rule(rule, ctx, warnings)
        if frag.is_empty():
            warnings.append(f"{rule.selector}: rule has no declarations, skipped")
            continue
        chunks.append(render_rule(rule.selector, frag))

    return join_css(chunks), warnings


def write_stylesheet(spec_path: Path, out_path: Path | None = None) -> tuple[str, BuildResult]:
    """Build the stylesheet described by `spec_path`.

    Args:
        spec_path: JSON stylesheet description
        out_path: CSS file to write; None leaves writing to the caller

    Returns:
        (css_text, BuildResult)
    """
    spec = load_spec(spec_path)
    css, warnings = build_stylesheet(spec)

    if out_path is not None:
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(css, encoding="utf-8")

    result = BuildResult(
        output_path=out_path,
        rules_count=len(spec.rules),
        font_faces_count=len(spec.font_faces),
        bytes=len(css.encode("utf-8")),
        sha256=compute_sha256(css),
        warnings=warnings,
    )
    return css, result
