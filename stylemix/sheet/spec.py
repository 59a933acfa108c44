"""Stylesheet description model (JSON input)."""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from ..context import StyleContext, default_context


class IncludeSpec(BaseModel):
    """One mixin inclusion inside a rule."""

    mixin: str
    args: dict[str, Any] = Field(default_factory=dict)


class RuleSpec(BaseModel):
    """A selector with included mixins and explicit declarations."""

    selector: str
    include: list[IncludeSpec] = Field(default_factory=list)
    declarations: dict[str, str | int | float] = Field(default_factory=dict)
    media: str | None = None  # breakpoint token wrapping the whole rule
    retina: bool = False


class FontFaceSpec(BaseModel):
    """Arguments for one @font-face block."""

    family: str
    file: str | None = None
    path: str | None = None
    weight: str = "normal"
    style: str = "normal"


class StylesheetSpec(BaseModel):
    """Top-level stylesheet description."""

    context: dict[str, Any] = Field(default_factory=dict)  # StyleContext overrides
    font_faces: list[FontFaceSpec] = Field(default_factory=list)
    rules: list[RuleSpec] = Field(default_factory=list)

    def style_context(self) -> StyleContext:
        """Default context with this sheet's overrides applied (validated)."""
        if not self.context:
            return default_context()
        return StyleContext.model_validate({**default_context().field_values(), **self.context})


def load_spec(path: Path) -> StylesheetSpec:
    """Read and validate a stylesheet description.

    Args:
        path: JSON file

    Returns:
        Validated StylesheetSpec
    """
    data = json.loads(path.read_text(encoding="utf-8"))
    return StylesheetSpec.model_validate(data)
