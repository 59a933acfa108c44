"""Explicit style configuration shared by the mixins."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from pydantic import BaseModel, Field, field_validator

from .config import (
    BASE_FONT_SIZE,
    DEFAULT_BREAKPOINTS,
    DEFAULT_COLORS,
    DEFAULT_FONT_STACK,
    GUTTER_WIDTH,
    LEGACY_IE,
    REM_FALLBACK,
)


class StyleContext(BaseModel):
    """Read-only configuration consumed by mixins (breakpoints, palette, sizes)."""

    model_config = {"frozen": True, "extra": "forbid"}

    base_font_size: float = Field(default=BASE_FONT_SIZE, gt=0)
    rem_fallback: bool = REM_FALLBACK
    legacy_ie: bool = LEGACY_IE
    gutter_width: str = GUTTER_WIDTH
    breakpoints: Mapping[str, str] = Field(default_factory=lambda: MappingProxyType(dict(DEFAULT_BREAKPOINTS)))
    colors: Mapping[str, str] = Field(default_factory=lambda: MappingProxyType(dict(DEFAULT_COLORS)))
    font_stack: tuple[str, ...] = tuple(DEFAULT_FONT_STACK)

    @field_validator("breakpoints", "colors", mode="after")
    @classmethod
    def _read_only(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))

    def field_values(self) -> dict[str, object]:
        """Field values, suitable for re-validation with changes applied."""
        return {name: getattr(self, name) for name in type(self).model_fields}

    def media_query(self, breakpoint: str) -> str:
        """Resolve a breakpoint token to its media condition."""
        try:
            return self.breakpoints[breakpoint]
        except KeyError:
            known = ", ".join(sorted(self.breakpoints)) or "none"
            raise ValueError(f"Unknown breakpoint {breakpoint!r} (known: {known})") from None

    def color(self, value: str) -> str:
        """Resolve a palette name; literal colours are returned unchanged."""
        return self.colors.get(value, value)


_default: StyleContext | None = None


def default_context() -> StyleContext:
    """Get the context built from config defaults."""
    global _default
    if _default is None:
        _default = StyleContext()
    return _default


def resolve_context(context: StyleContext | None) -> StyleContext:
    return context if context is not None else default_context()
