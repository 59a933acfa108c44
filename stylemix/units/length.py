"""Length values: parsing, rounding and number formatting."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel

from ..config import NUMBER_PRECISION

# Sign, magnitude, unit. Units are letters or a percent sign; no unit means unitless.
LENGTH_PATTERN = re.compile(r"^(?P<number>[-+]?(?:\d+\.?\d*|\.\d+))(?P<unit>[a-zA-Z]+|%)?$")


class Length(BaseModel):
    """A numeric magnitude tagged with a unit of measure."""

    model_config = {"frozen": True}

    value: float
    unit: str = ""

    def __str__(self) -> str:
        return f"{format_number(self.value)}{self.unit}"

    @property
    def is_px(self) -> bool:
        return self.unit == "px"

    @property
    def is_rem(self) -> bool:
        return self.unit == "rem"


def format_number(value: float, precision: int = NUMBER_PRECISION) -> str:
    """Render a number the way the Sass compiler prints it.

    Args:
        value: Number to render
        precision: Maximum decimal places kept

    Returns:
        Shortest decimal string, e.g. 0.625, 2, -1.5
    """
    text = f"{value:.{precision}f}".rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero (Sass `round()`)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def parse_length(token: Any) -> Length | None:
    """Classify one component of a value list.

    Args:
        token: Length, number or CSS token string

    Returns:
        Length for numeric components, None for anything to pass through
    """
    if isinstance(token, Length):
        return token
    if isinstance(token, bool):
        return None
    if isinstance(token, (int, float)):
        return Length(value=float(token))
    if not isinstance(token, str):
        return None

    match = LENGTH_PATTERN.match(token.strip())
    if not match:
        return None
    return Length(value=float(match.group("number")), unit=(match.group("unit") or "").lower())


def split_values(values: Any) -> list[Any]:
    """Normalize a value list argument to an ordered list of components.

    Strings are split on whitespace ("10px auto 2rem"); scalars become a
    one-element list; other iterables keep their order, with string items
    split the same way (["10px auto", "2rem"] has three components).
    """
    if isinstance(values, str):
        return values.split()
    if isinstance(values, (Length, int, float)):
        return [values]
    if isinstance(values, Iterable):
        return [part for v in values for part in (v.split() if isinstance(v, str) else [v])]
    return [values]


def to_css(token: Any) -> str:
    """Render a pass-through component unchanged."""
    if isinstance(token, float):
        return format_number(token)
    return str(token)
