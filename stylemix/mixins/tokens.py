"""Closed token sets for parameter-driven mixin variants."""

from __future__ import annotations

from enum import Enum
from typing import TypeVar

E = TypeVar("E", bound=Enum)


class Axis(str, Enum):
    BOTH = "both"
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class Direction(str, Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


def parse_token(enum_cls: type[E], value: str | E) -> E:
    """Coerce a caller token into `enum_cls`, rejecting anything else."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).strip().lower())
    except ValueError:
        accepted = ", ".join(m.value for m in enum_cls)
        raise ValueError(f"Unknown {enum_cls.__name__.lower()} {value!r} (expected one of: {accepted})") from None
