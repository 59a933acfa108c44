"""List helpers."""

from __future__ import annotations

from ..css.fragment import Fragment, fragment


def no_bullets() -> Fragment:
    """Strip list decoration and spacing from a list and its items."""
    reset = (("list-style", "none"), ("margin", "0"), ("padding", "0"))
    return fragment(*reset).nest("> li", fragment(*reset))
