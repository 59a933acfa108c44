"""Name -> mixin lookup used by the stylesheet builder and the CLI."""

from __future__ import annotations

import inspect
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ..context import StyleContext, resolve_context
from ..css.fragment import Fragment
from ..units.convert import rem
from .buttons import button
from .fonts import font_stack
from .layout import center, gutter_padding, gutters, vertical_align
from .lists import no_bullets
from .responsive import hide_until, show_until
from .shapes import arrow
from .visibility import visually_hidden, visually_shown


class UnknownMixinError(ValueError):
    """Raised when a mixin name is not registered."""

    def __init__(self, name: str):
        self.name = name
        known = ", ".join(sorted(MIXINS))
        super().__init__(f"Unknown mixin {name!r} (known: {known})")


@dataclass(frozen=True)
class MixinSpec:
    func: Callable[..., Fragment]
    takes_context: bool
    summary: str


MIXINS: dict[str, MixinSpec] = {
    "rem": MixinSpec(rem, True, "property in rem with optional px fallback"),
    "visually-hidden": MixinSpec(visually_hidden, True, "hide visually, keep for screen readers"),
    "visually-shown": MixinSpec(visually_shown, False, "undo visually-hidden"),
    "no-bullets": MixinSpec(no_bullets, False, "strip list style and spacing"),
    "hide-until": MixinSpec(hide_until, True, "hidden below a breakpoint"),
    "show-until": MixinSpec(show_until, True, "shown below a breakpoint"),
    "font-stack": MixinSpec(font_stack, True, "default font-family stack"),
    "center": MixinSpec(center, False, "absolute centering (both/horizontal/vertical)"),
    "vertical-align": MixinSpec(vertical_align, False, "vertically center with a transform"),
    "gutters": MixinSpec(gutters, True, "negative half-gutter row margins"),
    "gutter-padding": MixinSpec(gutter_padding, True, "half-gutter column padding"),
    "arrow": MixinSpec(arrow, True, "border triangle (up/down/left/right)"),
    "button": MixinSpec(button, True, "button with darkened hover state"),
}


def include(name: str, args: dict[str, Any] | None = None, context: StyleContext | None = None) -> Fragment:
    """Call a registered mixin by name.

    Args:
        name: Registered mixin name (e.g. "visually-hidden")
        args: Keyword arguments for the mixin
        context: Style context, passed to mixins that take one

    Returns:
        The mixin's fragment
    """
    spec = MIXINS.get(name)
    if spec is None:
        raise UnknownMixinError(name)

    kwargs = dict(args or {})
    if spec.takes_context:
        kwargs["context"] = resolve_context(context)
    try:
        inspect.signature(spec.func).bind(**kwargs)
    except TypeError as e:
        raise ValueError(f"Bad arguments for mixin {name!r}: {e}") from e
    return spec.func(**kwargs)
