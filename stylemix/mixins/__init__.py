"""Stylesheet mixins: stateless fragment emitters."""

from .buttons import button, darken
from .fonts import font_face, font_stack
from .layout import center, gutter_padding, gutters, vertical_align
from .lists import no_bullets
from .media import retina
from .registry import MIXINS, UnknownMixinError, include
from .responsive import hide_until, media, show_until
from .shapes import arrow
from .tokens import Axis, Direction
from .visibility import visually_hidden, visually_shown

__all__ = [
    "Axis",
    "Direction",
    "MIXINS",
    "UnknownMixinError",
    "arrow",
    "button",
    "center",
    "darken",
    "font_face",
    "font_stack",
    "gutter_padding",
    "gutters",
    "hide_until",
    "include",
    "media",
    "no_bullets",
    "retina",
    "show_until",
    "vertical_align",
    "visually_hidden",
    "visually_shown",
]
