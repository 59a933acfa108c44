"""Stylesheet assembly from JSON descriptions."""

from .build import BuildResult, build_rule, build_stylesheet, write_stylesheet
from .spec import FontFaceSpec, IncludeSpec, RuleSpec, StylesheetSpec, load_spec

__all__ = [
    "BuildResult",
    "build_rule",
    "build_stylesheet",
    "write_stylesheet",
    "FontFaceSpec",
    "IncludeSpec",
    "RuleSpec",
    "StylesheetSpec",
    "load_spec",
]
