"""Tests for the style context."""

import unittest

from pydantic import ValidationError

from stylemix.context import StyleContext, default_context


class TestStyleContext(unittest.TestCase):
    def test_shared_default_cannot_be_mutated(self) -> None:
        ctx = default_context()
        before = ctx.media_query("tablet")
        with self.assertRaises(TypeError):
            ctx.breakpoints["tablet"] = "(min-width: 1px)"
        with self.assertRaises(TypeError):
            ctx.colors["primary"] = "#000000"
        with self.assertRaises(AttributeError):
            ctx.font_stack.append("serif")
        self.assertEqual(default_context().media_query("tablet"), before)

    def test_caller_dict_is_copied(self) -> None:
        breakpoints = {"tablet": "(min-width: 768px)"}
        ctx = StyleContext(breakpoints=breakpoints)
        breakpoints["tablet"] = "(min-width: 1px)"
        self.assertEqual(ctx.media_query("tablet"), "(min-width: 768px)")

    def test_unknown_field_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            StyleContext(base_fontsize=10)

    def test_field_values_revalidate(self) -> None:
        ctx = StyleContext(base_font_size=10, colors={"brand": "#123456"})
        rebuilt = StyleContext.model_validate({**ctx.field_values(), "legacy_ie": True})
        self.assertEqual(rebuilt.base_font_size, 10)
        self.assertEqual(rebuilt.color("brand"), "#123456")
        self.assertTrue(rebuilt.legacy_ie)

    def test_unknown_breakpoint(self) -> None:
        with self.assertRaises(ValueError):
            StyleContext().media_query("phablet")


if __name__ == "__main__":
    unittest.main()
