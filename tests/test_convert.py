"""Tests for px/rem conversion and the unit functions."""

import unittest

from stylemix.context import StyleContext
from stylemix.units.convert import convert_lengths, px_to_em, px_to_percent, px_to_rem, rem


class TestConvertLengths(unittest.TestCase):
    def test_px_input(self) -> None:
        self.assertEqual(convert_lengths(["32px"], 16), (["32px"], ["2rem"]))

    def test_rem_input(self) -> None:
        self.assertEqual(convert_lengths(["1.5rem"], 16), (["24px"], ["1.5rem"]))

    def test_mixed_list_keeps_positions(self) -> None:
        px_values, rem_values = convert_lengths("10px auto 2rem", 16)
        self.assertEqual(px_values, ["10px", "auto", "32px"])
        self.assertEqual(rem_values, ["0.625rem", "auto", "2rem"])

    def test_px_output_is_rounded(self) -> None:
        px_values, rem_values = convert_lengths("10.6px", 16)
        self.assertEqual(px_values, ["11px"])
        self.assertEqual(rem_values, ["0.6625rem"])

    def test_other_values_pass_through(self) -> None:
        values = ["0", "1em", "inherit", 2]
        px_values, rem_values = convert_lengths(values, 16)
        self.assertEqual(px_values, ["0", "1em", "inherit", "2"])
        self.assertEqual(px_values, rem_values)

    def test_rem_input_rounds_to_whole_pixels(self) -> None:
        self.assertEqual(convert_lengths(["1.03rem"], 16), (["16px"], ["1.03rem"]))
        self.assertEqual(convert_lengths(["0.03125rem"], 16), (["1px"], ["0.03125rem"]))

    def test_zero_lengths_pass_through(self) -> None:
        px_values, rem_values = convert_lengths("0px 0rem 0 4px", 16)
        self.assertEqual(px_values, ["0px", "0rem", "0", "4px"])
        self.assertEqual(rem_values, ["0px", "0rem", "0", "0.25rem"])

    def test_output_lengths_match_input(self) -> None:
        for values in (["1px"], ["1px", "2rem", "auto", "3%"], []):
            px_values, rem_values = convert_lengths(values, 10)
            self.assertEqual(len(px_values), len(values))
            self.assertEqual(len(rem_values), len(values))


class TestRemMixin(unittest.TestCase):
    def setUp(self) -> None:
        self.ctx = StyleContext(base_font_size=16, rem_fallback=True)

    def test_fallback_precedes_rem(self) -> None:
        frag = rem("margin", "10px auto", context=self.ctx)
        self.assertEqual(frag.values("margin"), ["10px auto", "0.625rem auto"])

    def test_without_fallback(self) -> None:
        frag = rem("margin", "10px auto", fallback=False, context=self.ctx)
        self.assertEqual(frag.values("margin"), ["0.625rem auto"])

    def test_empty_values_rejected(self) -> None:
        with self.assertRaises(ValueError):
            rem("margin", "", context=self.ctx)
        with self.assertRaises(ValueError):
            rem("margin", [], context=self.ctx)

    def test_context_default_fallback(self) -> None:
        ctx = StyleContext(base_font_size=10, rem_fallback=False)
        frag = rem("font-size", "15px", context=ctx)
        self.assertEqual(frag.values("font-size"), ["1.5rem"])


class TestUnitFunctions(unittest.TestCase):
    def test_px_to_em(self) -> None:
        self.assertEqual(str(px_to_em(24, 16)), "1.5em")
        self.assertEqual(str(px_to_em("24px", "12px")), "2em")
        self.assertEqual(str(px_to_em(24, StyleContext(base_font_size=16))), "1.5em")

    def test_px_to_em_warns_on_other_units(self) -> None:
        with self.assertWarns(UserWarning):
            result = px_to_em("1.5rem", 16)
        self.assertEqual(str(result), "0.09375em")

    def test_px_to_percent(self) -> None:
        self.assertEqual(str(px_to_percent(300, 960)), "31.25%")
        self.assertEqual(str(px_to_percent("480px", "960px")), "50%")

    def test_px_to_rem(self) -> None:
        self.assertEqual(str(px_to_rem(24, StyleContext(base_font_size=16))), "1.5rem")

    def test_invalid_inputs(self) -> None:
        with self.assertRaises(ValueError):
            px_to_percent(1, 0)
        with self.assertRaises(ValueError):
            px_to_em("auto", 16)


if __name__ == "__main__":
    unittest.main()
