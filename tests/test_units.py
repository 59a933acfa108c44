"""Tests for length parsing, formatting and rounding."""

import unittest

from stylemix.units.length import Length, format_number, parse_length, round_half_up, split_values


class TestFormatNumber(unittest.TestCase):
    def test_strips_trailing_zeros(self) -> None:
        self.assertEqual(format_number(2.0), "2")
        self.assertEqual(format_number(0.625), "0.625")

    def test_limits_precision(self) -> None:
        self.assertEqual(format_number(1 / 3), "0.33333")

    def test_negative_zero(self) -> None:
        self.assertEqual(format_number(-0.0), "0")
        self.assertEqual(format_number(-0.000001), "0")


class TestRoundHalfUp(unittest.TestCase):
    def test_halves_round_away_from_zero(self) -> None:
        self.assertEqual(round_half_up(2.5), 3)
        self.assertEqual(round_half_up(-2.5), -3)
        self.assertEqual(round_half_up(0.5), 1)

    def test_nearest(self) -> None:
        self.assertEqual(round_half_up(24.4), 24)
        self.assertEqual(round_half_up(10.6), 11)


class TestParseLength(unittest.TestCase):
    def test_px_and_rem(self) -> None:
        self.assertEqual(parse_length("10px"), Length(value=10, unit="px"))
        self.assertEqual(parse_length("1.5REM"), Length(value=1.5, unit="rem"))
        self.assertEqual(parse_length(".5em"), Length(value=0.5, unit="em"))
        self.assertEqual(parse_length("-4px"), Length(value=-4, unit="px"))

    def test_numbers_are_unitless(self) -> None:
        self.assertEqual(parse_length(5), Length(value=5))
        self.assertEqual(parse_length("0"), Length(value=0))

    def test_keywords_pass_through(self) -> None:
        self.assertIsNone(parse_length("auto"))
        self.assertIsNone(parse_length("calc(1px + 2px)"))
        self.assertIsNone(parse_length(True))
        self.assertIsNone(parse_length(None))

    def test_length_renders(self) -> None:
        self.assertEqual(str(Length(value=0.625, unit="rem")), "0.625rem")
        self.assertEqual(str(Length(value=31.25, unit="%")), "31.25%")


class TestSplitValues(unittest.TestCase):
    def test_string_is_split_on_whitespace(self) -> None:
        self.assertEqual(split_values("10px  auto 2rem"), ["10px", "auto", "2rem"])

    def test_scalar_and_list(self) -> None:
        self.assertEqual(split_values(32), [32])
        self.assertEqual(split_values(("1px", "2px")), ["1px", "2px"])

    def test_string_items_are_split(self) -> None:
        self.assertEqual(split_values(["10px auto", 2]), ["10px", "auto", 2])
        self.assertEqual(split_values([""]), [])


if __name__ == "__main__":
    unittest.main()
