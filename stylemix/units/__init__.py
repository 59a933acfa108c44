"""Length values and unit conversion."""

from .convert import convert_lengths, px_to_em, px_to_percent, px_to_rem, rem
from .length import Length, format_number, parse_length, round_half_up, split_values

__all__ = [
    "Length",
    "format_number",
    "parse_length",
    "round_half_up",
    "split_values",
    "convert_lengths",
    "rem",
    "px_to_em",
    "px_to_percent",
    "px_to_rem",
]
