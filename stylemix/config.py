"""Configuration constants and defaults for StyleMix."""

import os


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() not in ("0", "false", "no", "off", "")


# Conversion context for px <-> rem (browser default root font size)
# Override via STYLEMIX_BASE_FONT_SIZE environment variable
BASE_FONT_SIZE = float(os.getenv("STYLEMIX_BASE_FONT_SIZE", "16"))

# Emit a px declaration before each rem declaration for browsers without rem
REM_FALLBACK = _env_bool("STYLEMIX_REM_FALLBACK", True)

# IE6/7 hacks (star properties, space-separated clip rects)
LEGACY_IE = _env_bool("STYLEMIX_LEGACY_IE", False)

# Grid gutter, split evenly on both sides of a column
GUTTER_WIDTH = os.getenv("STYLEMIX_GUTTER_WIDTH", "30px")

# Breakpoint token -> media condition
DEFAULT_BREAKPOINTS = {
    "mobile": "(min-width: 480px)",
    "tablet": "(min-width: 768px)",
    "desktop": "(min-width: 1024px)",
    "wide": "(min-width: 1280px)",
}

DEFAULT_COLORS = {
    "primary": "#0b5ed7",
    "secondary": "#6a6a6a",
    "text": "#1a1a1a",
    "muted": "#6a6a6a",
    "border": "#e3e3e3",
    "white": "#ffffff",
    "black": "#000000",
}

DEFAULT_FONT_STACK = [
    "-apple-system",
    "BlinkMacSystemFont",
    '"Segoe UI"',
    "Roboto",
    '"Helvetica Neue"',
    "Arial",
    "sans-serif",
]

# Decimal places kept when rendering numbers (matches Sass default precision)
NUMBER_PRECISION = 5

# CSS reference pixel density: 1dppx == 96dpi
RETINA_DPI_PER_RATIO = 96
