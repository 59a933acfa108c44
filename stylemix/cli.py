"""Command-line front end for StyleMix.

Prints mixin output for quick checks and renders JSON stylesheet
descriptions to CSS files.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from . import __version__


def app(argv: list[str] | None = None) -> None:
    """Console script entrypoint."""
    raise SystemExit(main(argv))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="stylemix",
        description="Build-time CSS mixins: rem fallbacks, font-faces, accessible hiding and more.",
    )
    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"StyleMix {__version__}",
    )

    sub = parser.add_subparsers(dest="cmd", required=True)

    p_rem = sub.add_parser("rem", help="Convert a property's values to rem with px fallback")
    p_rem.add_argument("property", help="CSS property, e.g. margin")
    p_rem.add_argument(
        "values",
        nargs="+",
        help="Values, e.g. 10px auto 2rem (put -- before negative values: -- -10px auto)",
    )
    p_rem.add_argument("--base", type=float, default=None, help="Base font size in px")
    p_rem.add_argument("--no-fallback", action="store_true", help="Omit the px declaration")

    p_font = sub.add_parser("font-face", help="Print an @font-face block")
    p_font.add_argument("family", help="Font family name")
    p_font.add_argument("--file", default=None, help="File name without extension (default: family)")
    p_font.add_argument("--path", default=None, help="Font directory (default: family)")

    p_mixin = sub.add_parser("mixin", help="Print a rule using one mixin")
    p_mixin.add_argument("name", help="Mixin name (see `stylemix mixins`)")
    p_mixin.add_argument(
        "--arg",
        "-a",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Mixin argument; VALUE is parsed as JSON when possible",
    )
    p_mixin.add_argument("--selector", "-s", default=".example", help="Selector for the printed rule")

    sub.add_parser("mixins", help="List available mixins")

    p_build = sub.add_parser("build", help="Render a stylesheet description (JSON) to CSS")
    p_build.add_argument("input", type=Path, help="Stylesheet JSON")
    p_build.add_argument("--out", "-o", type=Path, default=None, help="Output CSS file (default: stdout)")

    args = parser.parse_args(argv)

    if args.cmd == "rem":
        return _cmd_rem(args)
    if args.cmd == "font-face":
        return _cmd_font_face(args)
    if args.cmd == "mixin":
        return _cmd_mixin(args)
    if args.cmd == "mixins":
        return _cmd_mixins(args)
    if args.cmd == "build":
        return _cmd_build(args)

    parser.print_help()
    return 2


def _cmd_rem(args: Any) -> int:
    from .context import default_context
    from .css.render import render_fragment
    from .units.convert import rem

    ctx = default_context()
    if args.base is not None:
        if args.base <= 0:
            print("Error: --base must be > 0", file=sys.stderr)
            return 2
        ctx = ctx.model_copy(update={"base_font_size": args.base})

    fallback = False if args.no_fallback else None
    try:
        frag = rem(args.property, args.values, fallback=fallback, context=ctx)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(render_fragment(frag))
    return 0


def _cmd_font_face(args: Any) -> int:
    from .css.render import render_block
    from .mixins.fonts import font_face

    print(render_block(font_face(args.family, file=args.file, path=args.path)))
    return 0


def _parse_arg(raw: str) -> tuple[str, Any]:
    key, sep, value = raw.partition("=")
    if not sep or not key:
        raise ValueError(f"expected KEY=VALUE, got {raw!r}")
    try:
        return key.replace("-", "_"), json.loads(value)
    except json.JSONDecodeError:
        return key.replace("-", "_"), value


def _cmd_mixin(args: Any) -> int:
    from .css.render import render_rule
    from .mixins.registry import include

    try:
        kwargs = dict(_parse_arg(a) for a in args.arg)
        frag = include(args.name, kwargs)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(render_rule(args.selector, frag))
    return 0


def _cmd_mixins(args: Any) -> int:
    from .mixins.registry import MIXINS

    width = max(len(name) for name in MIXINS)
    for name, spec in sorted(MIXINS.items()):
        print(f"  {name:{width}}  {spec.summary}")
    return 0


def _cmd_build(args: Any) -> int:
    from .sheet.build import write_stylesheet

    try:
        css, result = write_stylesheet(args.input, args.out)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.out is None:
        sys.stdout.write(css)
        out = sys.stderr
    else:
        out = sys.stdout

    print("✓ Stylesheet built", file=out)
    if result.output_path is not None:
        print(f"  Output: {result.output_path}", file=out)
    print(f"  Rules: {result.rules_count}", file=out)
    print(f"  Font faces: {result.font_faces_count}", file=out)
    print(f"  Size: {result.bytes / 1024:.1f} KB", file=out)

    if result.warnings:
        print(f"\nWarnings ({len(result.warnings)}):", file=out)
        for w in result.warnings[:10]:
            print(f"  - {w}", file=out)
        if len(result.warnings) > 10:
            print(f"  ... and {len(result.warnings) - 10} more", file=out)

    return 0


if __name__ == "__main__":
    app()
