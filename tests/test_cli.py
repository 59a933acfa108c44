"""Tests for the command-line interface."""

from __future__ import annotations

import io
import json
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path

from stylemix.cli import main


def _run(argv: list[str]) -> tuple[int, str, str]:
    out, err = io.StringIO(), io.StringIO()
    with redirect_stdout(out), redirect_stderr(err):
        code = main(argv)
    return code, out.getvalue(), err.getvalue()


class TestCli(unittest.TestCase):
    def test_rem_without_fallback(self) -> None:
        code, out, _ = _run(["rem", "margin", "10px", "auto", "2rem", "--base", "16", "--no-fallback"])
        self.assertEqual(code, 0)
        self.assertEqual(out, "margin: 0.625rem auto 2rem;\n")

    def test_rem_negative_values_after_separator(self) -> None:
        code, out, _ = _run(["rem", "margin", "--base", "16", "--no-fallback", "--", "-10px", "auto"])
        self.assertEqual(code, 0)
        self.assertEqual(out, "margin: -0.625rem auto;\n")

    def test_rem_empty_value(self) -> None:
        code, _, err = _run(["rem", "margin", ""])
        self.assertEqual(code, 1)
        self.assertIn("no values", err)

    def test_rem_rejects_bad_base(self) -> None:
        code, _, err = _run(["rem", "margin", "10px", "--base", "0"])
        self.assertEqual(code, 2)
        self.assertIn("--base", err)

    def test_font_face(self) -> None:
        code, out, _ = _run(["font-face", "Roboto"])
        self.assertEqual(code, 0)
        self.assertTrue(out.startswith("@font-face {"))
        self.assertIn('url("Roboto/Roboto.eot?#iefix")', out)

    def test_mixin_with_args(self) -> None:
        code, out, _ = _run(["mixin", "arrow", "--arg", "direction=up", "--arg", "size=4px", "-s", ".caret"])
        self.assertEqual(code, 0)
        self.assertIn(".caret {", out)
        self.assertIn("border-bottom: 4px solid", out)

    def test_unknown_mixin(self) -> None:
        code, _, err = _run(["mixin", "nope"])
        self.assertEqual(code, 1)
        self.assertIn("Unknown mixin", err)

    def test_mixins_lists_registry(self) -> None:
        code, out, _ = _run(["mixins"])
        self.assertEqual(code, 0)
        self.assertIn("visually-hidden", out)
        self.assertIn("font-stack", out)

    def test_build_to_file(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            src = Path(td) / "styles.json"
            out_css = Path(td) / "styles.css"
            src.write_text(
                json.dumps({"rules": [{"selector": ".sr-only", "include": [{"mixin": "visually-hidden"}]}, {"selector": "p"}]}),
                encoding="utf-8",
            )
            code, out, _ = _run(["build", str(src), "--out", str(out_css)])
            self.assertEqual(code, 0)
            self.assertIn("Stylesheet built", out)
            self.assertIn("Warnings (1)", out)
            self.assertIn(".sr-only {", out_css.read_text(encoding="utf-8"))

    def test_build_missing_input(self) -> None:
        code, _, err = _run(["build", "/nonexistent/styles.json"])
        self.assertEqual(code, 1)
        self.assertIn("Error:", err)


if __name__ == "__main__":
    unittest.main()
