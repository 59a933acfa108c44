"""Render fragments to CSS text, resolving nested blocks into flat rules."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .fragment import Block, Declaration, Fragment

INDENT = "  "


@dataclass(frozen=True)
class FlatRule:
    at_rules: tuple[str, ...]
    selector: str | None
    declarations: tuple[Declaration, ...]


def split_selector_list(selector: str) -> list[str]:
    """Split a selector list on top-level commas.

    Commas inside brackets (`:is(.a, .b)`, `[title="a, b"]`) or quotes
    belong to a single selector.
    """
    parts: list[str] = []
    current: list[str] = []
    depth = 0
    quote: str | None = None
    escaped = False

    for ch in selector:
        if escaped:
            escaped = False
        elif ch == "\\":
            escaped = True
        elif quote is not None:
            if ch == quote:
                quote = None
        elif ch in ("'", '"'):
            quote = ch
        elif ch in "([":
            depth += 1
        elif ch in ")]":
            depth = max(0, depth - 1)
        elif ch == "," and depth == 0:
            parts.append("".join(current).strip())
            current = []
            continue
        current.append(ch)

    parts.append("".join(current).strip())
    return [p for p in parts if p]


def resolve_selector(parent: str | None, child: str) -> str:
    """Join a nested prelude onto its parent selector.

    `&` is replaced by the parent; anything else becomes a descendant
    (or combinator) selector. Comma lists expand pairwise.
    """
    child_parts = split_selector_list(child)
    if parent is None:
        return ", ".join(c.replace("&", "").strip() for c in child_parts)

    parent_parts = split_selector_list(parent)
    joined = []
    for p in parent_parts:
        for c in child_parts:
            if "&" in c:
                joined.append(c.replace("&", p))
            else:
                joined.append(f"{p} {c}")
    return ", ".join(joined)


def flatten(
    selector: str | None,
    fragment: Fragment,
    at_rules: tuple[str, ...] = (),
) -> list[FlatRule]:
    """Resolve a fragment under `selector` into flat rules, in source order."""
    rules: list[FlatRule] = []
    if fragment.declarations:
        rules.append(FlatRule(at_rules, selector, tuple(fragment.declarations)))

    for block in fragment.blocks:
        if block.is_at_rule:
            rules.extend(flatten(selector, block.body, at_rules + (block.prelude,)))
        else:
            rules.extend(flatten(resolve_selector(selector, block.prelude), block.body, at_rules))
    return rules


def _render_flat(rule: FlatRule, indent: str) -> str:
    lines: list[str] = []
    depth = 0
    for at_rule in rule.at_rules:
        lines.append(f"{indent * depth}{at_rule} {{")
        depth += 1
    if rule.selector is not None:
        lines.append(f"{indent * depth}{rule.selector} {{")
        depth += 1
    for decl in rule.declarations:
        lines.append(f"{indent * depth}{decl.render()}")
    while depth > 0:
        depth -= 1
        lines.append(f"{indent * depth}}}")
    return "\n".join(lines)


def render_rule(selector: str | None, fragment: Fragment, indent: str = INDENT) -> str:
    """Render one rule and everything nested in it."""
    return "\n\n".join(_render_flat(r, indent) for r in flatten(selector, fragment))


def render_block(block: Block, indent: str = INDENT) -> str:
    """Render a top-level block such as `@font-face`."""
    if block.is_at_rule:
        rules = flatten(None, block.body, (block.prelude,))
    else:
        rules = flatten(block.prelude, block.body)
    return "\n\n".join(_render_flat(r, indent) for r in rules)


def render_fragment(fragment: Fragment) -> str:
    """Render top-level declarations only, one per line."""
    return "\n".join(d.render() for d in fragment.declarations)


def join_css(chunks: Iterable[str]) -> str:
    """Join rendered rules with blank lines; always ends with a newline."""
    text = "\n\n".join(c for c in chunks if c.strip())
    return text + "\n" if text else ""
