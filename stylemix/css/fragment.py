"""Style fragment model: declarations plus nested blocks."""

from __future__ import annotations

from pydantic import BaseModel, Field


class Declaration(BaseModel):
    """A single `property: value;` pair."""

    model_config = {"frozen": True}

    property: str
    value: str
    important: bool = False

    def render(self) -> str:
        suffix = " !important" if self.important else ""
        return f"{self.property}: {self.value}{suffix};"


class Block(BaseModel):
    """A nested block: child selector, `&` reference or at-rule."""

    prelude: str
    body: Fragment

    @property
    def is_at_rule(self) -> bool:
        return self.prelude.startswith("@")


class Fragment(BaseModel):
    """Output of one mixin call.

    Declarations render before nested blocks. Fragments are concatenated to
    include several mixins in one rule; order is preserved.
    """

    declarations: list[Declaration] = Field(default_factory=list)
    blocks: list[Block] = Field(default_factory=list)

    def add(self, property: str, value: object, important: bool = False) -> Fragment:
        self.declarations.append(Declaration(property=property, value=str(value), important=important))
        return self

    def nest(self, prelude: str, body: Fragment) -> Fragment:
        self.blocks.append(Block(prelude=prelude, body=body))
        return self

    def merge(self, other: Fragment) -> Fragment:
        """Return a new fragment with `other` appended."""
        return Fragment(
            declarations=[*self.declarations, *other.declarations],
            blocks=[*self.blocks, *other.blocks],
        )

    def __add__(self, other: Fragment) -> Fragment:
        return self.merge(other)

    def is_empty(self) -> bool:
        return not self.declarations and all(b.body.is_empty() for b in self.blocks)

    def values(self, property: str) -> list[str]:
        """All values declared for `property`, in order (top level only)."""
        return [d.value for d in self.declarations if d.property == property]


Block.model_rebuild()


def fragment(*pairs: tuple[str, object]) -> Fragment:
    """Build a fragment from (property, value) pairs."""
    frag = Fragment()
    for prop, value in pairs:
        frag.add(prop, value)
    return frag
