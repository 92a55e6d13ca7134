"""Unresolved tree shapes produced by the reader.

A Leaf holds atom text; an Interior holds an ordered sequence of child nodes.
Children may also already be resolved values (Number or ListValue) when a
tree is assembled by hand.
"""

from __future__ import annotations

import sys


class Leaf:
    __slots__ = ("text", "pos")

    def __init__(self, text: str, pos: int | None = None):
        # Intern to keep operator-name comparison cheap
        self.text = sys.intern(text)
        self.pos = pos

    def __eq__(self, other) -> bool:
        return isinstance(other, Leaf) and self.text == other.text

    def __hash__(self) -> int:
        return hash(self.text)

    def __repr__(self):
        return f"Leaf({self.text!r})"

    def __str__(self):
        return self.text


class Interior:
    __slots__ = ("children", "pos")

    def __init__(self, children: list | None = None, pos: int | None = None):
        self.children: list = list(children) if children else []
        self.pos = pos

    @classmethod
    def of(cls, head: str, *args) -> Interior:
        """Build (head arg...) where str args become leaves."""
        return cls([Leaf(head)] + [Leaf(a) if isinstance(a, str) else a for a in args])

    @property
    def head(self):
        return self.children[0] if self.children else None

    @property
    def args(self) -> list:
        return self.children[1:]

    def __len__(self) -> int:
        return len(self.children)

    def __eq__(self, other) -> bool:
        return isinstance(other, Interior) and self.children == other.children

    __hash__ = None

    def __repr__(self):
        return f"Interior({self.children!r})"

    def __str__(self):
        return "(" + " ".join(str(c) for c in self.children) + ")"
