"""Registry of operators for the Tally simplifier.

Maps an operator name and argument count to a rewrite function. Entries are
kept in declaration order: when several entries match a form, the first one
wins. The table is immutable once built; extending it produces a new table.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from tally import Node, SimplifyFn, Value

# Marker for operators that accept any number of arguments (including zero)
VARIADIC = -1

RewriteFn = Callable[[list[Node], SimplifyFn], Value]


@dataclass(frozen=True)
class Operator:
    name: str
    arity: int
    rewrite: RewriteFn
    doc: str = ""

    @property
    def is_variadic(self) -> bool:
        return self.arity == VARIADIC

    def accepts(self, name: str, argc: int) -> bool:
        return self.name == name and (self.is_variadic or self.arity == argc)

    @property
    def signature(self) -> str:
        if self.is_variadic:
            return f"({self.name} &rest args)"
        params = " ".join(f"x{i}" for i in range(1, self.arity + 1))
        return f"({self.name} {params})" if params else f"({self.name})"


class OperatorTable:
    def __init__(self, operators: Iterable[Operator] = ()):
        self._operators: tuple[Operator, ...] = tuple(operators)

    def lookup(self, name: str, argc: int) -> Optional[Operator]:
        """First operator in table order accepting name with argc arguments."""
        for op in self._operators:
            if op.accepts(name, argc):
                return op
        return None

    def has_name(self, name: str) -> bool:
        return any(op.name == name for op in self._operators)

    def names(self) -> list[str]:
        seen: dict[str, None] = {}
        for op in self._operators:
            seen.setdefault(op.name, None)
        return list(seen)

    def extended(self, *operators: Operator) -> OperatorTable:
        return OperatorTable(self._operators + operators)

    def __iter__(self):
        return iter(self._operators)

    def __len__(self) -> int:
        return len(self._operators)

    def __contains__(self, name: str) -> bool:
        return self.has_name(name)
