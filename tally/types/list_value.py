"""List value: an ordered, growable sequence of numbers or nested lists."""

from __future__ import annotations

from typing import Iterable, Iterator

from tally.errors import TallyTypeError
from tally.types.number import Number


class ListValue:
    __slots__ = ("items",)

    def __init__(self, items: Iterable[Number | ListValue] = ()):
        self.items: list[Number | ListValue] = []
        self.extend(items)

    @classmethod
    def of_ints(cls, values: Iterable[int]) -> ListValue:
        return cls(Number.from_int(v) for v in values)

    def append(self, item: Number | ListValue) -> None:
        if not isinstance(item, (Number, ListValue)):
            raise TallyTypeError("list", len(self.items) + 1, "a number or a list", type(item).__name__)
        self.items.append(item)

    def extend(self, items: Iterable[Number | ListValue]) -> None:
        for item in items:
            self.append(item)

    def is_flat(self) -> bool:
        """True if every element is a Number."""
        return all(isinstance(item, Number) for item in self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Number | ListValue]:
        return iter(self.items)

    def __getitem__(self, index: int) -> Number | ListValue:
        return self.items[index]

    def __eq__(self, other) -> bool:
        if not isinstance(other, ListValue):
            return NotImplemented
        return self.items == other.items

    __hash__ = None

    def __repr__(self):
        return f"ListValue({self.items!r})"

    def __str__(self):
        return "(" + " ".join(str(item) for item in self.items) + ")"
