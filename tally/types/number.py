"""Numeric tower: a tagged integer-or-float value.

Binary arithmetic promotes: if either operand is a float the result is a
float, otherwise it is an integer.
"""

from __future__ import annotations

import re
from enum import Enum
from functools import total_ordering
from typing import Optional

from tally.errors import TallyOverflowError, TallyZeroDivisionError


class NumberKind(Enum):
    INT = "int"
    FLOAT = "float"


# Underscore digit separators follow Python literal rules in both forms
_DECIMAL_RE = re.compile(r"[+-]?\d+(?:_\d+)*")
_PREFIXED_RE = re.compile(r"[+-]?0[xXoObB](?:_?[0-9A-Fa-f])+")


@total_ordering
class Number:
    __slots__ = ("kind", "value")

    def __init__(self, kind: NumberKind, value: int | float):
        self.kind = kind
        self.value = value

    @classmethod
    def from_int(cls, i: int) -> Number:
        return cls(NumberKind.INT, int(i))

    @classmethod
    def from_float(cls, d: float) -> Number:
        return cls(NumberKind.FLOAT, float(d))

    @classmethod
    def parse(cls, text: str) -> Optional[Number]:
        """Parse an atom, integer first then float. Returns None if it is neither."""
        if _DECIMAL_RE.fullmatch(text):
            try:
                return cls.from_int(int(text, 10))
            except ValueError as e:
                # past the interpreter's int/str digit limit
                raise TallyOverflowError(f"integer literal with {len(text)} characters is too long") from e
        if _PREFIXED_RE.fullmatch(text):
            try:
                return cls.from_int(int(text, 0))
            except ValueError:
                return None
        try:
            return cls.from_float(float(text))
        except ValueError:
            return None

    @property
    def is_int(self) -> bool:
        return self.kind is NumberKind.INT

    @property
    def is_float(self) -> bool:
        return self.kind is NumberKind.FLOAT

    def __int__(self) -> int:
        return int(self.value)

    def __float__(self) -> float:
        return float(self.value)

    # -------------------------------
    # Arithmetic
    # -------------------------------
    def _promote(self, other: Number, op) -> Number:
        if self.is_int and other.is_int:
            return Number.from_int(op(self.value, other.value))
        return Number.from_float(op(self._as_float(), other._as_float()))

    def _as_float(self) -> float:
        try:
            return float(self.value)
        except OverflowError as e:
            raise TallyOverflowError("integer too large to promote to float") from e

    def __add__(self, other: Number) -> Number:
        if not isinstance(other, Number):
            return NotImplemented
        return self._promote(other, lambda a, b: a + b)

    def __sub__(self, other: Number) -> Number:
        if not isinstance(other, Number):
            return NotImplemented
        return self._promote(other, lambda a, b: a - b)

    def __mul__(self, other: Number) -> Number:
        if not isinstance(other, Number):
            return NotImplemented
        return self._promote(other, lambda a, b: a * b)

    def __truediv__(self, other: Number) -> Number:
        if not isinstance(other, Number):
            return NotImplemented
        if other.value == 0:
            raise TallyZeroDivisionError("Division by zero")
        if self.is_int and other.is_int:
            # Integer division truncates toward zero
            q = abs(self.value) // abs(other.value)
            return Number.from_int(q if (self.value < 0) == (other.value < 0) else -q)
        return Number.from_float(self._as_float() / other._as_float())

    def __neg__(self) -> Number:
        return Number(self.kind, -self.value)

    # -------------------------------
    # Comparison (numeric, across kinds)
    # -------------------------------
    def __eq__(self, other) -> bool:
        if not isinstance(other, Number):
            return NotImplemented
        return self.value == other.value

    def __lt__(self, other: Number) -> bool:
        if not isinstance(other, Number):
            return NotImplemented
        return self.value < other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self):
        if self.is_int:
            return f"Number.from_int({self})"
        return f"Number.from_float({self})"

    def __str__(self):
        if self.is_int:
            try:
                return str(self.value)
            except ValueError:
                # too many decimal digits to render; hex has no limit and reads back
                return hex(self.value)
        return str(self.value)
