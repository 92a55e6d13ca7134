"""Built-in operators for the Tally simplifier.

Each rewrite function receives the form's unevaluated arguments and the
simplifier, reduces the arguments it needs, and returns the resolved value.
Argument checks happen here, not in the operator table, which only matches
names and argument counts.
"""
from __future__ import annotations

import operator
from functools import reduce
from typing import Callable

from tally import Node, SimplifyFn
from tally.errors import TallyArityError, TallyResolutionError, TallyTypeError
from tally.evaluation.operator_table import VARIADIC, Operator, OperatorTable
from tally.types.list_value import ListValue
from tally.types.node import Interior, Leaf
from tally.types.number import Number

TRUE = Number.from_int(1)
FALSE = Number.from_int(0)


def describe(node: Node) -> str:
    """Short name of what a node turned out to be, for error messages."""
    match node:
        case Number() if node.is_int:
            return f"integer {node}"
        case Number():
            return f"float {node}"
        case ListValue():
            return f"list {node}"
        case Leaf():
            return f"atom {node.text!r}"
        case Interior(children=[]):
            return "empty form ()"
        case Interior():
            return f"form {node}"
    return type(node).__name__


def simplify_arg(name: str, position: int, arg: Node, simplify: SimplifyFn, expected: str) -> Node:
    """Simplify one argument; an atom that is not a number is a bad argument here."""
    try:
        return simplify(arg)
    except TallyResolutionError as e:
        raise TallyTypeError(name, position, expected, describe(arg)) from e


def simplify_number(name: str, position: int, arg: Node, simplify: SimplifyFn) -> Number:
    value = simplify_arg(name, position, arg, simplify, "a number")
    if not isinstance(value, Number):
        raise TallyTypeError(name, position, "a number", describe(value))
    return value


def simplify_numbers(name: str, args: list[Node], simplify: SimplifyFn) -> list[Number]:
    return [simplify_number(name, i, arg, simplify) for i, arg in enumerate(args, start=1)]


def simplify_int(name: str, position: int, arg: Node, simplify: SimplifyFn) -> Number:
    value = simplify_arg(name, position, arg, simplify, "an integer")
    if not isinstance(value, Number) or not value.is_int:
        raise TallyTypeError(name, position, "an integer", describe(value))
    return value


# -------------------------------
# Arithmetic
# -------------------------------
def _fold(name: str, identity: Number, op: Callable[[Number, Number], Number]):
    def rewrite(args: list[Node], simplify: SimplifyFn) -> Number:
        numbers = simplify_numbers(name, args, simplify)
        if not numbers:
            return identity
        # a single argument is adopted as-is
        return reduce(op, numbers)

    rewrite.__name__ = f"fold_{name}"
    return rewrite


add = _fold("+", Number.from_int(0), operator.add)
mul = _fold("*", Number.from_int(1), operator.mul)


def negate(args: list[Node], simplify: SimplifyFn) -> Number:
    """(- x) => -x"""
    return -simplify_number("-", 1, args[0], simplify)


def sub(args: list[Node], simplify: SimplifyFn) -> Number:
    """Subtract all subsequent numbers from the first."""
    if not args:
        raise TallyArityError("-", 0, "- requires at least 1 argument")
    numbers = simplify_numbers("-", args, simplify)
    if len(numbers) == 1:
        return -numbers[0]
    return reduce(operator.sub, numbers)


def div(args: list[Node], simplify: SimplifyFn) -> Number:
    """Divide left-to-right; with one arg returns the reciprocal."""
    if not args:
        raise TallyArityError("/", 0, "/ requires at least 1 argument")
    numbers = simplify_numbers("/", args, simplify)
    if len(numbers) == 1:
        return Number.from_int(1) / numbers[0]
    return reduce(operator.truediv, numbers)


# -------------------------------
# Comparison
# -------------------------------
def _chain(name: str, test: Callable[[Number, Number], bool]):
    def rewrite(args: list[Node], simplify: SimplifyFn) -> Number:
        numbers = simplify_numbers(name, args, simplify)
        return TRUE if all(test(a, b) for a, b in zip(numbers, numbers[1:])) else FALSE

    rewrite.__name__ = f"chain_{name}"
    return rewrite


equals = _chain("=", operator.eq)
lt = _chain("<", operator.lt)
lte = _chain("<=", operator.le)
gt = _chain(">", operator.gt)
gte = _chain(">=", operator.ge)


# -------------------------------
# Lists
# -------------------------------
def list_builtin(args: list[Node], simplify: SimplifyFn) -> ListValue:
    """(list x...) => list of the simplified arguments; nested lists allowed."""
    result = ListValue()
    for i, arg in enumerate(args, start=1):
        value = simplify_arg("list", i, arg, simplify, "a number or a list")
        if not isinstance(value, (Number, ListValue)):
            raise TallyTypeError("list", i, "a number or a list", describe(value))
        result.append(value)
    return result


def sum_builtin(args: list[Node], simplify: SimplifyFn) -> Number:
    """(sum xs) => total of a flat list of numbers."""
    value = simplify_arg("sum", 1, args[0], simplify, "a list")
    if not isinstance(value, ListValue):
        raise TallyTypeError("sum", 1, "a list", describe(value))
    if not value.is_flat():
        bad = next(item for item in value if not isinstance(item, Number))
        raise TallyTypeError("sum", 1, "a list of numbers", f"element {describe(bad)}")
    return reduce(operator.add, value, Number.from_int(0))


def range_builtin(args: list[Node], simplify: SimplifyFn) -> ListValue:
    """(range start stop) => integers from start up to, not including, stop."""
    start = simplify_int("range", 1, args[0], simplify)
    stop = simplify_int("range", 2, args[1], simplify)
    return ListValue.of_ints(range(start.value, stop.value))


# -------------------------------
# Registration
# -------------------------------
BUILTIN_OPERATORS: tuple[Operator, ...] = (
    Operator("+", VARIADIC, add, "Sum of the arguments; (+) is 0."),
    Operator("*", VARIADIC, mul, "Product of the arguments; (*) is 1."),
    Operator("list", VARIADIC, list_builtin, "List of the arguments, which may be numbers or lists."),
    Operator("sum", 1, sum_builtin, "Sum of a list of numbers."),
    Operator("range", 2, range_builtin, "Integers from start (inclusive) to stop (exclusive)."),
    Operator("-", 1, negate, "Negation."),
    Operator("-", VARIADIC, sub, "Subtract the rest from the first argument."),
    Operator("/", VARIADIC, div, "Divide left to right; (/ x) is 1/x."),
    Operator("=", VARIADIC, equals, "1 if all arguments are numerically equal, else 0."),
    Operator("<", VARIADIC, lt, "1 if the arguments strictly increase, else 0."),
    Operator("<=", VARIADIC, lte, "1 if the arguments never decrease, else 0."),
    Operator(">", VARIADIC, gt, "1 if the arguments strictly decrease, else 0."),
    Operator(">=", VARIADIC, gte, "1 if the arguments never increase, else 0."),
)

_DEFAULT_TABLE = OperatorTable(BUILTIN_OPERATORS)


def default_table() -> OperatorTable:
    return _DEFAULT_TABLE
