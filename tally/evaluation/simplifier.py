"""Tree simplifier for Tally.

Reduces an unresolved tree to a resolved value:

- Number / ListValue: already resolved, returned as-is.
- Leaf: parsed as a number; anything else cannot be resolved.
- Interior: the head leaf names an operator, looked up by name and argument
  count; its rewrite function reduces the arguments it needs and returns the
  resolved value. An empty Interior is returned unchanged.

Simplification is top-down recursive with children reduced before their
parent's value is built. Nothing is memoized.
"""

from __future__ import annotations

import logging
from typing import Optional

from tally import Node
from tally.errors import TallyOperatorError, TallyResolutionError
from tally.evaluation.operator_table import OperatorTable
from tally.types.list_value import ListValue
from tally.types.node import Interior, Leaf
from tally.types.number import Number

logger = logging.getLogger(__name__)


class Simplifier:
    def __init__(self, table: Optional[OperatorTable] = None):
        if table is None:
            from tally.builtin.operator_builtin import default_table
            table = default_table()
        self.table = table

    def simplify(self, node: Node) -> Node:
        match node:
            case Number() | ListValue():
                return node
            case Leaf():
                return self.resolve_atom(node)
            case Interior(children=[]):
                return node
            case Interior():
                return self.expand(node)
        raise TypeError(f"Cannot simplify {type(node).__name__}")

    __call__ = simplify

    def resolve_atom(self, leaf: Leaf) -> Number:
        number = Number.parse(leaf.text)
        if number is None:
            raise TallyResolutionError(leaf.text, leaf.pos)
        logger.debug("resolved %r -> %r", leaf.text, number)
        return number

    def expand(self, node: Interior) -> Node:
        head, args = node.head, node.args
        if not isinstance(head, Leaf):
            raise TallyOperatorError(None, len(args))
        op = self.table.lookup(head.text, len(args))
        if op is None:
            raise TallyOperatorError(head.text, len(args))
        logger.debug("expanding %s with %d argument(s)", op.name, len(args))
        return op.rewrite(args, self.simplify)


def simplify(node: Node, table: Optional[OperatorTable] = None) -> Node:
    return Simplifier(table).simplify(node)
