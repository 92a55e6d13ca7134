# Core type aliases for Tally's data model.
# A program is read into a tree of unresolved nodes (Leaf, Interior) which the
# simplifier reduces to a resolved value (Number or ListValue).
#
# Naming guidance:
# - Node:  anything that may appear in a tree, resolved or not.
# - Value: a resolved Number or ListValue.

from typing import Any, Callable

Node = Any
Value = Any

# Simplifier function type: handed to operator rewrite functions so they can
# reduce their own arguments.
SimplifyFn = Callable[[Node], Node]

from tally.interpreter import Interpreter, evaluate  # noqa: E402

__all__ = ["Interpreter", "evaluate", "Node", "Value", "SimplifyFn"]
