from tally.types.number import Number, NumberKind
from tally.types.list_value import ListValue
from tally.types.node import Leaf, Interior

__all__ = ["Number", "NumberKind", "ListValue", "Leaf", "Interior"]
