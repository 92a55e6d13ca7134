from __future__ import annotations

import logging
from typing import Optional

from tally import Value
from tally.errors import TallyNestingError
from tally.evaluation.operator_table import OperatorTable
from tally.evaluation.simplifier import Simplifier
from tally.reader.parser import read

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Reads and simplifies Tally programs against one operator table.
    Each call to eval is independent; nothing carries over between programs.
    """

    def __init__(self, table: Optional[OperatorTable] = None):
        self.simplifier = Simplifier(table)

    @property
    def table(self) -> OperatorTable:
        return self.simplifier.table

    def read(self, code: str):
        try:
            return read(code)
        except RecursionError as e:
            raise TallyNestingError("expression is nested too deeply to read") from e

    def eval(self, code: str) -> Optional[Value]:
        """Evaluate one program. Returns None when the source holds no program."""
        tree = self.read(code)
        if tree is None:
            logger.debug("empty program")
            return None
        try:
            result = self.simplifier.simplify(tree)
        except RecursionError as e:
            raise TallyNestingError("expression is nested too deeply to simplify") from e
        logger.debug("%s => %s", code.strip(), result)
        return result


def evaluate(code: str, table: Optional[OperatorTable] = None) -> Optional[Value]:
    return Interpreter(table).eval(code)
