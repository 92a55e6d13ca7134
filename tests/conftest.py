import pytest

from tally.builtin.operator_builtin import default_table
from tally.evaluation.simplifier import Simplifier
from tally.interpreter import Interpreter


@pytest.fixture
def table():
    """The built-in operator table."""
    return default_table()


@pytest.fixture
def simplifier(table):
    return Simplifier(table)


@pytest.fixture
def interp(table):
    """Interpreter over the built-in operators."""
    return Interpreter(table)
