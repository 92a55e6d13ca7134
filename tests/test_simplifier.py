import logging

import pytest

from tally.builtin.operator_builtin import BUILTIN_OPERATORS
from tally.errors import TallyOperatorError, TallyResolutionError, TallyTypeError
from tally.evaluation.operator_table import VARIADIC, Operator, OperatorTable
from tally.evaluation.simplifier import Simplifier, simplify
from tally.interpreter import Interpreter
from tally.types.list_value import ListValue
from tally.types.node import Interior, Leaf
from tally.types.number import Number


# -----------------------------------------------------
# Resolution of leaves and resolved nodes
# -----------------------------------------------------

def test_leaf_resolves_to_number(simplifier):
    assert simplifier.simplify(Leaf("12")) == Number.from_int(12)
    assert simplifier.simplify(Leaf("1.5")).is_float


@pytest.mark.parametrize("value", [Number.from_int(3), Number.from_float(2.5), ListValue.of_ints([1, 2])])
def test_resolved_nodes_are_left_alone(simplifier, value):
    assert simplifier.simplify(value) is value
    assert simplifier.simplify(simplifier.simplify(value)) is value


def test_unresolvable_atom(simplifier):
    with pytest.raises(TallyResolutionError) as exc:
        simplifier.simplify(Leaf("foo", 4))
    assert exc.value.atom == "foo"
    assert exc.value.pos == 4
    assert "cannot resolve" in str(exc.value)


def test_top_level_atom_from_source(interp):
    with pytest.raises(TallyResolutionError):
        interp.eval("x")


def test_empty_form_stays_unresolved(simplifier):
    node = Interior()
    assert simplifier.simplify(node) is node


def test_unknown_operator(interp):
    with pytest.raises(TallyOperatorError) as exc:
        interp.eval("(foo 1 2)")
    assert exc.value.name == "foo"
    assert exc.value.argc == 2
    assert "failed to simplify" in str(exc.value)


def test_form_without_operator_name(interp):
    with pytest.raises(TallyOperatorError) as exc:
        interp.eval("((+ 1 2) 3)")
    assert exc.value.name is None


def test_non_number_atom_argument_is_type_error(interp):
    with pytest.raises(TallyTypeError) as exc:
        interp.eval("(+ 1 foo)")
    assert exc.value.position == 2
    assert isinstance(exc.value.__cause__, TallyResolutionError)


def test_error_in_nested_form_names_inner_operator(interp):
    with pytest.raises(TallyTypeError) as exc:
        interp.eval("(+ 1 (* 2 (list)))")
    assert exc.value.operator == "*"
    assert exc.value.position == 2


def test_module_level_simplify_uses_builtins():
    assert simplify(Interior.of("+", "1", "2")) == Number.from_int(3)


def test_hand_built_tree_with_resolved_children(simplifier):
    tree = Interior.of("list", Number.from_int(1), Interior.of("range", "0", "2"))
    assert simplifier.simplify(tree) == ListValue([Number.from_int(1), ListValue.of_ints([0, 1])])


# -----------------------------------------------------
# Operator table
# -----------------------------------------------------

def test_lookup_filters_by_argument_count(table):
    assert table.lookup("sum", 1).name == "sum"
    assert table.lookup("sum", 2) is None
    assert table.lookup("range", 2) is not None
    assert table.lookup("+", 0).is_variadic
    assert table.lookup("nope", 1) is None


def test_first_matching_entry_wins(table):
    # (- x) matches both the fixed and the variadic entry; the fixed one is declared first
    assert table.lookup("-", 1).arity == 1
    assert table.lookup("-", 3).is_variadic


def test_declaration_order_is_the_tie_break():
    def const(n):
        return lambda args, simplify: Number.from_int(n)

    first = OperatorTable([Operator("k", VARIADIC, const(1)), Operator("k", 2, const(2))])
    second = OperatorTable([Operator("k", 2, const(2)), Operator("k", VARIADIC, const(1))])
    assert Interpreter(first).eval("(k 0 0)") == Number.from_int(1)
    assert Interpreter(second).eval("(k 0 0)") == Number.from_int(2)
    assert Interpreter(second).eval("(k 0)") == Number.from_int(1)


def test_extended_table_adds_operators_without_mutating(table):
    def double(args, simplify):
        return simplify(args[0]) * Number.from_int(2)

    bigger = table.extended(Operator("double", 1, double, "Twice the argument."))
    assert len(bigger) == len(table) + 1
    assert "double" not in table
    assert "double" in bigger
    assert Interpreter(bigger).eval("(double (+ 1 2))") == Number.from_int(6)
    with pytest.raises(TallyOperatorError):
        Interpreter(table).eval("(double 1)")


def test_builtin_names_in_declaration_order(table):
    assert table.names()[:5] == ["+", "*", "list", "sum", "range"]
    assert len(table) == len(BUILTIN_OPERATORS)


@pytest.mark.parametrize(
    "op,expected",
    [
        (Operator("sum", 1, None), "(sum x1)"),
        (Operator("range", 2, None), "(range x1 x2)"),
        (Operator("+", VARIADIC, None), "(+ &rest args)"),
        (Operator("pi", 0, None), "(pi)"),
    ]
)
def test_operator_signature(op, expected):
    assert op.signature == expected


# -----------------------------------------------------
# Evaluation order and logging
# -----------------------------------------------------

def test_arguments_simplified_left_to_right():
    seen = []

    def record(args, simplify):
        value = simplify(args[0])
        seen.append(value.value)
        return value

    table = OperatorTable(BUILTIN_OPERATORS).extended(Operator("rec", 1, record))
    Interpreter(table).eval("(+ (rec 1) (rec (rec 2)) (rec 3))")
    assert seen == [1, 2, 2, 3]


def test_expansions_are_logged(interp, caplog):
    with caplog.at_level(logging.DEBUG, logger="tally.evaluation.simplifier"):
        interp.eval("(+ 1 (* 2 3))")
    messages = [r.getMessage() for r in caplog.records]
    assert "expanding + with 2 argument(s)" in messages
    assert "expanding * with 2 argument(s)" in messages


def test_simplifier_defaults_to_builtin_table():
    assert Simplifier().table.lookup("range", 2) is not None
