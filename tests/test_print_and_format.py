import pytest

from tally.debug_utils.pprint import (
    DEFAULT_OPTIONS,
    RESET,
    format_value,
    label,
    load_options_from_json,
    pprint_tree,
)
from tally.reader.parser import read
from tally.types.list_value import ListValue
from tally.types.number import Number


def test_pprint_unresolved_tree(table):
    tree = read("(+ 1 (* x 3))")
    assert pprint_tree(tree, table) == "\n".join([
        "Form<3 nodes>",
        "  |Operator<+>",
        "  |Atom<'1'>",
        "  |Form<3 nodes>",
        "  |  |Operator<*>",
        "  |  |Atom<'x'>",
        "  |  |Atom<'3'>",
    ])


def test_pprint_without_table_shows_every_leaf_as_atom():
    assert pprint_tree(read("(sum 1)")).splitlines()[1] == "  |Atom<'sum'>"


def test_pprint_resolved_list():
    value = ListValue([Number.from_int(1), ListValue([Number.from_float(2.5)])])
    assert pprint_tree(value) == "\n".join([
        "List<len=2>",
        "  |Number<int, 1>",
        "  |List<len=1>",
        "  |  |Number<float, 2.5>",
    ])


def test_pprint_depth_limit():
    options = {**DEFAULT_OPTIONS, "max_depth": 1}
    assert pprint_tree(read("(a (b (c)))"), options=options).splitlines() == [
        "Form<2 nodes>",
        "  |...",
        "  |...",
    ]


def test_pprint_color_and_positions(table):
    options = {**DEFAULT_OPTIONS, "color": True, "show_positions": True}
    out = label(read("(+ 1 2)").children[0], table, options)
    assert out.endswith(RESET + " @1")


def test_pprint_legend():
    options = {**DEFAULT_OPTIONS, "display_legend": True}
    assert pprint_tree(Number.from_int(1), options=options).startswith("Key: Atom | Operator")


@pytest.mark.parametrize(
    "value,expected",
    [
        (None, ""),
        (Number.from_int(26), "26"),
        (Number.from_float(3.5), "3.5"),
        (ListValue(), "()"),
        (ListValue.of_ints([3, 4, 5]), "(3 4 5)"),
        (ListValue([Number.from_int(1), ListValue.of_ints([2])]), "(1 (2))"),
    ]
)
def test_format_value(value, expected):
    assert format_value(value) == expected


def test_load_options_from_json():
    opts = load_options_from_json('{"max_depth": 2, "color": true}')
    assert opts["max_depth"] == 2
    assert opts["color"] is True
    assert opts["indent"] == DEFAULT_OPTIONS["indent"]


@pytest.mark.parametrize("raw", ["not json", "[1, 2]"])
def test_load_options_from_bad_json_falls_back(raw, caplog):
    assert load_options_from_json(raw) == DEFAULT_OPTIONS
    assert caplog.records
