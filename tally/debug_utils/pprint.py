import json
import logging
from typing import Optional

from tally.evaluation.operator_table import OperatorTable
from tally.types.list_value import ListValue
from tally.types.node import Interior, Leaf
from tally.types.number import Number

logger = logging.getLogger(__name__)

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_ATOM = "\033[94m"
COLOR_OPERATOR = "\033[95m"
COLOR_NUMBER = "\033[92m"
COLOR_LIST = "\033[96m"
COLOR_FORM = "\033[90m"

# ----------------- Defaults -----------------
DEFAULT_OPTIONS = {
    "max_depth": 8,
    "indent": "  |",
    "display_legend": False,
    "color": False,
    "show_positions": False,
}


# ----------------- Colorize utility -----------------
def colorize(text: str, color: str, options: dict = DEFAULT_OPTIONS) -> str:
    if options.get("color", False):
        return f"{color}{text}{RESET}"
    return text


def label(node, table: Optional[OperatorTable] = None, options: dict = DEFAULT_OPTIONS) -> str:
    """One-line description of a single node, without its children."""
    pos = getattr(node, "pos", None)
    at = f" @{pos}" if options.get("show_positions", False) and pos is not None else ""
    if isinstance(node, Leaf):
        if table is not None and node.text in table:
            return colorize(f"Operator<{node.text}>", COLOR_OPERATOR, options) + at
        return colorize(f"Atom<{node.text!r}>", COLOR_ATOM, options) + at
    if isinstance(node, Number):
        return colorize(f"Number<{node.kind.value}, {node}>", COLOR_NUMBER, options)
    if isinstance(node, ListValue):
        return colorize(f"List<len={len(node)}>", COLOR_LIST, options)
    if isinstance(node, Interior):
        return colorize(f"Form<{len(node)} nodes>", COLOR_FORM, options) + at
    return repr(node)


# ----------------- Pretty printer -----------------
def pprint_tree(
    node,
    table: Optional[OperatorTable] = None,
    options: dict = DEFAULT_OPTIONS,
    _level: int = 0,
) -> str:
    """Render a tree (or a resolved value) one node per line, children indented."""
    legend_str = ""
    if options.get("display_legend", False) and _level == 0:
        legend_items = [
            colorize("Atom", COLOR_ATOM, options),
            colorize("Operator", COLOR_OPERATOR, options),
            colorize("Number", COLOR_NUMBER, options),
            colorize("List", COLOR_LIST, options),
            colorize("Form", COLOR_FORM, options),
        ]
        legend_str = "Key: " + " | ".join(legend_items) + "\n"

    pad = options.get("indent", "  |") * _level
    if _level >= options.get("max_depth", 8):
        return legend_str + pad + "..."

    lines = [pad + label(node, table, options)]
    if isinstance(node, Interior):
        children = node.children
    elif isinstance(node, ListValue):
        children = node.items
    else:
        children = []
    for child in children:
        lines.append(pprint_tree(child, table, options, _level + 1))
    return legend_str + "\n".join(lines)


def format_value(value) -> str:
    """Render a result the way it would be written back as source."""
    if value is None:
        return ""
    return str(value)


# ----------------- Load JSON config -----------------
def load_options_from_json(json_str: str) -> dict:
    try:
        user_opts = json.loads(json_str)
    except json.JSONDecodeError as e:
        logger.warning("ignoring malformed pretty-printer options: %s", e)
        return dict(DEFAULT_OPTIONS)
    if not isinstance(user_opts, dict):
        logger.warning("ignoring pretty-printer options: expected a JSON object")
        return dict(DEFAULT_OPTIONS)
    return {**DEFAULT_OPTIONS, **user_opts}
