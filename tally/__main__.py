"""Evaluate one Tally expression and print its value.

    tally "(sum (range 1 5))"
    echo "(+ 1 2.5)" | tally
    tally --tree "(list (* 1 2) 3)"
"""
import logging
import sys
from typing import Optional

import typer

from tally.config import get_log_level, get_pprint_options
from tally.debug_utils.pprint import format_value, pprint_tree
from tally.errors import TallyError
from tally.interpreter import Interpreter

app = typer.Typer(help="Evaluate a prefix-notation Tally expression", add_completion=False)


@app.command()
def run(
    expression: Optional[list[str]] = typer.Argument(
        None, help="Expression to evaluate; words are joined with spaces. Read from stdin when omitted."
    ),
    tree: bool = typer.Option(False, "--tree", help="Print the unresolved tree before the result."),
) -> None:
    logging.basicConfig(level=get_log_level(), format="%(levelname)s %(name)s: %(message)s")
    code = " ".join(expression) if expression else sys.stdin.read()

    interp = Interpreter()
    try:
        if tree:
            parsed = interp.read(code)
            if parsed is not None:
                typer.echo(pprint_tree(parsed, interp.table, get_pprint_options()))
        result = interp.eval(code)
    except TallyError as e:
        typer.echo(f"error: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(format_value(result))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
