"""
  Tally Tree Builder

Turns a token sequence into one unresolved tree:

    - no tokens          -> None (no program)
    - a single atom      -> Leaf
    - ( ... )            -> Interior, children built recursively by
                            matching parenthesis depth

Anything else is a structural error and aborts the build.
"""

from __future__ import annotations

from typing import Iterable, Optional

from tally import Node
from tally.errors import TallySyntaxError
from tally.reader.lexer import Token, TokenKind, lex
from tally.types.node import Interior, Leaf


def find_matching_close(tokens: list[Token], open_index: int) -> int:
    """Index of the ')' matching the '(' at open_index."""
    depth = 0
    for j in range(open_index, len(tokens)):
        kind = tokens[j].kind
        if kind is TokenKind.OPEN_PAREN:
            depth += 1
        elif kind is TokenKind.CLOSE_PAREN:
            depth -= 1
            if depth == 0:
                return j
    raise TallySyntaxError(
        f"unbalanced parentheses: '(' at offset {tokens[open_index].pos} is never closed"
    )


def build_interior(tokens: list[Token], start: int, end: int) -> Interior:
    """Build the Interior for tokens[start] == '(' and its match tokens[end] == ')'."""
    node = Interior(pos=tokens[start].pos)
    i = start + 1
    while i < end:
        tok = tokens[i]
        if tok.kind is TokenKind.ATOM:
            node.children.append(Leaf(tok.text, tok.pos))
            i += 1
        elif tok.kind is TokenKind.OPEN_PAREN:
            j = find_matching_close(tokens, i)
            node.children.append(build_interior(tokens, i, j))
            i = j + 1
        else:
            # start/end are a matched pair, so a ')' here means end was wrong
            raise TallySyntaxError(f"unexpected ')' at offset {tok.pos}")
    return node


def build_tree(tokens: Iterable[Token]) -> Optional[Node]:
    tokens = list(tokens)
    if not tokens:
        return None

    first, last = tokens[0], tokens[-1]
    if len(tokens) == 1 and first.kind is TokenKind.ATOM:
        return Leaf(first.text, first.pos)

    if first.kind is TokenKind.OPEN_PAREN and last.kind is TokenKind.CLOSE_PAREN:
        end = find_matching_close(tokens, 0)
        if end != len(tokens) - 1:
            raise TallySyntaxError(
                f"unexpected tokens after expression at offset {tokens[end + 1].pos}"
            )
        return build_interior(tokens, 0, end)

    raise TallySyntaxError("no matching parenthesis found")


def read(source: str) -> Optional[Node]:
    """Lex and build a single program."""
    return build_tree(lex(source))
