"""
  Tally Lexer

- Single pass over the source, no backtracking
- Whitespace (including newlines) separates tokens and is never emitted
- '(' and ')' are one-character tokens
- Any other maximal run of non-whitespace, non-paren text is an atom
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Iterator, NamedTuple


class TokenKind(Enum):
    OPEN_PAREN = "lparen"
    CLOSE_PAREN = "rparen"
    ATOM = "atom"


class Token(NamedTuple):
    kind: TokenKind
    text: str
    pos: int  # offset of the token's first character in the source

    def __repr__(self):
        return f"Token({self.kind.name}, {self.text!r})"


TOKEN_RE = re.compile(
    r"\s*(?:"
    r"(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<atom>[^\s()]+)"  # everything else up to whitespace or a paren
    r")"
)


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields Token(kind, text, pos) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if m is None:
            # only trailing whitespace is left
            break
        group = m.lastgroup
        yield Token(TokenKind(group), m.group(group), m.start(group))
        pos = m.end()
