from tally.reader.lexer import Token, TokenKind, lex
from tally.reader.parser import build_tree, read

__all__ = ["Token", "TokenKind", "lex", "build_tree", "read"]
