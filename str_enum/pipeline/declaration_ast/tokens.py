"""
Token definitions for the declaration grammar.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..errors import SourcePosition


class TokenType(Enum):
    """Kind of token produced by the lexer."""

    IDENT = "identifier"
    INT = "integer literal"
    STRING = "string literal"
    HASH = "'#'"
    LBRACKET = "'['"
    RBRACKET = "']'"
    LPAREN = "'('"
    RPAREN = "')'"
    LBRACE = "'{'"
    RBRACE = "'}'"
    COMMA = "','"
    EQ = "'='"
    FAT_ARROW = "'=>'"
    MINUS = "'-'"
    PATH_SEP = "'::'"
    DOT = "'.'"
    EOF = "end of input"


# Punctuation, longest first so "=>" and "::" win over "=" and ":"
PUNCTUATION: tuple[tuple[str, TokenType], ...] = (
    ("=>", TokenType.FAT_ARROW),
    ("::", TokenType.PATH_SEP),
    ("#", TokenType.HASH),
    ("[", TokenType.LBRACKET),
    ("]", TokenType.RBRACKET),
    ("(", TokenType.LPAREN),
    (")", TokenType.RPAREN),
    ("{", TokenType.LBRACE),
    ("}", TokenType.RBRACE),
    (",", TokenType.COMMA),
    ("=", TokenType.EQ),
    ("-", TokenType.MINUS),
    (".", TokenType.DOT),
)


@dataclass(frozen=True)
class Token:
    """A lexed token.

    ``value`` is the decoded payload: the identifier name, the integer for
    INT, the unescaped text for STRING, and the symbol for punctuation.
    """

    type: TokenType
    value: Any = ""
    line: int = 1
    column: int = 1

    @property
    def position(self) -> SourcePosition:
        return SourcePosition(self.line, self.column)

    def describe(self) -> str:
        """Describe the token for diagnostics."""
        if self.type == TokenType.EOF:
            return self.type.value
        if self.type == TokenType.STRING:
            return f'string "{self.value}"'
        if self.type in (TokenType.IDENT, TokenType.INT):
            return f"{self.type.value} '{self.value}'"
        return self.type.value
