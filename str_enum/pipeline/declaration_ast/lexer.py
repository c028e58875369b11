"""
Lexer for declaration source text.

Turns a declaration written in the brace-and-attribute syntax into the
token sequence consumed by the parser. Hosts that already hold tokens can
skip this step and hand a ``list[Token]`` straight to the parser.
"""

from __future__ import annotations

import re

from ..errors import GrammarError, SourcePosition
from .tokens import PUNCTUATION, Token, TokenType

_WHITESPACE = re.compile(r"\s+")
_IDENT = re.compile(r"[^\W\d]\w*")
_INT = re.compile(r"0[xX][0-9a-fA-F_]*|0[oO][0-7_]*|0[bB][01_]*|[0-9][0-9_]*")
_RAW_STRING_START = re.compile(r'r(#*)"')
_HEX_ESCAPE = re.compile(r"[0-9a-fA-F]{2}")
_UNICODE_ESCAPE = re.compile(r"\{([0-9a-fA-F_]{1,8})\}")

_SIMPLE_ESCAPES = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "\\": "\\",
    "0": "\0",
    '"': '"',
    "'": "'",
}


class Lexer:
    """Scans declaration text into tokens."""

    def __init__(self, source: str):
        self.source = source
        self.pos = 0
        self.line = 1
        self.line_start = 0

    def tokenize(self) -> list[Token]:
        """Scan the whole source, ending with a single EOF token."""
        tokens: list[Token] = []
        while True:
            self._skip_trivia()
            if self.pos >= len(self.source):
                tokens.append(Token(TokenType.EOF, "", self.line, self._column()))
                return tokens
            tokens.append(self._next_token())

    def _column(self, pos: int | None = None) -> int:
        return (self.pos if pos is None else pos) - self.line_start + 1

    def _position(self) -> SourcePosition:
        return SourcePosition(self.line, self._column())

    def _advance_to(self, end: int) -> None:
        """Move to ``end``, keeping line bookkeeping in sync."""
        chunk = self.source[self.pos : end]
        newlines = chunk.count("\n")
        if newlines:
            self.line += newlines
            self.line_start = self.pos + chunk.rindex("\n") + 1
        self.pos = end

    def _skip_trivia(self) -> None:
        while self.pos < len(self.source):
            match = _WHITESPACE.match(self.source, self.pos)
            if match:
                self._advance_to(match.end())
                continue
            if self.source.startswith("//", self.pos):
                end = self.source.find("\n", self.pos)
                self._advance_to(len(self.source) if end == -1 else end)
                continue
            if self.source.startswith("/*", self.pos):
                self._skip_block_comment()
                continue
            return

    def _skip_block_comment(self) -> None:
        # Block comments nest, as in the host grammar
        start = self._position()
        depth = 0
        index = self.pos
        while index < len(self.source):
            if self.source.startswith("/*", index):
                depth += 1
                index += 2
            elif self.source.startswith("*/", index):
                depth -= 1
                index += 2
                if depth == 0:
                    self._advance_to(index)
                    return
            else:
                index += 1
        raise GrammarError("unterminated block comment", start)

    def _next_token(self) -> Token:
        line, column = self.line, self._column()
        char = self.source[self.pos]

        raw = _RAW_STRING_START.match(self.source, self.pos)
        if raw:
            return self._raw_string(raw, line, column)

        if char == '"':
            return self._string(line, column)

        if "0" <= char <= "9":
            return self._integer(line, column)

        ident = _IDENT.match(self.source, self.pos)
        if ident:
            self._advance_to(ident.end())
            return Token(TokenType.IDENT, ident.group(), line, column)

        for symbol, token_type in PUNCTUATION:
            if self.source.startswith(symbol, self.pos):
                self._advance_to(self.pos + len(symbol))
                return Token(token_type, symbol, line, column)

        raise GrammarError(f"unexpected character {char!r}", SourcePosition(line, column))

    def _integer(self, line: int, column: int) -> Token:
        match = _INT.match(self.source, self.pos)
        text = match.group()
        end = match.end()
        position = SourcePosition(line, column)
        if end < len(self.source) and (self.source[end].isalnum() or self.source[end] == "_"):
            raise GrammarError(f"invalid integer literal '{text}{self.source[end]}'", position)
        digits = text.replace("_", "")
        try:
            value = int(digits, 10) if digits.isdigit() else int(digits, 0)
        except ValueError:
            raise GrammarError(f"invalid integer literal '{text}'", position) from None
        self._advance_to(end)
        return Token(TokenType.INT, value, line, column)

    def _raw_string(self, match: re.Match, line: int, column: int) -> Token:
        terminator = '"' + match.group(1)
        start = match.end()
        end = self.source.find(terminator, start)
        if end == -1:
            raise GrammarError("unterminated raw string literal", SourcePosition(line, column))
        value = self.source[start:end]
        self._advance_to(end + len(terminator))
        return Token(TokenType.STRING, value, line, column)

    def _string(self, line: int, column: int) -> Token:
        start = SourcePosition(line, column)
        parts: list[str] = []
        index = self.pos + 1
        source = self.source
        while True:
            if index >= len(source):
                raise GrammarError("unterminated string literal", start)
            char = source[index]
            if char == '"':
                index += 1
                break
            if char != "\\":
                parts.append(char)
                index += 1
                continue

            escape = source[index + 1 : index + 2]
            if escape in _SIMPLE_ESCAPES:
                parts.append(_SIMPLE_ESCAPES[escape])
                index += 2
            elif escape in ("\n", "\r"):
                # Line continuation swallows the newline and following indentation
                index += 2
                while index < len(source) and source[index] in " \t\r\n":
                    index += 1
            elif escape == "x":
                hex_match = _HEX_ESCAPE.match(source, index + 2)
                if not hex_match:
                    raise GrammarError("invalid \\x escape in string literal", start)
                parts.append(chr(int(hex_match.group(), 16)))
                index = hex_match.end()
            elif escape == "u":
                uni_match = _UNICODE_ESCAPE.match(source, index + 2)
                code = int(uni_match.group(1).replace("_", ""), 16) if uni_match else None
                if code is None or code > 0x10FFFF or 0xD800 <= code <= 0xDFFF:
                    raise GrammarError("invalid \\u{...} escape in string literal", start)
                parts.append(chr(code))
                index = uni_match.end()
            else:
                raise GrammarError(f"unknown escape sequence '\\{escape}' in string literal", start)

        self._advance_to(index)
        return Token(TokenType.STRING, "".join(parts), line, column)


def tokenize(source: str) -> list[Token]:
    """Convenience function to lex declaration text."""
    return Lexer(source).tokenize()
