"""
Declaration parser that builds the declaration AST.

Phase 1 of the pipeline: turn a token sequence into TypeDescriptor /
VariantDescriptor nodes without checking any cross-variant invariant.
Both discriminant placements are normalized here, so later phases never
see which surface syntax was used.
"""

from __future__ import annotations

from collections.abc import Sequence

from ...log_config import get_logger
from ..errors import GrammarError
from .nodes import REPR_TYPES, DeclarationModule, ReprType, TypeDescriptor, VariantDescriptor
from .tokens import Token, TokenType

logger = get_logger(__name__)

# Restricted visibility scopes accepted inside pub(...)
VISIBILITY_SCOPES = {"crate", "self", "super"}


class DeclarationParser:
    """Parses a token sequence into declaration AST nodes."""

    def __init__(self) -> None:
        self.tokens: Sequence[Token] = ()
        self.index = 0

    def parse(self, tokens: Sequence[Token]) -> DeclarationModule:
        """
        Parse every declaration in a token sequence.

        Args:
            tokens: Tokens ending with an EOF token (one is assumed if missing)

        Returns:
            DeclarationModule with the declarations in source order

        Raises:
            GrammarError: On the first construct that does not match the grammar
        """
        self._reset(tokens)
        module = DeclarationModule()
        while not self._check(TokenType.EOF):
            module.declarations.append(self._parse_declaration())
        if not module.declarations:
            raise GrammarError("expected an enum declaration", self._peek().position)
        return module

    def parse_declaration(self, tokens: Sequence[Token]) -> TypeDescriptor:
        """Parse a token sequence holding exactly one declaration."""
        self._reset(tokens)
        declaration = self._parse_declaration()
        self._expect(TokenType.EOF, "after the enum declaration")
        return declaration

    # Token cursor

    def _reset(self, tokens: Sequence[Token]) -> None:
        tokens = list(tokens)
        if not tokens or tokens[-1].type != TokenType.EOF:
            last = tokens[-1] if tokens else None
            tokens.append(Token(TokenType.EOF, "", last.line if last else 1, last.column if last else 1))
        self.tokens = tokens
        self.index = 0

    def _peek(self, offset: int = 0) -> Token:
        index = min(self.index + offset, len(self.tokens) - 1)
        return self.tokens[index]

    def _check(self, token_type: TokenType, value: str | None = None) -> bool:
        token = self._peek()
        return token.type == token_type and (value is None or token.value == value)

    def _advance(self) -> Token:
        token = self._peek()
        if token.type != TokenType.EOF:
            self.index += 1
        return token

    def _accept(self, token_type: TokenType, value: str | None = None) -> Token | None:
        if self._check(token_type, value):
            return self._advance()
        return None

    def _expect(self, token_type: TokenType, context: str, value: str | None = None) -> Token:
        if self._check(token_type, value):
            return self._advance()
        expected = f"'{value}'" if value is not None else token_type.value
        token = self._peek()
        raise GrammarError(f"expected {expected} {context}, found {token.describe()}", token.position)

    # Grammar

    def _parse_declaration(self) -> TypeDescriptor:
        """
        Parse one declaration.

        Grammar:
            attribute* visibility? "enum" IDENT "{" variant ("," variant)* ","? "}"
        """
        start = self._peek().position
        declaration = TypeDescriptor(position=start)
        derives: list[str] = []

        while self._check(TokenType.HASH):
            self._parse_attribute(declaration, derives)
        declaration.derives = tuple(dict.fromkeys(derives))

        declaration.visibility = self._parse_visibility()
        self._expect(TokenType.IDENT, "to start the declaration", value="enum")
        declaration.name = self._expect(TokenType.IDENT, "as the enum name").value

        self._expect(TokenType.LBRACE, f"to open the body of enum {declaration.name}")
        while not self._check(TokenType.RBRACE):
            declaration.variants.append(self._parse_variant())
            if not self._accept(TokenType.COMMA):
                break
        self._expect(TokenType.RBRACE, f"to close the body of enum {declaration.name}")

        logger.debug("Parsed enum %s with %d variant(s)", declaration.name, len(declaration.variants))
        return declaration

    def _parse_attribute(self, declaration: TypeDescriptor, derives: list[str]) -> None:
        """Parse ``#[error_type(..)]``, ``#[derive(..)]`` or ``#[repr(..)]``."""
        self._expect(TokenType.HASH, "to start an attribute")
        self._expect(TokenType.LBRACKET, "after '#'")
        name_token = self._expect(TokenType.IDENT, "as the attribute name")
        self._expect(TokenType.LPAREN, f"after attribute {name_token.value}")

        if name_token.value == "error_type":
            if declaration.error_type is not None:
                raise GrammarError("duplicate #[error_type] attribute", name_token.position)
            declaration.error_type = self._expect(TokenType.IDENT, "as the error type name").value

        elif name_token.value == "derive":
            while not self._check(TokenType.RPAREN):
                derives.append(self._parse_path("in derive list"))
                if not self._accept(TokenType.COMMA):
                    break

        elif name_token.value == "repr":
            if declaration.repr_type is not None:
                raise GrammarError("duplicate #[repr] attribute", name_token.position)
            repr_token = self._expect(TokenType.IDENT, "as the representation type")
            if repr_token.value not in REPR_TYPES:
                supported = ", ".join(REPR_TYPES)
                raise GrammarError(
                    f"unsupported representation type '{repr_token.value}' (expected one of {supported})",
                    repr_token.position,
                )
            declaration.repr_type = ReprType(repr_token.value)

        else:
            raise GrammarError(
                f"unknown attribute '{name_token.value}' (expected error_type, derive or repr)",
                name_token.position,
            )

        self._expect(TokenType.RPAREN, f"to close attribute {name_token.value}")
        self._expect(TokenType.RBRACKET, f"to close attribute {name_token.value}")

    def _parse_path(self, context: str) -> str:
        """Parse ``a::b::c`` or ``a.b.c`` into a dotted label."""
        segments = [self._expect(TokenType.IDENT, context).value]
        while self._accept(TokenType.PATH_SEP) or self._accept(TokenType.DOT):
            segments.append(self._expect(TokenType.IDENT, context).value)
        return ".".join(segments)

    def _parse_visibility(self) -> str:
        """Parse ``pub``, ``pub(crate)``, ``pub(in path)`` or nothing."""
        if not self._accept(TokenType.IDENT, "pub"):
            return ""
        if not self._accept(TokenType.LPAREN):
            return "pub"

        if self._accept(TokenType.IDENT, "in"):
            scope = f"in {self._parse_path('in visibility path').replace('.', '::')}"
        else:
            scope_token = self._expect(TokenType.IDENT, "as the visibility scope")
            if scope_token.value not in VISIBILITY_SCOPES:
                raise GrammarError(f"invalid visibility scope '{scope_token.value}'", scope_token.position)
            scope = scope_token.value
        self._expect(TokenType.RPAREN, "to close the visibility scope")
        return f"pub({scope})"

    def _parse_variant(self) -> VariantDescriptor:
        """
        Parse one variant in any of its surface forms.

        Grammar:
            IDENT "=" INT "=>" STRING alternates?     (prefix discriminant)
            IDENT "=>" INT "," STRING alternates?     (suffix discriminant)
            IDENT "=>" STRING alternates?
            IDENT "=" STRING alternates?              (legacy mapping operator)
        """
        name_token = self._expect(TokenType.IDENT, "as a variant name")
        variant = VariantDescriptor(name=name_token.value, position=name_token.position)

        if self._accept(TokenType.EQ):
            if self._at_integer():
                variant.discriminant = self._parse_integer()
                self._expect(TokenType.FAT_ARROW, f"after the discriminant of variant {variant.name}")
        elif self._accept(TokenType.FAT_ARROW):
            if self._at_integer():
                variant.discriminant = self._parse_integer()
                self._expect(TokenType.COMMA, f"after the discriminant of variant {variant.name}")
        else:
            token = self._peek()
            raise GrammarError(
                f"expected '=>' or '=' after variant {variant.name}, found {token.describe()}",
                token.position,
            )

        variant.canonical_string = self._expect(TokenType.STRING, f"as the string of variant {variant.name}").value
        if self._accept(TokenType.LPAREN):
            variant.alternate_strings = self._parse_alternates(variant.name)
        return variant

    def _parse_alternates(self, variant_name: str) -> tuple[str, ...]:
        alternates: list[str] = []
        while not self._check(TokenType.RPAREN):
            alternates.append(self._expect(TokenType.STRING, f"in the alternate strings of variant {variant_name}").value)
            if not self._accept(TokenType.COMMA):
                break
        self._expect(TokenType.RPAREN, f"to close the alternate strings of variant {variant_name}")
        return tuple(alternates)

    def _at_integer(self) -> bool:
        return self._check(TokenType.INT) or (self._check(TokenType.MINUS) and self._peek(1).type == TokenType.INT)

    def _parse_integer(self) -> int:
        negative = self._accept(TokenType.MINUS) is not None
        value = self._expect(TokenType.INT, "as the discriminant").value
        return -value if negative else value
