"""
Declaration AST module.

Contains the token definitions, lexer, AST nodes and parser for enum
declarations.
"""

from __future__ import annotations

from .lexer import Lexer, tokenize
from .nodes import REPR_TYPES, DeclarationModule, ReprType, TypeDescriptor, VariantDescriptor
from .parser import DeclarationParser
from .tokens import Token, TokenType

__all__ = [
    "Token",
    "TokenType",
    "Lexer",
    "tokenize",
    "REPR_TYPES",
    "ReprType",
    "VariantDescriptor",
    "TypeDescriptor",
    "DeclarationModule",
    "DeclarationParser",
]
