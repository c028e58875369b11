"""
Pipeline - declaration to Python enum generator.

This module provides a multi-phase architecture for generating string
enums from compact enum declarations:

1. Phase 1 (Parser): Lex and parse the declaration into a declaration AST
2. Phase 2 (Analyzer): Check invariants, resolve discriminants and build IR
3. Phase 3 (Backend): Render the IR as Python source through Jinja2 templates
4. Phase 4 (Writer): Optional validated, atomic write of the output file
"""

from __future__ import annotations

from .atomic_writer import AtomicWriter
from .config import CodeGeneratorConfig, OutputConfig, OutputMode
from .errors import GrammarError, OutputError, SemanticError, SourcePosition, StrEnumError, Violation
from .generator import PipelineGenerator, expand

__all__ = [
    "PipelineGenerator",
    "expand",
    "CodeGeneratorConfig",
    "OutputConfig",
    "OutputMode",
    "AtomicWriter",
    "StrEnumError",
    "GrammarError",
    "SemanticError",
    "OutputError",
    "Violation",
    "SourcePosition",
]
