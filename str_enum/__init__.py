"""String enum code generator

A Python package for generating string-backed enums from compact enum
declarations. Every variant gets a canonical string, optional alternate
spellings and an integer discriminant, with optional serde and reflection
support in the generated code.
"""

__version__ = "1.0.0"
__author__ = "François Lagunas"

from .pipeline import (
    AtomicWriter,
    CodeGeneratorConfig,
    GrammarError,
    OutputConfig,
    OutputError,
    OutputMode,
    PipelineGenerator,
    SemanticError,
    StrEnumError,
    expand,
)

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
]
