"""
Analyzer module.

Contains the declaration validator, discriminant resolution and IR building.
"""

from __future__ import annotations

from .ir_nodes import IR, EnumDef, VariantDef
from .validator import DeclarationValidator

__all__ = [
    "VariantDef",
    "EnumDef",
    "IR",
    "DeclarationValidator",
]
