"""
IR (Intermediate Representation) node definitions.

These nodes represent a validated declaration, ready for code generation.
Every discriminant is resolved and every requested capability is decided.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..declaration_ast.nodes import ReprType


@dataclass
class VariantDef:
    """A variant with its resolved discriminant."""

    name: str = ""
    discriminant: int = 0
    canonical_string: str = ""
    alternate_strings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def accepted_strings(self) -> tuple[str, ...]:
        """Canonical string first, then alternates, without repeats."""
        return tuple(dict.fromkeys((self.canonical_string, *self.alternate_strings)))


@dataclass
class EnumDef:
    """An enum ready to be emitted."""

    name: str = ""
    visibility: str = ""
    repr_type: ReprType | None = None
    derives: tuple[str, ...] = field(default_factory=tuple)
    error_type: str | None = None
    variants: list[VariantDef] = field(default_factory=list)

    # Integration capabilities resolved from the config
    serde: bool = False
    reflect: bool = False

    @property
    def is_public(self) -> bool:
        return self.visibility == "pub"

    @property
    def all_value_str(self) -> str:
        """Canonical strings joined with commas, as shown in error messages."""
        return ",".join(variant.canonical_string for variant in self.variants)

    @property
    def exported_names(self) -> list[str]:
        if not self.is_public:
            return []
        return [self.name] + ([self.error_type] if self.error_type else [])


@dataclass
class IR:
    """The complete Intermediate Representation of one declaration source."""

    enums: list[EnumDef] = field(default_factory=list)

    # Generation comment
    generation_comment: str = ""

    @property
    def exported_names(self) -> list[str]:
        return [name for enum_def in self.enums for name in enum_def.exported_names]
