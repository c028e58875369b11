"""
Declaration AST node definitions.

These nodes hold exactly what the declaration says. Discriminants that
were not written stay ``None`` here; the analyzer resolves them.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..errors import SourcePosition

# Representation types accepted by #[repr(...)]: name -> (bits, signed)
REPR_TYPES: dict[str, tuple[int, bool]] = {
    "u8": (8, False),
    "u16": (16, False),
    "u32": (32, False),
    "u64": (64, False),
    "u128": (128, False),
    "usize": (64, False),
    "i8": (8, True),
    "i16": (16, True),
    "i32": (32, True),
    "i64": (64, True),
    "i128": (128, True),
    "isize": (64, True),
}


@dataclass(frozen=True)
class ReprType:
    """An integer representation requested with #[repr(...)]."""

    name: str = "isize"

    @property
    def bits(self) -> int:
        return REPR_TYPES[self.name][0]

    @property
    def signed(self) -> bool:
        return REPR_TYPES[self.name][1]

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def fits(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value


@dataclass
class VariantDescriptor:
    """One ``Name [= disc] => "canonical"("alt", ...)`` entry."""

    name: str = ""
    discriminant: int | None = None
    canonical_string: str = ""
    alternate_strings: tuple[str, ...] = field(default_factory=tuple)
    position: SourcePosition = field(default_factory=SourcePosition)


@dataclass
class TypeDescriptor:
    """The type-level part of a declaration plus its ordered variants."""

    name: str = ""
    visibility: str = ""  # "", "pub", "pub(crate)", "pub(super)", "pub(in a::b)", ...
    repr_type: ReprType | None = None
    derives: tuple[str, ...] = field(default_factory=tuple)  # Opaque labels, declaration order
    error_type: str | None = None
    variants: list[VariantDescriptor] = field(default_factory=list)
    position: SourcePosition = field(default_factory=SourcePosition)

    @property
    def discriminant_width(self) -> int | None:
        return self.repr_type.bits if self.repr_type else None

    @property
    def is_public(self) -> bool:
        return self.visibility == "pub"


@dataclass
class DeclarationModule:
    """All declarations read from one source, in source order."""

    declarations: list[TypeDescriptor] = field(default_factory=list)
