"""
Runtime support imported by generated modules.

Holds the two error types generated code can raise on top of a declared
error type, and the protocols describing the reflection contract that
generated enums fulfil when built with the ``reflect`` capability.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import ClassVar, Protocol, runtime_checkable


class Utf8EnumError(ValueError):
    """Raised by ``from_bytes`` when the input is not a valid variant.

    Exactly one of ``utf8_error`` (the bytes were not UTF-8) or
    ``invalid_variant`` (the text matched no variant) is set.
    """

    def __init__(
        self,
        utf8_error: UnicodeDecodeError | None = None,
        invalid_variant: Exception | None = None,
    ):
        self.utf8_error = utf8_error
        self.invalid_variant = invalid_variant
        super().__init__(str(utf8_error if utf8_error is not None else invalid_variant))

    @classmethod
    def utf8(cls, error: UnicodeDecodeError) -> Utf8EnumError:
        return cls(utf8_error=error)

    @classmethod
    def invalid(cls, error: Exception) -> Utf8EnumError:
        return cls(invalid_variant=error)

    @property
    def is_utf8_error(self) -> bool:
        return self.utf8_error is not None


class DeserializeError(ValueError):
    """Raised when a serialized value does not name a variant."""

    @classmethod
    def invalid_value(cls, value: object, expected: str) -> DeserializeError:
        if isinstance(value, str):
            return cls(f'invalid value: string "{value}", expected {expected}')
        return cls(f"invalid type: {type(value).__name__} {value!r}, expected {expected}")


@runtime_checkable
class EnumCount(Protocol):
    """Enums that know how many variants they have."""

    COUNT: ClassVar[int]


@runtime_checkable
class IntoEnumIterator(Protocol):
    """Enums that can list their variants in declaration order."""

    @classmethod
    def iter(cls) -> Iterator: ...


@runtime_checkable
class VariantNames(Protocol):
    """Enums that expose the names of their variants."""

    VARIANT_NAMES: ClassVar[tuple[str, ...]]


@runtime_checkable
class VariantMetadata(Protocol):
    """Variants that know their own name."""

    def variant_name(self) -> str: ...


@runtime_checkable
class EnumProperty(Protocol):
    """Variants that answer property lookups."""

    def get_str(self, prop: str) -> str | None: ...

    def get_int(self, prop: str) -> int | None: ...

    def get_bool(self, prop: str) -> bool | None: ...


@runtime_checkable
class IntoDiscriminant(Protocol):
    """Variants that convert to their integer discriminant."""

    def discriminant(self) -> int: ...
