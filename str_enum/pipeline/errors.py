"""
Diagnostics raised by the generator pipeline.

Grammar errors abort on the first malformed token. Semantic errors are
collected over the whole declaration and reported together.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class SourcePosition:
    """A 1-based line/column location in the declaration source."""

    line: int = 1
    column: int = 1

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


class StrEnumError(Exception):
    """Base class for all generator diagnostics."""


class GrammarError(StrEnumError):
    """Raised when the token sequence does not match the declaration grammar."""

    def __init__(self, message: str, position: SourcePosition | None = None):
        self.message = message
        self.position = position or SourcePosition()
        super().__init__(f"{self.position}: {message}")


@dataclass
class Violation:
    """One broken invariant found by the validator.

    Attributes:
        message: Human readable description
        variants: Names of every variant involved, in declaration order
        position: Location of the construct that triggered the violation
    """

    message: str
    variants: tuple[str, ...] = field(default_factory=tuple)
    position: SourcePosition = field(default_factory=SourcePosition)

    def __str__(self) -> str:
        return f"{self.position}: {self.message}"


class SemanticError(StrEnumError):
    """Raised when a well-formed declaration breaks one or more invariants."""

    def __init__(self, violations: list[Violation]):
        self.violations = list(violations)
        lines = [f"{len(self.violations)} invalid declaration item(s):"]
        lines.extend(f"  {violation}" for violation in self.violations)
        super().__init__("\n".join(lines))


class OutputError(StrEnumError):
    """Raised when generated code cannot be written or fails validation."""
