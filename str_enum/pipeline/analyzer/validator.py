"""
Declaration validator.

Phase 2 of the pipeline: check every cross-variant invariant of a parsed
declaration, resolve discriminants and build the IR. Violations are
collected over the whole input and reported in a single SemanticError.
"""

from __future__ import annotations

from ...log_config import get_logger
from ...utils import RESERVED_MODULE_NAMES, is_enum_reserved_name, is_python_identifier
from ..config import CodeGeneratorConfig
from ..declaration_ast.nodes import DeclarationModule, TypeDescriptor, VariantDescriptor
from ..errors import SemanticError, Violation
from .ir_nodes import IR, EnumDef, VariantDef

logger = get_logger(__name__)

# Discriminant given to the first variant when it has no explicit value
DEFAULT_DISCRIMINANT_BASE = 0


class DeclarationValidator:
    """Validates declarations and resolves them into IR."""

    def __init__(self, config: CodeGeneratorConfig | None = None):
        self.config = config or CodeGeneratorConfig()

    def validate(self, declaration: TypeDescriptor) -> EnumDef:
        """
        Validate a single declaration.

        Args:
            declaration: Parsed declaration

        Returns:
            The resolved EnumDef

        Raises:
            SemanticError: Listing every violation found
        """
        violations: list[Violation] = []
        enum_def = self._analyze(declaration, violations)
        if violations:
            raise SemanticError(violations)
        return enum_def

    def validate_module(self, module: DeclarationModule) -> IR:
        """
        Validate all declarations of a module.

        Each declaration is checked on its own; violations of all of them are
        reported together.
        """
        violations: list[Violation] = []
        ir = IR()
        for declaration in module.declarations:
            ir.enums.append(self._analyze(declaration, violations))
        if violations:
            raise SemanticError(violations)
        return ir

    def check(self, declaration: TypeDescriptor) -> list[Violation]:
        """Return the violations of a declaration without raising."""
        violations: list[Violation] = []
        self._analyze(declaration, violations)
        return violations

    def _analyze(self, declaration: TypeDescriptor, violations: list[Violation]) -> EnumDef:
        found: list[Violation] = []
        self._check_type_names(declaration, found)
        self._check_parse_space(declaration, found)
        self._check_variant_names(declaration, found)
        self._check_strings(declaration, found)
        discriminants = self._resolve_discriminants(declaration, found)
        self._check_repr_range(declaration, discriminants, found)

        if found:
            logger.debug("Enum %s has %d violation(s)", declaration.name, len(found))
        violations.extend(found)

        return EnumDef(
            name=declaration.name,
            visibility=declaration.visibility,
            repr_type=declaration.repr_type,
            derives=declaration.derives,
            error_type=declaration.error_type,
            variants=[
                VariantDef(
                    name=variant.name,
                    discriminant=discriminant,
                    canonical_string=variant.canonical_string,
                    alternate_strings=variant.alternate_strings,
                )
                for variant, discriminant in zip(declaration.variants, discriminants)
            ],
            serde=self.config.serde,
            reflect=self.config.reflect,
        )

    def _check_type_names(self, declaration: TypeDescriptor, violations: list[Violation]) -> None:
        names = [("enum", declaration.name)]
        if declaration.error_type is not None:
            names.append(("error type", declaration.error_type))

        for kind, name in names:
            if not is_python_identifier(name):
                violations.append(Violation(f"{kind} name '{name}' is not a valid Python identifier", (), declaration.position))
            elif name in RESERVED_MODULE_NAMES:
                violations.append(Violation(f"{kind} name '{name}' is reserved by the generated module", (), declaration.position))

        if declaration.error_type == declaration.name:
            violations.append(Violation(f"error type '{declaration.error_type}' has the same name as the enum", (), declaration.position))

    def _check_parse_space(self, declaration: TypeDescriptor, violations: list[Violation]) -> None:
        """An empty enum cannot back a parsing capability: no input would ever parse."""
        if declaration.variants:
            return
        requested = []
        if declaration.error_type is not None:
            requested.append(f"#[error_type({declaration.error_type})]")
        if self.config.serde:
            requested.append("serde")
        if requested:
            violations.append(
                Violation(
                    f"enum {declaration.name} has no variants but requests parsing through {' and '.join(requested)}",
                    (),
                    declaration.position,
                )
            )

    def _check_variant_names(self, declaration: TypeDescriptor, violations: list[Violation]) -> None:
        seen: dict[str, VariantDescriptor] = {}
        for variant in declaration.variants:
            if not is_python_identifier(variant.name):
                violations.append(Violation(f"variant name '{variant.name}' is not a valid Python identifier", (variant.name,), variant.position))
            elif is_enum_reserved_name(variant.name):
                violations.append(Violation(f"variant name '{variant.name}' is reserved on generated enums", (variant.name,), variant.position))

            if variant.name in seen:
                first = seen[variant.name]
                violations.append(
                    Violation(
                        f"variant '{variant.name}' is declared more than once (first at {first.position})",
                        (variant.name,),
                        variant.position,
                    )
                )
            else:
                seen[variant.name] = variant

    def _check_strings(self, declaration: TypeDescriptor, violations: list[Violation]) -> None:
        """Every input string must select exactly one variant."""
        claims: dict[str, list[tuple[VariantDescriptor, bool]]] = {}
        for variant in declaration.variants:
            accepted = [(variant.canonical_string, True)] + [(text, False) for text in variant.alternate_strings]
            own: set[str] = set()
            for text, is_canonical in accepted:
                if text in own:
                    logger.warning("Variant %s.%s lists string %r more than once", declaration.name, variant.name, text)
                    continue
                own.add(text)
                claims.setdefault(text, []).append((variant, is_canonical))

        # dicts keep insertion order, so reports follow the declaration
        for text, claimants in claims.items():
            if len(claimants) < 2:
                continue
            names = tuple(variant.name for variant, _ in claimants)
            if all(is_canonical for _, is_canonical in claimants):
                message = f'canonical string "{text}" is used by variants {_join_names(names)}'
            else:
                described = [f"{variant.name} ({'canonical' if is_canonical else 'alternate'})" for variant, is_canonical in claimants]
                message = f'string "{text}" is accepted by variants {_join_names(described)}'
            violations.append(Violation(message, names, claimants[-1][0].position))

    def _resolve_discriminants(self, declaration: TypeDescriptor, violations: list[Violation]) -> list[int]:
        """
        Resolve the discriminant of every variant.

        A variant without an explicit value takes the previous variant's value
        plus one, skipping values already claimed by earlier variants. An
        explicit value that hits an already claimed value is a collision and
        is never renumbered.
        """
        claimed: dict[int, VariantDescriptor] = {}
        resolved: list[int] = []
        previous: int | None = None

        for variant in declaration.variants:
            if variant.discriminant is not None:
                value = variant.discriminant
                if value in claimed:
                    owner = claimed[value]
                    how = "explicitly" if owner.discriminant is not None else "by position"
                    violations.append(
                        Violation(
                            f"discriminant {value} of variant {variant.name} collides with variant {owner.name} (assigned {how})",
                            (owner.name, variant.name),
                            variant.position,
                        )
                    )
            else:
                value = DEFAULT_DISCRIMINANT_BASE if previous is None else previous + 1
                while value in claimed:
                    value += 1

            claimed.setdefault(value, variant)
            resolved.append(value)
            previous = value

        return resolved

    def _check_repr_range(self, declaration: TypeDescriptor, discriminants: list[int], violations: list[Violation]) -> None:
        repr_type = declaration.repr_type
        if repr_type is None:
            return
        for variant, value in zip(declaration.variants, discriminants):
            if not repr_type.fits(value):
                violations.append(
                    Violation(
                        f"discriminant {value} of variant {variant.name} does not fit in {repr_type.name} "
                        f"({repr_type.min_value}..={repr_type.max_value})",
                        (variant.name,),
                        variant.position,
                    )
                )


def _join_names(names) -> str:
    names = list(names)
    if len(names) == 2:
        return f"{names[0]} and {names[1]}"
    return ", ".join(names[:-1]) + f" and {names[-1]}"
