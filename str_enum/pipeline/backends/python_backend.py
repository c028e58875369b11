"""
Python code generation backend.

Generates an ``enum.Enum`` subclass, its lookup tables and the optional
error type for every enum in the IR.
"""

from __future__ import annotations

import sys
from typing import Any

import jinja2

from ...utils import python_string_literal
from ..analyzer.ir_nodes import IR, EnumDef
from ..config import CodeGeneratorConfig
from .base import CodeBackend


class PythonBackend(CodeBackend):
    """Python code generation backend."""

    TEMPLATE_LANG = "python"
    FILE_EXTENSION = "py"

    def __init__(self, config: CodeGeneratorConfig):
        super().__init__(config)
        self.python_imports: set[tuple[str, str, str]] = set()

    def _register_filters(self, env: jinja2.Environment) -> None:
        env.filters["hint"] = self._format_hint

    def generate(self, ir: IR) -> str:
        """Generate Python code from IR."""
        self.python_imports = set()
        self._scan_ir_for_imports(ir)

        sections = [
            self.prefix_template.render(
                generation_comment=ir.generation_comment,
                future_annotations=self.config.use_future_annotations,
                required_imports=self._assemble_imports(),
                exports=self._format_sequence([self.format_string(name) for name in ir.exported_names], "[", "]"),
            )
        ]

        for enum_def in ir.enums:
            context = self._prepare_enum_context(enum_def)
            sections.append(self.enum_template.render(context))
            if enum_def.error_type:
                sections.append(self.error_template.render(context))

        return "\n\n\n".join(section.strip("\n") for section in sections) + "\n"

    def format_string(self, text: str) -> str:
        """Format a Python string literal."""
        return python_string_literal(text)

    def _format_hint(self, hint: str) -> str:
        """Quote a type hint naming the class being defined when annotations are evaluated eagerly."""
        if self.config.use_future_annotations:
            return hint
        return f'"{hint}"'

    def _prepare_enum_context(self, enum_def: EnumDef) -> dict[str, Any]:
        """Add the pre-formatted collection literals used after the class body."""
        context = super()._prepare_enum_context(enum_def)
        name = enum_def.name

        members = [f"{name}.{variant.name}" for variant in enum_def.variants]
        context["ALL_VARIANTS_LITERAL"] = self._format_sequence(members, "(", ")")
        context["ALL_VALUES_LITERAL"] = self._format_sequence(
            [self.format_string(variant.canonical_string) for variant in enum_def.variants], "(", ")"
        )
        context["VARIANT_NAMES_LITERAL"] = self._format_sequence(
            [self.format_string(variant.name) for variant in enum_def.variants], "(", ")"
        )
        context["FROM_STR_LITERAL"] = self._format_sequence(
            [
                f"{self.format_string(text)}: {name}.{variant.name}"
                for variant in enum_def.variants
                for text in variant.accepted_strings
            ],
            "{",
            "}",
        )
        return context

    def _format_sequence(self, items: list[str], open_char: str, close_char: str) -> str:
        """Format a tuple/list/dict literal, one item per line."""
        if not items:
            return f"{open_char}{close_char}"
        body = "".join(f"    {item},\n" for item in items)
        return f"{open_char}\n{body}{close_char}"

    def _scan_ir_for_imports(self, ir: IR) -> None:
        """Collect the imports needed by the enums of the IR."""
        self.python_imports.add(("import", "enum", "_enum"))
        for enum_def in ir.enums:
            if enum_def.error_type or enum_def.serde:
                self.python_imports.add(("from", "str_enum", "runtime as _runtime"))
            if enum_def.serde:
                self.python_imports.add(("from", "dataclasses_json", "cfg as _dataclasses_json_cfg"))
            if enum_def.reflect:
                self.python_imports.add(("from", "collections.abc", "Iterator"))
            for derive in enum_def.derives:
                # Dotted derives name a decorator inside an importable module
                module, _, _ = derive.rpartition(".")
                if module:
                    self.python_imports.add(("import", module, ""))

    def _assemble_imports(self) -> list[str]:
        """Assemble Python import statements: stdlib first, then third party."""
        stdlib = []
        third_party = []
        for kind, module, name in sorted(self.python_imports, key=lambda item: (item[1], item[2])):
            if kind == "from":
                line = f"from {module} import {name}"
            else:
                line = f"import {module} as {name}" if name else f"import {module}"
            is_stdlib = module.split(".")[0] in sys.stdlib_module_names
            (stdlib if is_stdlib else third_party).append(line)

        assembled = stdlib
        if stdlib and third_party:
            assembled.append("")
        assembled.extend(third_party)
        return assembled
