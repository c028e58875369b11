"""
Base class for code generation backends.

Defines the interface that all language-specific backends must implement.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

import jinja2

from ..analyzer.ir_nodes import IR, EnumDef
from ..config import CodeGeneratorConfig


class CodeBackend(ABC):
    """Abstract base class for code generation backends."""

    # Template directory name
    TEMPLATE_LANG: str = ""

    # File extension
    FILE_EXTENSION: str = ""

    def __init__(self, config: CodeGeneratorConfig):
        """
        Initialize the backend.

        Args:
            config: Code generation configuration
        """
        self.config = config
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = Path(__file__).parent.parent.parent / "templates" / self.TEMPLATE_LANG
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
            keep_trailing_newline=False,
            undefined=jinja2.StrictUndefined,
        )
        self._register_filters(self.jinja_env)

        self.prefix_template = self.jinja_env.get_template(f"prefix.{self.FILE_EXTENSION}.jinja2")
        self.enum_template = self.jinja_env.get_template(f"enum.{self.FILE_EXTENSION}.jinja2")
        self.error_template = self.jinja_env.get_template(f"error.{self.FILE_EXTENSION}.jinja2")

    def _register_filters(self, env: jinja2.Environment) -> None:
        """Add language specific filters to the template environment."""

    @abstractmethod
    def generate(self, ir: IR) -> str:
        """
        Generate code from IR.

        Args:
            ir: The intermediate representation

        Returns:
            Generated code as a string
        """

    @abstractmethod
    def format_string(self, text: str) -> str:
        """
        Format a string literal for the target language.

        Args:
            text: The string value

        Returns:
            Source text of the literal
        """

    def _prepare_enum_context(self, enum_def: EnumDef) -> dict[str, Any]:
        """
        Prepare the template context for an enum.

        Args:
            enum_def: The enum definition

        Returns:
            Dictionary of template variables
        """
        variants = []
        for variant in enum_def.variants:
            variants.append(
                {
                    "NAME": variant.name,
                    "DISCRIMINANT": variant.discriminant,
                    "CANONICAL": self.format_string(variant.canonical_string),
                }
            )

        repr_type = enum_def.repr_type
        return {
            "CLASS_NAME": enum_def.name,
            "DERIVES": list(enum_def.derives),
            "ERROR_TYPE": enum_def.error_type,
            "REPR": repr_type.name if repr_type else None,
            "REPR_BITS": repr_type.bits if repr_type else None,
            "REPR_SIGNED": repr_type.signed if repr_type else None,
            "SERDE": enum_def.serde,
            "REFLECT": enum_def.reflect,
            "VARIANTS": variants,
            "ALL_VALUE_STR": self.format_string(enum_def.all_value_str),
            "EXPECTED_STR": self.format_string(f"expected one of [{enum_def.all_value_str}]"),
            "SERDE_EXPECTED_STR": self.format_string(f"one of [{enum_def.all_value_str}]"),
        }
