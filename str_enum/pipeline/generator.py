"""
Pipeline generator: declaration in, Python module out.

Runs the phases strictly in order (parse, validate, emit) as a pure
function of the declaration and the config, so the same input always
yields byte-identical output.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any

from ..cli_utils import reconstruct_command_line
from ..log_config import get_logger
from .analyzer import IR, DeclarationValidator
from .atomic_writer import AtomicWriter
from .backends import CodeBackend, PythonBackend
from .config import CodeGeneratorConfig, OutputMode
from .declaration_ast import DeclarationModule, DeclarationParser, Token, tokenize

logger = get_logger(__name__)

BACKENDS: dict[str, type[CodeBackend]] = {
    "python": PythonBackend,
}


class PipelineGenerator:
    """Generates code for every enum declaration of a source."""

    def __init__(
        self,
        declaration: str | Sequence[Token],
        config: CodeGeneratorConfig | None = None,
        language: str = "python",
    ):
        """
        Args:
            declaration: Declaration text, or an already lexed token sequence
            config: Generation options (integration capabilities, output handling)
            language: Target language
        """
        if language not in BACKENDS:
            raise ValueError(f"Language '{language}' is not supported")
        self.declaration = declaration
        self.config = config or CodeGeneratorConfig()
        self.language = language

    def tokens(self) -> list[Token]:
        if isinstance(self.declaration, str):
            return tokenize(self.declaration)
        return list(self.declaration)

    def parse(self) -> DeclarationModule:
        """Phase 1: build the declaration AST."""
        return DeclarationParser().parse(self.tokens())

    def analyze(self) -> IR:
        """Phase 2: validate the declarations and build the IR."""
        module = self.parse()
        ir = DeclarationValidator(self.config).validate_module(module)
        ir.generation_comment = self._generate_command_comment()
        return ir

    def generate(self) -> str:
        """
        Run the whole pipeline.

        Returns:
            Generated source code

        Raises:
            GrammarError: If the declaration is malformed
            SemanticError: If the declaration breaks an invariant
        """
        ir = self.analyze()
        backend = BACKENDS[self.language](self.config)
        code = backend.generate(ir)
        logger.debug("Generated %d enum(s), %d characters", len(ir.enums), len(code))
        return code

    def write(self, path: str | Path) -> str:
        """Generate and write the output file according to the output config."""
        code = self.generate()
        path = Path(path)
        output = self.config.output

        if output.atomic_write:
            writer = AtomicWriter()
            if output.mode == OutputMode.ERROR_IF_EXISTS:
                writer.write_if_not_exists(path, code, validate=output.validate_before_write)
            else:
                writer.write(path, code, validate=output.validate_before_write)
            return code

        if output.mode == OutputMode.ERROR_IF_EXISTS and path.exists():
            raise FileExistsError(f"Output file already exists: {path}. Use force mode to overwrite.")
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(code, encoding="utf-8")
        return code

    def _generate_command_comment(self) -> str:
        """Generate a simplified command line comment for the generated file"""
        if not self.config.add_generation_comment:
            return ""

        from .. import __version__

        try:
            from ..str_enum import str_enum as click_command  # noqa

            command_line = reconstruct_command_line(click_command)
        except (ImportError, AttributeError):
            command_line = "str_enum"

        return f"# Generated by str_enum v{__version__} : {command_line}"


def expand(
    declaration: str | Sequence[Token],
    namespace: dict[str, Any] | None = None,
    config: CodeGeneratorConfig | None = None,
    module_name: str = "str_enum.generated",
) -> dict[str, Any]:
    """
    Generate code for a declaration and execute it into a namespace.

    This is the in-process equivalent of writing the generated module and
    importing it. Derive labels are resolved against ``namespace``.

    Args:
        declaration: Declaration text or token sequence
        namespace: Globals to execute into (e.g. holding derive decorators)
        config: Generation options
        module_name: ``__name__`` given to the generated code

    Returns:
        The namespace, now holding the generated enums and error types
    """
    config = config or CodeGeneratorConfig(add_generation_comment=False)
    code = PipelineGenerator(declaration, config).generate()
    namespace = {} if namespace is None else namespace
    namespace.setdefault("__name__", module_name)
    exec(compile(code, f"<{module_name}>", "exec"), namespace)
    return namespace
