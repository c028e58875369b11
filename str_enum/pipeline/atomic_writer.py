"""
Atomic file writer for safe code generation.

Ensures that file writes are atomic to prevent data corruption
from interrupted operations.
"""

from __future__ import annotations

import ast
import tempfile
from collections.abc import Callable
from pathlib import Path

from ..log_config import get_logger
from .errors import OutputError

logger = get_logger(__name__)


class AtomicWriter:
    """Handles atomic file writes with validation.

    Uses a two-phase commit approach:
    1. Write to a temporary file in the same directory
    2. Validate the content
    3. Atomically replace the target file

    This ensures that an interrupted write operation never leaves
    the target file in an incomplete state.
    """

    def __init__(self, validate_python: Callable[[str], None] | None = None):
        """Initialize the atomic writer.

        Args:
            validate_python: Optional validation function for Python code
        """
        self._validate_python = validate_python or self._default_validate_python

    def write(self, path: Path, content: str, validate: bool = True) -> None:
        """Write content to file atomically.

        Args:
            path: Target file path
            content: Content to write
            validate: Whether to validate before finalizing

        Raises:
            OutputError: If validation fails
            OSError: If file operations fail
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        # Same directory ensures atomic rename on the same filesystem
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            text=True,
        )
        temp_path = Path(temp_path_str)

        try:
            with open(temp_fd, "w", encoding="utf-8") as f:
                f.write(content)

            if validate:
                self._validate_python(content)

            temp_path.replace(path)
            logger.debug("Wrote %s", path)
        except BaseException:
            temp_path.unlink(missing_ok=True)
            raise

    def write_if_not_exists(self, path: Path, content: str, validate: bool = True) -> None:
        """Write content only if the file doesn't exist.

        Raises:
            FileExistsError: If the file already exists
            OutputError: If validation fails
        """
        path = Path(path)
        if path.exists():
            raise FileExistsError(f"Output file already exists: {path}. Use force mode to overwrite.")
        self.write(path, content, validate)

    def _default_validate_python(self, content: str) -> None:
        """Default Python validation.

        Raises:
            OutputError: If the content is not valid Python
        """
        try:
            ast.parse(content)
        except SyntaxError as e:
            raise OutputError(f"Generated Python code is not valid: {e}") from e
