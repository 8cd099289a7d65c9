"""
Atomic file writer for safe code generation.

Ensures that file writes are atomic to prevent a failed or interrupted run
from leaving a partial output file behind.
"""

from __future__ import annotations

import logging
import tempfile
from collections.abc import Callable
from pathlib import Path

from .errors import OutputExistsError, OutputValidationError

logger = logging.getLogger(__name__)


class AtomicWriter:
    """Handles atomic file writes with validation.

    Uses a two-phase commit approach:
    1. Write to a temporary file in the same directory
    2. Validate the content
    3. Atomically replace the target file

    This ensures that an interrupted write operation never leaves
    the target file in an incomplete state.
    """

    def __init__(self, validate_java: Callable[[str], None] | None = None):
        """Initialize the atomic writer.

        Args:
            validate_java: Optional validation function for Java code
        """
        self._validate_java = validate_java or self._default_validate_java

    def write(self, path: Path, content: str, validate: bool = True) -> None:
        """Write content to file atomically.

        Args:
            path: Target file path
            content: Content to write
            validate: Whether to validate before finalizing

        Raises:
            OutputValidationError: If validation fails
            OSError: If file operations fail
        """
        # Validate before touching the filesystem
        if validate:
            self._validate_java(content)

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

            # On POSIX systems, rename() is atomic if source and dest are on same filesystem
            temp_path.replace(path)

        except Exception:
            # Clean up temp file on any error
            if temp_path.exists():
                try:
                    temp_path.unlink()
                except OSError:
                    logger.warning("Could not remove temporary file %s", temp_path)
            raise

        logger.debug("Atomically wrote %d characters to %s", len(content), path)

    def write_if_not_exists(self, path: Path, content: str, validate: bool = True) -> None:
        """Write content only if the file doesn't exist.

        Raises:
            OutputExistsError: If the file already exists
            OutputValidationError: If validation fails
        """
        if path.exists():
            raise OutputExistsError(f"Output file already exists: {path}")

        self.write(path, content, validate)

    def _default_validate_java(self, content: str) -> None:
        """Default Java validation.

        Args:
            content: Java code to validate

        Raises:
            OutputValidationError: If validation fails
        """
        # Bracket balance only, outside // line comments
        code = "\n".join(line for line in content.splitlines() if not line.lstrip().startswith("//"))
        for opening, closing in (("(", ")"), ("{", "}")):
            open_count = code.count(opening)
            close_count = code.count(closing)
            if open_count != close_count:
                raise OutputValidationError(
                    f"Generated Java code has unbalanced '{opening}{closing}': {open_count} open, {close_count} close"
                )
