"""
GeoScriptHub — Precondition Checks
===================================
Each check raises from :mod:`shared.python.exceptions` instead of returning
a flag, so a tool can run them back to back before touching the network::

    Validators.assert_not_blank(address, "address")
    Validators.assert_file_exists(self.input_path)
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Sequence

from shared.python.exceptions import (
    ColumnNotFoundError,
    InputValidationError,
    OutputWriteError,
)


class Validators:
    """Namespace of static checks; never instantiated."""

    @staticmethod
    def assert_not_blank(value: str | None, name: str) -> None:
        """Reject ``None``, ``""`` and whitespace-only strings.

        Raises:
            InputValidationError: ``"<name> can not be null or empty."``
        """
        if value is None or not str(value).strip():
            raise InputValidationError(f"{name} can not be null or empty.")

    @staticmethod
    def assert_not_none(value: Any, name: str) -> None:
        if value is None:
            raise InputValidationError(f"{name} can not be null.")

    @staticmethod
    def assert_file_exists(path: Path) -> None:
        """Require *path* to be an existing file, not a directory."""
        path = Path(path)
        if not path.is_file():
            problem = "is a directory" if path.is_dir() else "does not exist"
            raise InputValidationError(f"Input file '{path}' {problem}.")

    @staticmethod
    def assert_output_dir_writable(output_path: Path) -> None:
        """Create the parent directory of *output_path* if it is missing.

        Raises:
            OutputWriteError: The directory could not be created.
        """
        try:
            Path(output_path).parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise OutputWriteError(str(output_path), str(exc)) from exc

    @staticmethod
    def assert_supported_extension(path: Path, extensions: Sequence[str]) -> None:
        """Require the suffix of *path* to be one of *extensions* (case-insensitive)."""
        suffix = Path(path).suffix.lower()
        allowed = [ext.lower() for ext in extensions]
        if suffix not in allowed:
            raise InputValidationError(
                f"'{Path(path).name}' has extension '{suffix}'; expected one of: {', '.join(allowed)}"
            )

    @staticmethod
    def assert_columns_exist(df: Any, required_columns: Sequence[str]) -> None:
        """Require every name in *required_columns* to be a column of *df*.

        Raises:
            ColumnNotFoundError: For the first missing column.
        """
        available = [str(col) for col in df.columns]
        for col in required_columns:
            if col not in available:
                raise ColumnNotFoundError(col, available)
