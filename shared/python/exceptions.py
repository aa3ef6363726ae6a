"""
GeoScriptHub — Exceptions
==========================
Error types shared by GeoScriptHub tools.  Every error carries a
human-readable ``message`` that the CLIs print verbatim::

    GeoScriptHubError
    ├── InputValidationError             ← blank argument, missing file
    │   └── ColumnNotFoundError          ← CSV column absent
    ├── ConfigurationError               ← mutually exclusive settings
    ├── GeocodingError                   ← base for geocoder failures
    └── OutputWriteError                 ← output file not writable

Geocoder-specific subclasses of :class:`GeocodingError` live with the tool
that raises them (``google_geocoder.exceptions``).
"""

from __future__ import annotations


class GeoScriptHubError(Exception):
    """Root of the hierarchy.

    Args:
        message: Text shown to the user.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message: str = message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class InputValidationError(GeoScriptHubError):
    """An argument or input file was rejected before any work started."""


class ColumnNotFoundError(InputValidationError):
    """A CSV lacks a column the tool was told to read.

    Args:
        column: Requested column name.
        available: Columns the file does have.
    """

    def __init__(self, column: str, available: list[str]) -> None:
        listed = ", ".join(repr(name) for name in available) or "(none)"
        super().__init__(f"Column '{column}' not found. Available columns: {listed}")
        self.column: str = column
        self.available: list[str] = available


class ConfigurationError(GeoScriptHubError):
    """Two settings that exclude each other were both supplied.

    Raised when the second value is assigned, so no request is ever built
    from an ambiguous configuration.
    """


class GeocodingError(GeoScriptHubError):
    """A geocoding call did not produce a usable answer."""


class OutputWriteError(GeoScriptHubError):
    """Writing the output file failed.

    Args:
        output_path: Destination that could not be written.
        reason: Message from the underlying ``OSError``.
    """

    def __init__(self, output_path: str, reason: str) -> None:
        super().__init__(f"Could not write '{output_path}': {reason}")
        self.output_path: str = output_path
        self.reason: str = reason
