"""
GeoScriptHub — shared building blocks for the Python tools: the
:class:`GeoTool` pipeline, console logging setup, precondition checks and
the exception hierarchy.
"""

from shared.python.base_tool import GeoTool, configure_logging
from shared.python.exceptions import (
    ColumnNotFoundError,
    ConfigurationError,
    GeocodingError,
    GeoScriptHubError,
    InputValidationError,
    OutputWriteError,
)
from shared.python.validators import Validators

__all__ = [
    "ColumnNotFoundError",
    "ConfigurationError",
    "GeoScriptHubError",
    "GeoTool",
    "GeocodingError",
    "InputValidationError",
    "OutputWriteError",
    "Validators",
    "configure_logging",
]
