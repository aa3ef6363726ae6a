"""
GeoScriptHub — Shared Base Tool
================================
Abstract base class for file-to-file GeoScriptHub tools, plus the shared
console logging setup used by every tool's CLI.

Design Pattern:
    Template Method — the public ``run()`` method defines a fixed
    pipeline (validate → process → report) that subclasses fill in
    by implementing ``validate_inputs`` and ``process``.

Usage::

    from shared.python.base_tool import GeoTool

    class MyTool(GeoTool):
        def validate_inputs(self) -> None:
            ...
        def process(self) -> None:
            ...
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from pathlib import Path

# Root of the GeoScriptHub logger tree; tools log through child loggers
# such as ``geoscripthub.google_geocoder``.
logger = logging.getLogger("geoscripthub")

_LOG_FORMAT = "[%(asctime)s] %(levelname)-8s %(name)s — %(message)s"


def configure_logging(verbose: bool = False) -> None:
    """Attach a console handler to the ``geoscripthub`` logger once.

    Args:
        verbose: Use DEBUG level when ``True``, otherwise INFO.
    """
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt=_LOG_FORMAT, datefmt="%H:%M:%S"))
        logger.addHandler(handler)

    logger.setLevel(logging.DEBUG if verbose else logging.INFO)


class GeoTool(ABC):
    """Abstract base class for GeoScriptHub tools that read an input file
    and write an output file.

    Attributes:
        input_path: Path to the primary input file.
        output_path: Path where output will be written.
        verbose: When ``True`` the tool logs DEBUG-level messages.
    """

    def __init__(
        self,
        input_path: Path,
        output_path: Path,
        *,
        verbose: bool = False,
    ) -> None:
        self.input_path: Path = Path(input_path)
        self.output_path: Path = Path(output_path)
        self.verbose: bool = verbose

        configure_logging(verbose)

    # ------------------------------------------------------------------
    # Abstract interface — subclasses MUST implement these
    # ------------------------------------------------------------------

    @abstractmethod
    def validate_inputs(self) -> None:
        """Validate all inputs before processing begins.

        Raises:
            InputValidationError: If a required file or column is missing.
        """

    @abstractmethod
    def process(self) -> None:
        """Execute the tool's work.  Called only after validation passed."""

    # ------------------------------------------------------------------
    # Template method — the public API callers use
    # ------------------------------------------------------------------

    def run(self) -> float:
        """Execute ``validate_inputs`` then ``process`` and log the outcome.

        Returns:
            Elapsed wall-clock seconds for the run.

        Raises:
            Any exception raised by ``validate_inputs`` or ``process``
            propagates unchanged.
        """
        logger.info("Starting %s", self.__class__.__name__)
        start = time.perf_counter()

        self.validate_inputs()
        self.process()

        elapsed = time.perf_counter() - start
        logger.info(
            "%s completed in %.2fs → %s",
            self.__class__.__name__,
            elapsed,
            self.output_path,
        )
        return elapsed

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"input_path={self.input_path!r}, "
            f"output_path={self.output_path!r})"
        )
