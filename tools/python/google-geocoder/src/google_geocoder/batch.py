"""
Google Geocoder — CSV Batch Tool
=================================
Geocodes every address in a CSV file with :class:`GoogleGeocoder` and writes
a GeoJSON FeatureCollection.  Each row is one independent request; rows that
fail or match nothing are kept with ``null`` geometry so no data is lost.

Usage::

    from pathlib import Path
    from google_geocoder import GoogleGeocoder
    from google_geocoder.batch import BatchGeocoder

    BatchGeocoder(
        input_path=Path("data/stores.csv"),
        output_path=Path("output/stores.geojson"),
        geocoder=GoogleGeocoder(api_key="..."),
        address_col="address",
        extra_cols=["name"],
    ).run()
"""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pandas as pd

from shared.python.base_tool import GeoTool
from shared.python.exceptions import OutputWriteError
from shared.python.validators import Validators

from google_geocoder.exceptions import GoogleGeocodingError
from google_geocoder.geocoder import GoogleGeocoder
from google_geocoder.types import GoogleAddress, GoogleStatus

logger = logging.getLogger("geoscripthub.google_geocoder")

# Statuses that will fail every remaining row as well.
_FATAL_STATUSES = {GoogleStatus.OVER_QUERY_LIMIT, GoogleStatus.REQUEST_DENIED}


@dataclass(frozen=True)
class BatchRow:
    """Outcome of geocoding one CSV row.

    Attributes:
        address: Address text from the CSV.
        result: Best (first) match, or ``None``.
        error: Why there is no match, or ``None`` on success.
    """

    address: str
    result: GoogleAddress | None
    error: str | None = None

    @property
    def success(self) -> bool:
        return self.result is not None

    def to_geojson_feature(self, extra_props: dict[str, Any] | None = None) -> dict[str, Any]:
        if self.result is not None:
            feature = self.result.to_geojson_feature()
        else:
            feature = {"type": "Feature", "geometry": None, "properties": {}}

        props = feature["properties"]
        props["address"] = self.address
        props["geocode_success"] = self.success
        if self.error:
            props["error"] = self.error
        if extra_props:
            props.update(extra_props)
        return feature


class BatchGeocoder(GeoTool):
    """Geocode a CSV column of addresses into a GeoJSON file.

    Args:
        input_path: Path to the input CSV file.
        output_path: Path for the output GeoJSON file.
        geocoder: Configured :class:`GoogleGeocoder`.
        address_col: Column holding the address text.
        extra_cols: Columns copied into each feature's properties.
        verbose: Enable DEBUG-level logging.

    Raises (from :meth:`run`):
        InputValidationError: Missing file, wrong extension or column.
        GoogleGeocodingError: If the service reports ``OVER_QUERY_LIMIT``
            or ``REQUEST_DENIED``; the run stops there.
        OutputWriteError: If the GeoJSON file cannot be written.
    """

    def __init__(
        self,
        input_path: Path,
        output_path: Path,
        geocoder: GoogleGeocoder,
        address_col: str = "address",
        extra_cols: list[str] | None = None,
        *,
        verbose: bool = False,
    ) -> None:
        super().__init__(input_path, output_path, verbose=verbose)
        self.geocoder = geocoder
        self.address_col = address_col
        self.extra_cols: list[str] = extra_cols or []

        self._rows: list[BatchRow] = []

    # ------------------------------------------------------------------
    # GeoTool abstract method implementations
    # ------------------------------------------------------------------

    def validate_inputs(self) -> None:
        Validators.assert_file_exists(self.input_path)
        Validators.assert_supported_extension(self.input_path, [".csv"])
        Validators.assert_output_dir_writable(self.output_path)

        df_peek = pd.read_csv(self.input_path, nrows=0)
        Validators.assert_columns_exist(df_peek, [self.address_col] + self.extra_cols)

    def process(self) -> None:
        df = pd.read_csv(self.input_path, dtype=str, keep_default_na=False)
        addresses = [str(value) for value in df[self.address_col]]
        logger.info("Geocoding %d addresses from %s", len(addresses), self.input_path.name)

        self._rows = asyncio.run(self._geocode_all(addresses))
        self._write_geojson(df, self._rows)

        success = sum(1 for row in self._rows if row.success)
        logger.info(
            "Geocoding complete: %d/%d succeeded, %d failed.",
            success, len(self._rows), len(self._rows) - success,
        )

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    async def _geocode_all(self, addresses: list[str]) -> list[BatchRow]:
        rows: list[BatchRow] = []
        for i, address in enumerate(addresses, start=1):
            logger.debug("[%d/%d] Geocoding: %s", i, len(addresses), address)
            rows.append(await self._geocode_one(address))
        return rows

    async def _geocode_one(self, address: str) -> BatchRow:
        if not address.strip():
            return BatchRow(address=address, result=None, error="Empty address")
        try:
            results = await self.geocoder.geocode(address)
        except GoogleGeocodingError as exc:
            if exc.status in _FATAL_STATUSES:
                raise
            logger.warning("  ✗ Failed: %s — %s", address, exc.message)
            return BatchRow(address=address, result=None, error=exc.message)

        if not results:
            logger.warning("  ✗ No results: %s", address)
            return BatchRow(address=address, result=None, error="No results returned.")
        return BatchRow(address=address, result=results[0])

    def _write_geojson(self, df: pd.DataFrame, rows: list[BatchRow]) -> None:
        features = []
        for row, (_, record) in zip(rows, df.iterrows()):
            extra = {col: record[col] for col in self.extra_cols}
            features.append(row.to_geojson_feature(extra_props=extra))

        geojson: dict[str, Any] = {"type": "FeatureCollection", "features": features}
        try:
            with open(self.output_path, "w", encoding="utf-8") as fh:
                json.dump(geojson, fh, indent=2, ensure_ascii=False)
        except OSError as exc:
            raise OutputWriteError(str(self.output_path), str(exc)) from exc

    @property
    def rows(self) -> list[BatchRow]:
        """All :class:`BatchRow` outcomes from the last run, or ``[]``."""
        return self._rows
