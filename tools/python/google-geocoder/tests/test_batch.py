"""
Tests — Batch Geocoder and CLI
===============================
CSV → GeoJSON runs and the ``geo-google-geocode`` command, with every HTTP
call mocked via ``respx``.
"""

from __future__ import annotations

import json
from pathlib import Path

import httpx
import pandas as pd
import pytest
import respx
from click.testing import CliRunner

from google_geocoder import GoogleGeocoder, GoogleGeocodingError, GoogleStatus
from google_geocoder.batch import BatchGeocoder
from google_geocoder.cli import main
from shared.python.exceptions import ColumnNotFoundError, InputValidationError

HOST = "maps.googleapis.com"
PATH = "/maps/api/geocode/xml"


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def address_csv(tmp_path: Path) -> Path:
    """Write a small CSV with address and name columns."""
    path = tmp_path / "addresses.csv"
    pd.DataFrame(
        {
            "address": ["1600 Amphitheatre Parkway", "Nowhere Land"],
            "name": ["Googleplex", "Nothing"],
        }
    ).to_csv(path, index=False)
    return path


@pytest.fixture()
def service(googleplex_xml: str, zero_results_xml: str):
    """Mock the geocoding endpoint: 'Nowhere' matches nothing."""

    def respond(request: httpx.Request) -> httpx.Response:
        if "Nowhere" in request.url.params.get("address", ""):
            return httpx.Response(200, text=zero_results_xml)
        return httpx.Response(200, text=googleplex_xml)

    with respx.mock(assert_all_called=False) as mock:
        mock.get(host=HOST, path=PATH).mock(side_effect=respond)
        yield mock


# ---------------------------------------------------------------------------
# BatchGeocoder
# ---------------------------------------------------------------------------


class TestBatchGeocoder:
    def test_output_has_one_feature_per_row(self, tmp_path: Path, address_csv: Path, service) -> None:
        output = tmp_path / "out" / "addresses.geojson"
        tool = BatchGeocoder(address_csv, output, GoogleGeocoder(), extra_cols=["name"])
        tool.run()

        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["type"] == "FeatureCollection"
        assert len(data["features"]) == 2

        found, missing = data["features"]
        assert found["geometry"]["coordinates"] == [-122.0842499, 37.4224764]
        assert found["properties"]["geocode_success"] is True
        assert found["properties"]["name"] == "Googleplex"
        assert found["properties"]["components"]["locality"] == "Mountain View"
        assert missing["geometry"] is None
        assert missing["properties"]["geocode_success"] is False
        assert missing["properties"]["error"] == "No results returned."

    def test_rows_report_success(self, tmp_path: Path, address_csv: Path, service) -> None:
        tool = BatchGeocoder(address_csv, tmp_path / "out.geojson", GoogleGeocoder())
        tool.run()
        assert [row.success for row in tool.rows] == [True, False]

    @respx.mock
    def test_over_query_limit_stops_the_run(self, tmp_path: Path, address_csv: Path, make_status_xml) -> None:
        respx.get(host=HOST, path=PATH).respond(200, text=make_status_xml("OVER_QUERY_LIMIT"))
        output = tmp_path / "out.geojson"
        tool = BatchGeocoder(address_csv, output, GoogleGeocoder())
        with pytest.raises(GoogleGeocodingError) as exc_info:
            tool.run()
        assert exc_info.value.status is GoogleStatus.OVER_QUERY_LIMIT
        assert not output.exists()

    @respx.mock
    def test_request_denied_on_http_403_stops_the_run(
        self, tmp_path: Path, address_csv: Path, make_status_xml
    ) -> None:
        route = respx.get(host=HOST, path=PATH).respond(403, text=make_status_xml("REQUEST_DENIED"))
        tool = BatchGeocoder(address_csv, tmp_path / "out.geojson", GoogleGeocoder(api_key="bad"))
        with pytest.raises(GoogleGeocodingError) as exc_info:
            tool.run()
        assert exc_info.value.status is GoogleStatus.REQUEST_DENIED
        assert route.call_count == 1

    @respx.mock
    def test_invalid_request_is_recorded_per_row(self, tmp_path: Path, address_csv: Path, make_status_xml) -> None:
        respx.get(host=HOST, path=PATH).respond(200, text=make_status_xml("INVALID_REQUEST"))
        tool = BatchGeocoder(address_csv, tmp_path / "out.geojson", GoogleGeocoder())
        tool.run()
        assert all(not row.success for row in tool.rows)
        assert "INVALID_REQUEST" in (tool.rows[0].error or "")

    def test_missing_column_raises(self, tmp_path: Path, address_csv: Path) -> None:
        tool = BatchGeocoder(
            address_csv, tmp_path / "out.geojson", GoogleGeocoder(),
            address_col="nonexistent_col",
        )
        with pytest.raises(ColumnNotFoundError):
            tool.run()

    def test_missing_input_file_raises(self, tmp_path: Path) -> None:
        tool = BatchGeocoder(tmp_path / "no_file.csv", tmp_path / "out.geojson", GoogleGeocoder())
        with pytest.raises(InputValidationError):
            tool.run()

    def test_wrong_extension_raises(self, tmp_path: Path) -> None:
        source = tmp_path / "addresses.txt"
        source.write_text("address\nParis\n", encoding="utf-8")
        tool = BatchGeocoder(source, tmp_path / "out.geojson", GoogleGeocoder())
        with pytest.raises(InputValidationError):
            tool.run()


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------


class TestCli:
    def test_geocode_prints_feature_collection(self, service) -> None:
        result = CliRunner().invoke(
            main, ["--api-key", "abc", "--component", "country:US", "geocode", "1600 Amphitheatre Parkway"]
        )
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["features"][0]["properties"]["place_id"] == "ChIJ2eUgeAK6j4ARbn5u_wAGqWA"

        request = service.calls.last.request
        assert request.url.params["key"] == "abc"
        assert request.url.params["components"] == "country:US"

    def test_reverse_accepts_negative_longitude(self, service) -> None:
        result = CliRunner().invoke(main, ["reverse", "--", "37.4224", "-122.0842"])
        assert result.exit_code == 0, result.output
        assert service.calls.last.request.url.params["latlng"] == "37.42240000,-122.08420000"

    def test_provider_error_exits_non_zero(self, make_status_xml) -> None:
        with respx.mock:
            respx.get(host=HOST, path=PATH).respond(200, text=make_status_xml("REQUEST_DENIED"))
            result = CliRunner().invoke(main, ["geocode", "Paris"])
        assert result.exit_code == 1
        assert "REQUEST_DENIED" in result.output

    def test_conflicting_credentials_exit_non_zero(self) -> None:
        result = CliRunner().invoke(
            main,
            ["--api-key", "abc", "--client-id", "gme-x", "--signing-key", "vNIXE0xscrmjlyV-12Nj_BvUPaw=",
             "geocode", "Paris"],
        )
        assert result.exit_code == 1
        assert "Only one of BusinessKey or ApiKey" in result.output

    def test_bad_bounds_exit_non_zero(self) -> None:
        result = CliRunner().invoke(main, ["--bounds", "1,2,3", "geocode", "Paris"])
        assert result.exit_code == 1
        assert "--bounds" in result.output

    def test_batch_command(self, tmp_path: Path, address_csv: Path, service) -> None:
        output = tmp_path / "out.geojson"
        result = CliRunner().invoke(
            main,
            ["batch", "--input", str(address_csv), "--output", str(output), "--extra-cols", "name"],
        )
        assert result.exit_code == 0, result.output
        assert "Geocoded: 1/2 addresses successfully." in result.stdout
        assert output.exists()
