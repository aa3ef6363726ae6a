"""
Tests — Vocabulary Mappers
===========================
Provider strings map onto the closed enumerations; anything unseen maps to
the fallback member instead of raising.
"""

from __future__ import annotations

import pytest

from google_geocoder.types import GoogleAddressType, GoogleLocationType, GoogleStatus
from google_geocoder.vocabulary import evaluate_location_type, evaluate_status, evaluate_type


class TestEvaluateStatus:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("OK", GoogleStatus.OK),
            ("ZERO_RESULTS", GoogleStatus.ZERO_RESULTS),
            ("OVER_QUERY_LIMIT", GoogleStatus.OVER_QUERY_LIMIT),
            ("REQUEST_DENIED", GoogleStatus.REQUEST_DENIED),
            ("INVALID_REQUEST", GoogleStatus.INVALID_REQUEST),
        ],
    )
    def test_known_statuses(self, raw: str, expected: GoogleStatus) -> None:
        assert evaluate_status(raw) is expected

    @pytest.mark.parametrize("raw", ["UNKNOWN_ERROR", "ok", "", None])
    def test_unknown_status_falls_back_to_error(self, raw: str | None) -> None:
        assert evaluate_status(raw) is GoogleStatus.ERROR


class TestEvaluateType:
    def test_every_member_round_trips_its_wire_string(self) -> None:
        for member in GoogleAddressType:
            if member is GoogleAddressType.UNKNOWN:
                continue
            assert evaluate_type(member.value) is member

    def test_table_covers_all_provider_types(self) -> None:
        assert len(GoogleAddressType) == 40  # 39 provider types + UNKNOWN

    @pytest.mark.parametrize("raw", ["plus_code", "STREET_ADDRESS", "unknown", "", None])
    def test_unknown_type_falls_back(self, raw: str | None) -> None:
        assert evaluate_type(raw) is GoogleAddressType.UNKNOWN


class TestEvaluateLocationType:
    def test_known_location_types(self) -> None:
        assert evaluate_location_type("ROOFTOP") is GoogleLocationType.ROOFTOP
        assert evaluate_location_type("RANGE_INTERPOLATED") is GoogleLocationType.RANGE_INTERPOLATED
        assert evaluate_location_type("GEOMETRIC_CENTER") is GoogleLocationType.GEOMETRIC_CENTER
        assert evaluate_location_type("APPROXIMATE") is GoogleLocationType.APPROXIMATE

    def test_unknown_location_type_falls_back(self) -> None:
        assert evaluate_location_type("SATELLITE") is GoogleLocationType.UNKNOWN
        assert evaluate_location_type("") is GoogleLocationType.UNKNOWN
