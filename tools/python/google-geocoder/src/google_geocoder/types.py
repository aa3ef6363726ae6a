"""
Google Geocoder — Domain Types
===============================
Enumerations and immutable result records produced by
:class:`~google_geocoder.geocoder.GoogleGeocoder`.

Enumerations (member values are the provider's wire strings):
    GoogleStatus          Top-level response status.
    GoogleAddressType     Result / address component category.
    GoogleLocationType    Precision of a result's primary coordinate.

Records:
    Location, Bounds, GoogleViewport, Address, GoogleAddressComponent,
    GoogleAddress
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class GoogleStatus(str, Enum):
    """Status codes of the Geocoding API.

    Reference:
        https://developers.google.com/maps/documentation/geocoding/requests-geocoding#StatusCodes
    """

    ERROR = "ERROR"
    OK = "OK"
    ZERO_RESULTS = "ZERO_RESULTS"
    OVER_QUERY_LIMIT = "OVER_QUERY_LIMIT"
    REQUEST_DENIED = "REQUEST_DENIED"
    INVALID_REQUEST = "INVALID_REQUEST"


class GoogleAddressType(str, Enum):
    """Address types returned for results and address components.

    Reference:
        https://developers.google.com/maps/documentation/geocoding/requests-geocoding#Types
    """

    UNKNOWN = "unknown"
    STREET_ADDRESS = "street_address"
    ROUTE = "route"
    INTERSECTION = "intersection"
    POLITICAL = "political"
    COUNTRY = "country"
    ADMINISTRATIVE_AREA_LEVEL_1 = "administrative_area_level_1"
    ADMINISTRATIVE_AREA_LEVEL_2 = "administrative_area_level_2"
    ADMINISTRATIVE_AREA_LEVEL_3 = "administrative_area_level_3"
    ADMINISTRATIVE_AREA_LEVEL_4 = "administrative_area_level_4"
    ADMINISTRATIVE_AREA_LEVEL_5 = "administrative_area_level_5"
    COLLOQUIAL_AREA = "colloquial_area"
    LOCALITY = "locality"
    WARD = "ward"
    SUBLOCALITY = "sublocality"
    SUBLOCALITY_LEVEL_1 = "sublocality_level_1"
    SUBLOCALITY_LEVEL_2 = "sublocality_level_2"
    SUBLOCALITY_LEVEL_3 = "sublocality_level_3"
    SUBLOCALITY_LEVEL_4 = "sublocality_level_4"
    SUBLOCALITY_LEVEL_5 = "sublocality_level_5"
    NEIGHBORHOOD = "neighborhood"
    PREMISE = "premise"
    SUBPREMISE = "subpremise"
    POSTAL_CODE = "postal_code"
    POSTAL_CODE_PREFIX = "postal_code_prefix"
    POSTAL_CODE_SUFFIX = "postal_code_suffix"
    NATURAL_FEATURE = "natural_feature"
    AIRPORT = "airport"
    PARK = "park"
    POINT_OF_INTEREST = "point_of_interest"
    FLOOR = "floor"
    ESTABLISHMENT = "establishment"
    PARKING = "parking"
    POST_BOX = "post_box"
    POSTAL_TOWN = "postal_town"
    ROOM = "room"
    STREET_NUMBER = "street_number"
    BUS_STATION = "bus_station"
    TRAIN_STATION = "train_station"
    TRANSIT_STATION = "transit_station"


class GoogleLocationType(str, Enum):
    """Precision of ``geometry/location``."""

    UNKNOWN = "UNKNOWN"
    ROOFTOP = "ROOFTOP"
    RANGE_INTERPOLATED = "RANGE_INTERPOLATED"
    GEOMETRIC_CENTER = "GEOMETRIC_CENTER"
    APPROXIMATE = "APPROXIMATE"


# ---------------------------------------------------------------------------
# Coordinates
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Location:
    """A WGS84 coordinate in decimal degrees.

    Values are passed through as received; no range check is applied.
    """

    latitude: float
    longitude: float

    def __str__(self) -> str:
        return f"{self.latitude}, {self.longitude}"


@dataclass(frozen=True)
class Bounds:
    """A rectangular box given by its south-west and north-east corners."""

    southwest: Location
    northeast: Location

    @classmethod
    def from_coordinates(
        cls,
        sw_latitude: float,
        sw_longitude: float,
        ne_latitude: float,
        ne_longitude: float,
    ) -> Bounds:
        return cls(
            southwest=Location(sw_latitude, sw_longitude),
            northeast=Location(ne_latitude, ne_longitude),
        )


@dataclass(frozen=True)
class GoogleViewport:
    """Recommended map viewport for displaying a result."""

    northeast: Location
    southwest: Location


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Address:
    """Provider-agnostic geocoding result.

    Attributes:
        formatted_address: Full human-readable address.
        coordinates: Primary coordinate of the result.
        provider: Name of the geocoding service that produced it.
    """

    formatted_address: str
    coordinates: Location
    provider: str

    def __str__(self) -> str:
        return self.formatted_address


@dataclass(frozen=True)
class GoogleAddressComponent:
    """One named part of an address (street number, locality, ...).

    Attributes:
        types: Categories of the component, in document order.  Never empty
            for components produced by the parser.
        long_name: Full display name (e.g. ``"California"``).
        short_name: Abbreviated display name (e.g. ``"CA"``).
    """

    types: tuple[GoogleAddressType, ...]
    long_name: str
    short_name: str

    def __str__(self) -> str:
        return f"{self.types[0].value if self.types else ''}: {self.long_name}"


@dataclass(frozen=True)
class GoogleAddress(Address):
    """Full Google Geocoding result.

    Attributes:
        type: Category of the result (first ``type`` element).
        components: Address components that carry at least one type.
        viewport: Suggested display box.
        bounds: Box fully containing the result, or ``None`` when the
            provider omits it.
        is_partial_match: ``True`` when the provider matched only part of
            the request.
        location_type: Precision of :attr:`coordinates`.
        place_id: Opaque provider identifier for the place.
    """

    type: GoogleAddressType
    components: tuple[GoogleAddressComponent, ...]
    viewport: GoogleViewport
    bounds: Bounds | None
    is_partial_match: bool
    location_type: GoogleLocationType
    place_id: str

    def component(self, address_type: GoogleAddressType) -> GoogleAddressComponent | None:
        """Return the first component tagged with *address_type*, if any."""
        for comp in self.components:
            if address_type in comp.types:
                return comp
        return None

    def __getitem__(self, address_type: GoogleAddressType) -> GoogleAddressComponent | None:
        return self.component(address_type)

    def to_geojson_feature(self) -> dict[str, Any]:
        """Convert this result to a GeoJSON Feature dict.

        Returns:
            A Point feature whose properties carry the formatted address,
            place id, result type, precision, partial-match flag and a
            ``{type: long_name}`` map of the address components.
        """
        components: dict[str, str] = {}
        for comp in self.components:
            for comp_type in comp.types:
                if comp_type is not GoogleAddressType.UNKNOWN:
                    components.setdefault(comp_type.value, comp.long_name)

        return {
            "type": "Feature",
            "geometry": {
                "type": "Point",
                "coordinates": [self.coordinates.longitude, self.coordinates.latitude],
            },
            "properties": {
                "formatted_address": self.formatted_address,
                "place_id": self.place_id,
                "result_type": self.type.value,
                "location_type": self.location_type.value,
                "partial_match": self.is_partial_match,
                "components": components,
            },
        }
