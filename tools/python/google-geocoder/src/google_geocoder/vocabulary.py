"""Lookup of provider strings into the closed enumerations in :mod:`google_geocoder.types`.

Every function is total: strings the provider introduces later map to the
enumeration's fallback member instead of raising.
"""

from __future__ import annotations

from google_geocoder.types import GoogleAddressType, GoogleLocationType, GoogleStatus

_STATUSES: dict[str, GoogleStatus] = {
    "OK": GoogleStatus.OK,
    "ZERO_RESULTS": GoogleStatus.ZERO_RESULTS,
    "OVER_QUERY_LIMIT": GoogleStatus.OVER_QUERY_LIMIT,
    "REQUEST_DENIED": GoogleStatus.REQUEST_DENIED,
    "INVALID_REQUEST": GoogleStatus.INVALID_REQUEST,
}

# Wire string → member for every known address type.
_ADDRESS_TYPES: dict[str, GoogleAddressType] = {
    member.value: member
    for member in GoogleAddressType
    if member is not GoogleAddressType.UNKNOWN
}

_LOCATION_TYPES: dict[str, GoogleLocationType] = {
    "ROOFTOP": GoogleLocationType.ROOFTOP,
    "RANGE_INTERPOLATED": GoogleLocationType.RANGE_INTERPOLATED,
    "GEOMETRIC_CENTER": GoogleLocationType.GEOMETRIC_CENTER,
    "APPROXIMATE": GoogleLocationType.APPROXIMATE,
}


def evaluate_status(status: str | None) -> GoogleStatus:
    """Map a ``status`` string to :class:`GoogleStatus` (``ERROR`` if unknown)."""
    return _STATUSES.get(status or "", GoogleStatus.ERROR)


def evaluate_type(address_type: str | None) -> GoogleAddressType:
    """Map a ``type`` string to :class:`GoogleAddressType` (``UNKNOWN`` if unknown)."""
    return _ADDRESS_TYPES.get(address_type or "", GoogleAddressType.UNKNOWN)


def evaluate_location_type(location_type: str | None) -> GoogleLocationType:
    """Map a ``location_type`` string to :class:`GoogleLocationType` (``UNKNOWN`` if unknown)."""
    return _LOCATION_TYPES.get(location_type or "", GoogleLocationType.UNKNOWN)
