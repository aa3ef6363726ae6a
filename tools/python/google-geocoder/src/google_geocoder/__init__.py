"""
Google Geocoder
================
A GeoScriptHub tool for forward and reverse geocoding with the Google Maps
Geocoding API, returning typed address records.

Public API::

    from google_geocoder import GoogleGeocoder, GeocoderConfig, BusinessKey
"""

from google_geocoder.base import Geocoder
from google_geocoder.config import ComponentFilter, ComponentFilterType, GeocoderConfig
from google_geocoder.credentials import ApiKey, BusinessKey, Credential, Unauthenticated
from google_geocoder.exceptions import GeocodingCancelledError, GoogleGeocodingError
from google_geocoder.geocoder import GoogleGeocoder
from google_geocoder.types import (
    Address,
    Bounds,
    GoogleAddress,
    GoogleAddressComponent,
    GoogleAddressType,
    GoogleLocationType,
    GoogleStatus,
    GoogleViewport,
    Location,
)

__all__ = [
    "Geocoder",
    "GoogleGeocoder",
    "GeocoderConfig",
    "ComponentFilter",
    "ComponentFilterType",
    "Credential",
    "Unauthenticated",
    "ApiKey",
    "BusinessKey",
    "GoogleGeocodingError",
    "GeocodingCancelledError",
    "Address",
    "GoogleAddress",
    "GoogleAddressComponent",
    "GoogleAddressType",
    "GoogleLocationType",
    "GoogleStatus",
    "GoogleViewport",
    "Location",
    "Bounds",
]
__version__ = "1.0.0"
