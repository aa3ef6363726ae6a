"""
Google Geocoder — Request Builder
==================================
Turns a :class:`~google_geocoder.config.GeocoderConfig` and a query into the
service URL::

    https://maps.googleapis.com/maps/api/geocode/xml?address=...&sensor=false
        [&language=..][&region=..][&key=..|&client=..[&channel=..]]
        [&bounds=swLat,swLng|neLat,neLng][&components=k1:v1|k2:v2]
        [&signature=..]

Numbers are always rendered with ``.`` as decimal separator, independent of
the host locale.
"""

from __future__ import annotations

import logging
import re
from urllib.parse import quote

from google_geocoder.config import GeocoderConfig
from google_geocoder.credentials import ApiKey, BusinessKey

logger = logging.getLogger("geoscripthub.google_geocoder")

ADDRESS = "address"
LATLNG = "latlng"

_SECRET_PARAMS = re.compile(r"(key|signature)=[^&]*")


def encode(value: str) -> str:
    """Percent-encode a query value; spaces become ``%20``."""
    return quote(value, safe="")


def format_number(value: float) -> str:
    """Shortest round-tripping decimal text for *value* (``1.0`` → ``"1"``)."""
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return text


def format_geolocation(latitude: float, longitude: float) -> str:
    """Render a ``latlng`` query value with exactly 8 decimal places."""
    return f"{float(latitude):.8f},{float(longitude):.8f}"


def redact(url: str) -> str:
    """Mask ``key`` and ``signature`` values for logging."""
    return _SECRET_PARAMS.sub(lambda m: f"{m.group(1)}=***", url)


def build_service_url(config: GeocoderConfig, query_type: str, value: str) -> str:
    """Assemble the full request URL.

    Args:
        config: Geocoder configuration.
        query_type: :data:`ADDRESS` or :data:`LATLNG`.
        value: Already-encoded query value.

    Returns:
        The request URL, signed when ``config.credential`` is a
        :class:`~google_geocoder.credentials.BusinessKey`.
    """
    parts = [f"{config.base_url}?{query_type}={value}&sensor=false"]

    if config.language:
        parts.append(f"&language={encode(config.language)}")

    if config.region_bias:
        parts.append(f"&region={encode(config.region_bias)}")

    credential = config.credential
    if isinstance(credential, ApiKey):
        parts.append(f"&key={encode(credential.key)}")

    if isinstance(credential, BusinessKey):
        parts.append(f"&client={encode(credential.client_id)}")
        if credential.has_channel:
            parts.append(f"&channel={encode(credential.channel or '')}")

    bounds = config.bounds_bias
    if bounds is not None:
        parts.append(
            "&bounds="
            f"{format_number(bounds.southwest.latitude)},{format_number(bounds.southwest.longitude)}"
            "|"
            f"{format_number(bounds.northeast.latitude)},{format_number(bounds.northeast.longitude)}"
        )

    if config.component_filters:
        parts.append("&components=" + "|".join(f.component_filter for f in config.component_filters))

    url = "".join(parts)

    # The signature covers the whole query string, so it goes last.
    if isinstance(credential, BusinessKey):
        url = credential.generate_signature(url)

    logger.debug("Built geocoding request: %s", redact(url))
    return url
