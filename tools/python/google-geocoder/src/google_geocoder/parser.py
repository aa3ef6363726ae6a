"""
Google Geocoder — Response Parser
==================================
Parses a ``GeocodeResponse`` XML document into
:class:`~google_geocoder.types.GoogleAddress` records.

Parsing is lenient about individual fields: a missing or non-numeric
geometry value reads as ``0.0`` and an unreadable ``partial_match`` reads as
``False``.  Only the top-level ``status`` decides whether the call fails.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ElementTree

from google_geocoder.exceptions import GoogleGeocodingError
from google_geocoder.types import (
    Bounds,
    GoogleAddress,
    GoogleAddressComponent,
    GoogleStatus,
    GoogleViewport,
    Location,
)
from google_geocoder.vocabulary import evaluate_location_type, evaluate_status, evaluate_type

logger = logging.getLogger("geoscripthub.google_geocoder")

PROVIDER = "Google"


# ---------------------------------------------------------------------------
# Field extraction helpers
# ---------------------------------------------------------------------------


def _text(node: ElementTree.Element, path: str) -> str:
    """Text of the first element at *path*, or ``""``."""
    found = node.find(path)
    if found is None:
        return ""
    return "".join(found.itertext()).strip()


def _number(node: ElementTree.Element, path: str) -> float:
    try:
        return float(_text(node, path))
    except ValueError:
        return 0.0


def _location(node: ElementTree.Element, path: str) -> Location:
    return Location(_number(node, f"{path}/lat"), _number(node, f"{path}/lng"))


def _boolean(node: ElementTree.Element, path: str) -> bool:
    return _text(node, path).lower() == "true"


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def is_geocode_response(content: bytes | str) -> bool:
    """True if *content* is well-formed XML rooted at ``GeocodeResponse``."""
    try:
        return ElementTree.fromstring(content).tag == "GeocodeResponse"
    except ElementTree.ParseError:
        return False


def parse_response(content: bytes | str) -> list[GoogleAddress]:
    """Parse a geocoding response body.

    Args:
        content: Raw XML body.

    Returns:
        All results for ``OK``; an empty list for ``ZERO_RESULTS``.

    Raises:
        GoogleGeocodingError: For any other status.
        xml.etree.ElementTree.ParseError: If *content* is not well-formed XML.
    """
    root = ElementTree.fromstring(content)
    raw_status = _text(root, "status") if root.tag == "GeocodeResponse" else ""
    status = evaluate_status(raw_status)

    if status is GoogleStatus.ZERO_RESULTS:
        return []
    if status is not GoogleStatus.OK:
        logger.warning("Geocoding service returned status %s", raw_status or "<missing>")
        raise GoogleGeocodingError(status)

    return [parse_address(node) for node in root.findall("result")]


def parse_address(node: ElementTree.Element) -> GoogleAddress:
    """Build a :class:`GoogleAddress` from one ``result`` element."""
    viewport = GoogleViewport(
        northeast=_location(node, "geometry/viewport/northeast"),
        southwest=_location(node, "geometry/viewport/southwest"),
    )

    bounds = None
    if node.find("geometry/bounds") is not None:
        bounds = Bounds(
            southwest=_location(node, "geometry/bounds/southwest"),
            northeast=_location(node, "geometry/bounds/northeast"),
        )

    return GoogleAddress(
        formatted_address=_text(node, "formatted_address"),
        coordinates=_location(node, "geometry/location"),
        provider=PROVIDER,
        type=evaluate_type(_text(node, "type")),
        components=tuple(parse_components(node)),
        viewport=viewport,
        bounds=bounds,
        is_partial_match=_boolean(node, "partial_match"),
        location_type=evaluate_location_type(_text(node, "geometry/location_type")),
        place_id=_text(node, "place_id"),
    )


def parse_components(node: ElementTree.Element) -> list[GoogleAddressComponent]:
    """Parse every ``address_component`` that has at least one ``type``."""
    components: list[GoogleAddressComponent] = []
    for comp in node.findall("address_component"):
        types = tuple(evaluate_type("".join(t.itertext()).strip()) for t in comp.findall("type"))
        if not types:
            logger.debug("Skipping address component without type: %s", _text(comp, "long_name"))
            continue
        components.append(
            GoogleAddressComponent(
                types=types,
                long_name=_text(comp, "long_name"),
                short_name=_text(comp, "short_name"),
            )
        )
    return components
