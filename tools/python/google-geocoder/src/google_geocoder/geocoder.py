"""
Google Geocoder — Client
=========================
Forward and reverse geocoding against the Google Maps Geocoding API (XML
output).

Architecture:
    Each call runs four steps in order: build the URL
    (:mod:`~google_geocoder.request`), send it through ``httpx``, parse the
    XML (:mod:`~google_geocoder.parser`), and classify failures.  One call
    issues at most one HTTP request; nothing is cached or retried.

Usage::

    import asyncio
    from google_geocoder import GeocoderConfig, GoogleGeocoder

    geocoder = GoogleGeocoder(GeocoderConfig(language="en"), api_key="...")
    results = asyncio.run(geocoder.geocode("1600 Amphitheatre Parkway"))
    print(results[0].formatted_address, results[0].coordinates)

Errors:
    * ``InputValidationError`` — empty address / missing location, raised
      before anything is sent.
    * ``ConfigurationError`` — both an API key and a business key supplied.
    * ``GoogleGeocodingError`` — provider status other than ``OK`` /
      ``ZERO_RESULTS``, or any transport / parse failure (original
      exception kept as ``__cause__``).
    * ``GeocodingCancelledError`` — the caller's ``cancel_event`` fired.
      Task cancellation surfaces as ``asyncio.CancelledError`` unchanged.
"""

from __future__ import annotations

import asyncio
import logging

import httpx

from shared.python.exceptions import ConfigurationError, GeocodingError
from shared.python.validators import Validators

from google_geocoder.base import Geocoder
from google_geocoder.config import GeocoderConfig
from google_geocoder.credentials import ApiKey, BusinessKey
from google_geocoder.exceptions import GeocodingCancelledError, GoogleGeocodingError
from google_geocoder.parser import is_geocode_response, parse_response
from google_geocoder.request import (
    ADDRESS,
    LATLNG,
    build_service_url,
    encode,
    format_geolocation,
    redact,
)
from google_geocoder.types import GoogleAddress, Location

logger = logging.getLogger("geoscripthub.google_geocoder")


def classify_failure(exc: Exception) -> GeocodingError:
    """Map a failure raised while sending or parsing onto the geocoder errors.

    Errors that are already :class:`GoogleGeocodingError` or
    :class:`GeocodingCancelledError` are returned unchanged; anything else is
    wrapped with status ``ERROR``.  ``asyncio.CancelledError`` is not an
    ``Exception`` and never reaches this function.
    """
    if isinstance(exc, (GoogleGeocodingError, GeocodingCancelledError)):
        return exc
    return GoogleGeocodingError.from_cause(exc)


class GoogleGeocoder(Geocoder):
    """Client for the Google Maps Geocoding API.

    Args:
        config: Request configuration.  Defaults to an unauthenticated
                :class:`GeocoderConfig`.
        api_key: Shortcut for ``config.with_api_key(api_key)``.
        business_key: Shortcut for ``config.with_credential(business_key)``.
        http: Shared ``httpx.AsyncClient`` to send requests with.  When
              omitted a client is opened (with ``config.proxy``) and closed
              for every call.

    Raises:
        ConfigurationError: If the credential kinds conflict.
        InputValidationError: If a supplied key is blank.
    """

    def __init__(
        self,
        config: GeocoderConfig | None = None,
        *,
        api_key: str | None = None,
        business_key: BusinessKey | None = None,
        http: httpx.AsyncClient | None = None,
    ) -> None:
        config = config or GeocoderConfig()
        if api_key is not None and business_key is not None:
            raise ConfigurationError(
                "Only one of BusinessKey or ApiKey should be set on the GoogleGeocoder."
            )
        if api_key is not None:
            config = config.with_api_key(api_key)
        if business_key is not None:
            config = config.with_credential(business_key)

        self.config: GeocoderConfig = config
        self._http = http

    @property
    def api_key(self) -> ApiKey | None:
        return self.config.api_key

    @property
    def business_key(self) -> BusinessKey | None:
        return self.config.business_key

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def geocode(
        self, address: str, *, cancel_event: asyncio.Event | None = None
    ) -> list[GoogleAddress]:
        """Geocode free-form *address* text.

        Args:
            address: Address or place name, e.g. ``"1600 Amphitheatre Parkway"``.
            cancel_event: Setting this event aborts the request.

        Returns:
            Matching results; empty when the service found nothing.

        Raises:
            InputValidationError: If *address* is empty.
            GoogleGeocodingError: On provider or transport failure.
            GeocodingCancelledError: If *cancel_event* fires first.
        """
        Validators.assert_not_blank(address, "address")
        url = self.build_request_url(ADDRESS, encode(address))
        results = await self._process_request(url, cancel_event)
        logger.info("Geocoded %r: %d result(s)", address, len(results))
        return results

    async def reverse_geocode(
        self,
        latitude: float,
        longitude: float,
        *,
        cancel_event: asyncio.Event | None = None,
    ) -> list[GoogleAddress]:
        """Find the addresses at (*latitude*, *longitude*).

        Raises:
            GoogleGeocodingError: On provider or transport failure.
            GeocodingCancelledError: If *cancel_event* fires first.
        """
        url = self.build_request_url(LATLNG, format_geolocation(latitude, longitude))
        results = await self._process_request(url, cancel_event)
        logger.info(
            "Reverse geocoded (%.8f, %.8f): %d result(s)", latitude, longitude, len(results)
        )
        return results

    async def reverse_geocode_location(
        self, location: Location, *, cancel_event: asyncio.Event | None = None
    ) -> list[GoogleAddress]:
        """Reverse geocode a :class:`Location`.

        Raises:
            InputValidationError: If *location* is ``None``.
        """
        Validators.assert_not_none(location, "location")
        return await self.reverse_geocode(
            location.latitude, location.longitude, cancel_event=cancel_event
        )

    async def geocode_components(
        self,
        street: str,
        city: str,
        state: str,
        postal_code: str,
        country: str,
        *,
        cancel_event: asyncio.Event | None = None,
    ) -> list[GoogleAddress]:
        return await self.geocode(
            self.build_address(street, city, state, postal_code, country),
            cancel_event=cancel_event,
        )

    def build_request_url(self, query_type: str, value: str) -> str:
        """Return the request URL for an already-encoded query *value*."""
        return build_service_url(self.config, query_type, value)

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    async def _process_request(
        self, url: str, cancel_event: asyncio.Event | None
    ) -> list[GoogleAddress]:
        try:
            content = await self._send(url, cancel_event)
            return parse_response(content)
        except Exception as exc:
            error = classify_failure(exc)
            if error is exc:
                raise
            logger.debug("Geocoding request %s failed: %r", redact(url), exc)
            raise error from exc

    async def _send(self, url: str, cancel_event: asyncio.Event | None) -> bytes:
        if cancel_event is None:
            return await self._fetch(url)
        if cancel_event.is_set():
            raise GeocodingCancelledError()

        fetch = asyncio.ensure_future(self._fetch(url))
        cancelled = asyncio.ensure_future(cancel_event.wait())
        try:
            await asyncio.wait({fetch, cancelled}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            cancelled.cancel()
            if not fetch.done():
                fetch.cancel()
            await asyncio.gather(fetch, cancelled, return_exceptions=True)

        if fetch.cancelled():
            logger.info("Geocoding request cancelled: %s", redact(url))
            raise GeocodingCancelledError()
        return fetch.result()

    async def _fetch(self, url: str) -> bytes:
        if self._http is not None:
            return await self._get(self._http, url)

        async with self._build_client() as client:
            return await self._get(client, url)

    @staticmethod
    async def _get(client: httpx.AsyncClient, url: str) -> bytes:
        response = await client.get(url)
        # A GeocodeResponse body is classified by its <status>, whatever the
        # HTTP code.
        if response.is_error and not is_geocode_response(response.content):
            response.raise_for_status()
        return response.content

    def _build_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(proxy=self.config.proxy, timeout=self.config.timeout)
