"""Provider-agnostic geocoder interface."""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from typing import Sequence

from google_geocoder.types import Address, Location


class Geocoder(ABC):
    """Strategy interface for a geocoding provider.

    Implementations may return a richer :class:`Address` subclass.
    """

    @abstractmethod
    async def geocode(
        self, address: str, *, cancel_event: asyncio.Event | None = None
    ) -> Sequence[Address]:
        """Geocode free-form *address* text."""

    @abstractmethod
    async def reverse_geocode(
        self,
        latitude: float,
        longitude: float,
        *,
        cancel_event: asyncio.Event | None = None,
    ) -> Sequence[Address]:
        """Find addresses at a coordinate."""

    async def reverse_geocode_location(
        self, location: Location, *, cancel_event: asyncio.Event | None = None
    ) -> Sequence[Address]:
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
    ) -> Sequence[Address]:
        """Geocode an address given as separate parts."""
        return await self.geocode(
            self.build_address(street, city, state, postal_code, country),
            cancel_event=cancel_event,
        )

    @staticmethod
    def build_address(
        street: str, city: str, state: str, postal_code: str, country: str
    ) -> str:
        return f"{street} {city}, {state} {postal_code}, {country}"
