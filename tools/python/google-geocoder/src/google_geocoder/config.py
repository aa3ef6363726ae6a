"""
Google Geocoder — Configuration
================================
:class:`GeocoderConfig` bundles everything that shapes a request besides
the query itself.  Finish configuring before issuing concurrent calls;
the geocoder reads the bundle without locking.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field

from shared.python.exceptions import ConfigurationError
from shared.python.validators import Validators

from google_geocoder.credentials import ApiKey, BusinessKey, Credential, Unauthenticated
from google_geocoder.types import Bounds

DEFAULT_SERVICE_URL = "https://maps.googleapis.com/maps/api/geocode/xml"

_KEY_CONFLICT_MESSAGE = "Only one of BusinessKey or ApiKey should be set on the GoogleGeocoder."


class ComponentFilterType:
    """Component names accepted by the ``components`` request parameter."""

    ROUTE = "route"
    LOCALITY = "locality"
    ADMINISTRATIVE_AREA = "administrative_area"
    POSTAL_CODE = "postal_code"
    COUNTRY = "country"


@dataclass(frozen=True)
class ComponentFilter:
    """A ``component:value`` restriction, e.g. ``ComponentFilter("country", "US")``.

    Raises:
        InputValidationError: If either part is blank.
    """

    component: str
    value: str

    def __post_init__(self) -> None:
        Validators.assert_not_blank(self.component, "component")
        Validators.assert_not_blank(self.value, "value")

    @classmethod
    def parse(cls, text: str) -> ComponentFilter:
        """Build a filter from ``"component:value"`` text (CLI form)."""
        component, sep, value = text.partition(":")
        if not sep:
            value = ""
        return cls(component.strip(), value.strip())

    @property
    def component_filter(self) -> str:
        return f"{self.component}:{self.value}"

    def __str__(self) -> str:
        return self.component_filter


@dataclass
class GeocoderConfig:
    """Configuration bundle for :class:`~google_geocoder.geocoder.GoogleGeocoder`.

    Attributes:
        credential: How requests authenticate.  See
                    :mod:`google_geocoder.credentials`.
        language: Language code for results, e.g. ``"en"``.
        region_bias: ccTLD region code that biases results, e.g. ``"us"``.
        bounds_bias: Box that results inside of are preferred.
        component_filters: Restrictions joined into ``components=``, in order.
        proxy: Outbound proxy URL used when the geocoder creates its own
               HTTP client.
        base_url: Service endpoint; XML output format.
        timeout: HTTP timeout in seconds for the default client.
    """

    credential: Credential = field(default_factory=Unauthenticated)
    language: str | None = None
    region_bias: str | None = None
    bounds_bias: Bounds | None = None
    component_filters: list[ComponentFilter] = field(default_factory=list)
    proxy: str | None = None
    base_url: str = DEFAULT_SERVICE_URL
    timeout: float = 10.0

    def __post_init__(self) -> None:
        if self.credential is None:
            self.credential = Unauthenticated()

    @property
    def api_key(self) -> ApiKey | None:
        return self.credential if isinstance(self.credential, ApiKey) else None

    @property
    def business_key(self) -> BusinessKey | None:
        return self.credential if isinstance(self.credential, BusinessKey) else None

    def with_credential(self, credential: Credential) -> GeocoderConfig:
        """Return a copy of this configuration using *credential*.

        Raises:
            ConfigurationError: If the current credential is an
                :class:`ApiKey` and *credential* a :class:`BusinessKey`, or
                vice versa.
            InputValidationError: If *credential* is ``None``.
        """
        Validators.assert_not_none(credential, "credential")
        current = self.credential
        if isinstance(current, ApiKey) and isinstance(credential, BusinessKey):
            raise ConfigurationError(_KEY_CONFLICT_MESSAGE)
        if isinstance(current, BusinessKey) and isinstance(credential, ApiKey):
            raise ConfigurationError(_KEY_CONFLICT_MESSAGE)
        return dataclasses.replace(
            self, credential=credential, component_filters=list(self.component_filters)
        )

    def with_api_key(self, api_key: str) -> GeocoderConfig:
        return self.with_credential(ApiKey(api_key))

    def with_business_key(
        self, client_id: str, signing_key: str, channel: str | None = None
    ) -> GeocoderConfig:
        return self.with_credential(BusinessKey(client_id, signing_key, channel))
