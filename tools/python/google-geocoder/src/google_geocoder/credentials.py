"""
Google Geocoder — Credentials
==============================
The geocoder authenticates in exactly one of three ways, modelled as a
tagged variant so that an API key and a business key can never be active
at the same time:

    Unauthenticated     No credential parameters are sent.
    ApiKey              ``&key=<key>``.
    BusinessKey         ``&client=<id>[&channel=<ch>]`` plus a
                        ``&signature=`` computed over the whole request URL.

Reference:
    https://developers.google.com/maps/documentation/maps-static/digital-signature
"""

from __future__ import annotations

import base64
import hashlib
import hmac
import re
from dataclasses import dataclass, field
from typing import Union

import httpx

from shared.python.exceptions import InputValidationError
from shared.python.validators import Validators

_CHANNEL_PATTERN = re.compile(r"^[a-z_0-9.-]+$")


@dataclass(frozen=True)
class Unauthenticated:
    """No credential; requests carry neither ``key`` nor ``client``."""


@dataclass(frozen=True)
class ApiKey:
    """A plain Maps API key.

    Raises:
        InputValidationError: If *key* is empty or whitespace.
    """

    key: str

    def __post_init__(self) -> None:
        Validators.assert_not_blank(self.key, "ApiKey")

    def __repr__(self) -> str:
        return "ApiKey(key='***')"


@dataclass(frozen=True)
class BusinessKey:
    """Premium-plan client id plus URL signing secret.

    Args:
        client_id: The ``gme-`` client identifier.
        signing_key: url-safe base64 encoded signing secret.
        channel: Optional usage-reporting channel.  Trimmed and lower-cased;
                 blank means no channel.

    Raises:
        InputValidationError: If *client_id* or *signing_key* is blank, or
            the channel contains anything other than ASCII letters, digits,
            ``.``, ``_`` and ``-``.
    """

    client_id: str
    signing_key: str = field(repr=False)
    channel: str | None = None

    def __post_init__(self) -> None:
        Validators.assert_not_blank(self.client_id, "clientId")
        Validators.assert_not_blank(self.signing_key, "signingKey")

        channel = (self.channel or "").strip().lower() or None
        if channel is not None and not _CHANNEL_PATTERN.match(channel):
            raise InputValidationError(
                "channel must be an ASCII alphanumeric string; it can include "
                "a period (.), underscore (_) and hyphen (-) character."
            )
        object.__setattr__(self, "channel", channel)

    @property
    def has_channel(self) -> bool:
        return self.channel is not None

    def generate_signature(self, url: str) -> str:
        """Return *url* with a ``signature`` parameter appended.

        The HMAC-SHA1 digest covers the encoded path and query exactly as
        they go on the wire, so this must run after every other query
        parameter has been added.
        """
        secret = base64.urlsafe_b64decode(self.signing_key.encode("ascii"))
        parsed = httpx.URL(url)
        path_and_query = parsed.raw_path

        digest = hmac.new(secret, path_and_query, hashlib.sha1).digest()
        signature = base64.urlsafe_b64encode(digest).decode("ascii")

        return (
            f"{parsed.scheme}://{parsed.netloc.decode('ascii')}"
            f"{path_and_query.decode('ascii')}&signature={signature}"
        )


Credential = Union[Unauthenticated, ApiKey, BusinessKey]
