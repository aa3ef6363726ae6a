"""
Google Geocoder — Exceptions
=============================
Provider-specific members of the GeoScriptHub exception hierarchy::

    GeocodingError                       (shared.python.exceptions)
    ├── GoogleGeocodingError             ← provider status or wrapped failure
    └── GeocodingCancelledError          ← caller's cancel_event fired
"""

from __future__ import annotations

from shared.python.exceptions import GeocodingError

from google_geocoder.types import GoogleStatus


class GoogleGeocodingError(GeocodingError):
    """The single error type callers of the Google geocoder need to handle.

    Raised either because the service answered with a status other than
    ``OK``/``ZERO_RESULTS``, or because sending the request or parsing the
    response failed.  In the second case :attr:`status` is
    ``GoogleStatus.ERROR`` and :attr:`cause` holds the original exception
    (also available as ``__cause__``).

    Args:
        status: Provider status category.
        cause: Underlying exception for transport / parse failures.

    Example::

        try:
            await geocoder.geocode("1600 Amphitheatre Parkway")
        except GoogleGeocodingError as exc:
            if exc.status is GoogleStatus.OVER_QUERY_LIMIT:
                ...
    """

    def __init__(
        self,
        status: GoogleStatus = GoogleStatus.ERROR,
        cause: BaseException | None = None,
    ) -> None:
        if cause is not None:
            message = f"There was an error processing the geocoding request: {cause}"
        else:
            message = f"There was an error processing the geocoding request. Status: {status.value}"
        super().__init__(message)
        self.status: GoogleStatus = status
        self.cause: BaseException | None = cause

    @classmethod
    def from_cause(cls, cause: BaseException) -> GoogleGeocodingError:
        """Wrap a transport or parse failure."""
        return cls(GoogleStatus.ERROR, cause=cause)


class GeocodingCancelledError(GeocodingError):
    """Raised when the caller's ``cancel_event`` aborts an in-flight request."""

    def __init__(self, message: str = "Geocoding request was cancelled.") -> None:
        super().__init__(message)
