"""
Google Places API Exceptions

This module contains exception classes for the Places client. Three families
must stay distinguishable for callers:

- validation errors (local, raised before any network activity),
- transport errors (HTTP-level failures talking to the API),
- cancellation (caller aborted an in-flight async query).

API-level statuses (``OVER_QUERY_LIMIT`` and friends) are returned inside a
normal response object and only become :class:`PlacesApiError` when the
caller asks for it with ``raiseForStatus()``.
"""

import logging
from typing import Any, Dict, Optional

from .constants import CANCELLED_MESSAGE

logger = logging.getLogger(__name__)


class PlacesError(Exception):
    """Base exception class for all Places client errors, dood!

    Attributes:
        message: Human-readable error message
        status: API status or HTTP status code as string (if available)
        response: Raw API response data (if available)
    """

    def __init__(
        self,
        message: str,
        status: Optional[str] = None,
        response: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status = status
        self.response = response
        logger.debug(f"{type(self).__name__}: {message} (status: {status})")

    def __str__(self) -> str:
        if self.status:
            return f"{self.message} (status: {self.status})"
        return self.message


class PlacesValidationError(PlacesError, ValueError):
    """Raised when request validation fails before any network call.

    Missing API key, empty input, radius out of range, conflicting
    location bias/restriction and so on.
    """


class PlacesSerializationError(PlacesValidationError):
    """Raised when a request value can't be rendered to its wire form
    (e.g. unknown place type or component token)."""


class PlacesTransportError(PlacesError):
    """Base class for failures talking to the API over HTTP."""


class PlacesNetworkError(PlacesTransportError):
    """Raised on connection errors, DNS failures and timeouts."""

    def __init__(
        self,
        message: str = "Network error occurred.",
        status: Optional[str] = None,
        response: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, status, response)


class PlacesHttpStatusError(PlacesTransportError):
    """Raised when the API answers with non-200 HTTP status.

    Attributes:
        statusCode: HTTP status code
    """

    def __init__(
        self,
        message: str,
        statusCode: int,
        response: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, str(statusCode), response)
        self.statusCode = statusCode


class PlacesResponseError(PlacesTransportError):
    """Raised when the response body is not the JSON object we expect."""


class PlacesApiError(PlacesError):
    """Raised by ``raiseForStatus()`` for error statuses returned by the API."""


class QueryCancelledError(PlacesError):
    """Raised when caller cancels an in-flight async query, dood!

    Deliberately not a subclass of :class:`PlacesTransportError` or
    :class:`PlacesApiError`, so retry policies can tell them apart.
    """

    def __init__(self, message: str = CANCELLED_MESSAGE) -> None:
        super().__init__(message)


def parseHttpError(statusCode: int, responseData: Dict[str, Any]) -> PlacesHttpStatusError:
    """Build exception for non-200 HTTP response.

    Args:
        statusCode: HTTP status code
        responseData: Parsed JSON body or ``{"message": text}`` if body wasn't JSON

    Returns:
        PlacesHttpStatusError with the best message we can find in the body
    """
    errorMessage = responseData.get("error_message") or responseData.get("message")
    nestedError = responseData.get("error")
    if not errorMessage and isinstance(nestedError, dict):
        errorMessage = nestedError.get("message")
    if not errorMessage:
        errorMessage = "Unknown API error"

    if statusCode in (401, 403):
        errorMessage = f"Access denied: {errorMessage}"
    elif statusCode == 429:
        errorMessage = f"Rate limit exceeded: {errorMessage}"
    elif statusCode >= 500:
        errorMessage = f"Server error: {errorMessage}"

    return PlacesHttpStatusError(errorMessage, statusCode, responseData)
