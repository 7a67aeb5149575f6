"""
Google Places API Client Library

Typed request/response models for Places web service endpoints with a thin
httpx-based execution layer. Sync and cancellable async calls are supported.

Example usage:
    from gplaces.places import (
        PlacesAutoCompleteRequest,
        PlacesClient,
        PlacesCommonFields,
        RestrictPlaceType,
    )

    request = PlacesAutoCompleteRequest(
        input="jagtvej 2200 Copenhagen",
        common=PlacesCommonFields(key="your_api_key"),
        types=[RestrictPlaceType.ADDRESS],
    )

    with PlacesClient() as client:
        response = client.autoComplete(request)

    # Async with cancellation
    cancelEvent = asyncio.Event()
    response = await client.autoCompleteAsync(request, cancelEvent)
"""

from .autocomplete import (
    MatchedSubstring,
    PlacesAutoCompleteRequest,
    PlacesAutoCompleteResponse,
    Prediction,
    RestrictPlaceType,
    StructuredFormatting,
    Term,
)
from .client import PlacesClient
from .common import (
    Component,
    Coordinate,
    LocationBias,
    LocationRestriction,
    PlaceLocationType,
    PlacesCommonFields,
    QueryStringParameters,
    Status,
    ViewPort,
)
from .exceptions import (
    PlacesApiError,
    PlacesError,
    PlacesHttpStatusError,
    PlacesNetworkError,
    PlacesResponseError,
    PlacesSerializationError,
    PlacesTransportError,
    PlacesValidationError,
    QueryCancelledError,
)
from .executor import HttpxQueryExecutor, QueryExecutorInterface

__all__ = [
    "PlacesClient",
    "HttpxQueryExecutor",
    "QueryExecutorInterface",
    # Requests
    "PlacesAutoCompleteRequest",
    "PlacesCommonFields",
    "QueryStringParameters",
    "Coordinate",
    "ViewPort",
    "LocationBias",
    "LocationRestriction",
    "RestrictPlaceType",
    "Component",
    # Responses
    "PlacesAutoCompleteResponse",
    "Prediction",
    "StructuredFormatting",
    "MatchedSubstring",
    "Term",
    "Status",
    "PlaceLocationType",
    # Errors
    "PlacesError",
    "PlacesValidationError",
    "PlacesSerializationError",
    "PlacesTransportError",
    "PlacesNetworkError",
    "PlacesHttpStatusError",
    "PlacesResponseError",
    "PlacesApiError",
    "QueryCancelledError",
]
