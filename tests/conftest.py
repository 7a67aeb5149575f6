"""
Pytest configuration and common fixtures for gplaces scenario tests.

Fixtures provide a recording httpx transport and canned Places API bodies.
All fixtures follow camelCase naming convention.
"""

import asyncio
from typing import Any, Callable, Dict, List, Optional

import httpx
import pytest

from gplaces.places import HttpxQueryExecutor, PlacesClient, PlacesCommonFields

# ============================================================================
# Canned API bodies
# ============================================================================


@pytest.fixture
def sampleAutocompleteBody() -> Dict[str, Any]:
    """
    Provide OK autocomplete body for "jagtvej 2200 Copenhagen".

    Returns:
        Dict[str, Any]: Decoded JSON body as Google returns it
    """
    return {
        "predictions": [
            {
                "description": "Jagtvej, 2200 København N, Danmark",
                "matched_substrings": [
                    {"length": 7, "offset": 0},
                    {"length": 4, "offset": 9},
                    {"length": 10, "offset": 14},
                ],
                "place_id": "EiJKYWd0dmVqLCAyMjAwIEvDuGJlbmhhdm4gTiwgRGFubWFyayIuKiwKFAoSCd8jJ9mrU1JGEf9TIN3ZsRSE",
                "structured_formatting": {
                    "main_text": "Jagtvej",
                    "main_text_matched_substrings": [{"length": 7, "offset": 0}],
                    "secondary_text": "2200 København N, Danmark",
                },
                "terms": [
                    {"offset": 0, "value": "Jagtvej"},
                    {"offset": 9, "value": "2200 København N"},
                    {"offset": 27, "value": "Danmark"},
                ],
                "types": ["route", "geocode"],
            }
        ],
        "status": "OK",
    }


# ============================================================================
# Transport Fixtures
# ============================================================================


class RecordingTransport:
    """
    Recording stand-in for the Places web service.

    Every request is stored in `requests`. Response comes from `body`, or
    from `handler` if one is set. `delay` makes async requests hang, so
    cancellation can be exercised.
    """

    def __init__(self, body: Dict[str, Any]):
        self.body = body
        self.statusCode = 200
        self.delay: Optional[float] = None
        self.handler: Optional[Callable[[httpx.Request], httpx.Response]] = None
        self.requests: List[httpx.Request] = []
        self.started = asyncio.Event()

    def _respond(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.handler is not None:
            return self.handler(request)
        return httpx.Response(self.statusCode, json=self.body)

    def handleSync(self, request: httpx.Request) -> httpx.Response:
        return self._respond(request)

    async def handleAsync(self, request: httpx.Request) -> httpx.Response:
        self.started.set()
        if self.delay is not None:
            await asyncio.sleep(self.delay)
        return self._respond(request)

    def lastParams(self) -> List[tuple]:
        """Query parameters of the last request, in wire order."""
        return self.requests[-1].url.params.multi_items()


@pytest.fixture
def recordingTransport(sampleAutocompleteBody) -> RecordingTransport:
    """
    Provide recording transport answering with the sample autocomplete body.

    Returns:
        RecordingTransport: Transport double
    """
    return RecordingTransport(sampleAutocompleteBody)


@pytest.fixture
def placesClient(recordingTransport) -> PlacesClient:
    """
    Provide PlacesClient wired to the recording transport.

    Async tests should enter it with `async with` so the async HTTP client
    gets closed.

    Returns:
        PlacesClient: Client instance
    """
    executor = HttpxQueryExecutor(
        transport=httpx.MockTransport(recordingTransport.handleSync),
        asyncTransport=httpx.MockTransport(recordingTransport.handleAsync),
    )
    return PlacesClient(executor=executor)


@pytest.fixture
def commonFields() -> PlacesCommonFields:
    """Provide common request fields with test API key."""
    return PlacesCommonFields(key="test_api_key")
