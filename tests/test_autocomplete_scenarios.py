"""
End-to-end autocomplete scenarios through PlacesClient, HttpxQueryExecutor
and a recording httpx transport.
"""

import asyncio

import httpx
import pytest

from gplaces.places import (
    Component,
    Coordinate,
    LocationBias,
    PlacesAutoCompleteRequest,
    PlacesCommonFields,
    PlaceLocationType,
    RestrictPlaceType,
    Status,
)
from gplaces.places.exceptions import PlacesHttpStatusError, PlacesValidationError, QueryCancelledError

INPUT = "jagtvej 2200 Copenhagen"


def testInputOnlySendsKeyAndInput(placesClient, recordingTransport, commonFields):
    """Minimal request carries exactly key and input, dood!"""
    response = placesClient.autoComplete(PlacesAutoCompleteRequest(input=INPUT, common=commonFields))

    assert recordingTransport.lastParams() == [("key", "test_api_key"), ("input", INPUT)]
    assert response.status == Status.OK
    prediction = response.predictions[0]
    assert prediction.description == "Jagtvej, 2200 København N, Danmark"
    assert len(prediction.matched_substrings) == 3
    assert prediction.types == [PlaceLocationType.ROUTE, PlaceLocationType.GEOCODE]


def testAddressTypeRestriction(placesClient, recordingTransport, commonFields):
    placesClient.autoComplete(
        PlacesAutoCompleteRequest(input=INPUT, common=commonFields, types=[RestrictPlaceType.ADDRESS])
    )

    assert ("types", "address") in recordingTransport.lastParams()


def testIpBiasSendsNoLocationOrRadius(placesClient, recordingTransport):
    common = PlacesCommonFields(key="test_api_key", locationBias=LocationBias(ipBias=True))

    placesClient.autoComplete(PlacesAutoCompleteRequest(input=INPUT, common=common))

    params = dict(recordingTransport.lastParams())
    assert "location" not in params
    assert "radius" not in params
    assert params["locationbias"] == "ipbias"


def testLocationAndComponentsOnTheWire(placesClient, recordingTransport, commonFields):
    placesClient.autoComplete(
        PlacesAutoCompleteRequest(
            input=INPUT,
            common=commonFields,
            location=Coordinate(55.69987, 12.55236),
            radius=500,
            components={Component.COUNTRY: "dk"},
        )
    )

    assert recordingTransport.lastParams() == [
        ("key", "test_api_key"),
        ("input", INPUT),
        ("location", "55.69987,12.55236"),
        ("radius", "500"),
        ("components", "country:dk"),
    ]
    # Raw query keeps separators unescaped
    assert b"location=55.69987,12.55236" in recordingTransport.requests[-1].url.query


def testInvalidRadiusSendsNothing(placesClient, recordingTransport, commonFields):
    with pytest.raises(PlacesValidationError):
        placesClient.autoComplete(PlacesAutoCompleteRequest(input=INPUT, common=commonFields, radius=50001))

    assert recordingTransport.requests == []


def testOverQueryLimitIsReturnedAsResponse(placesClient, recordingTransport, commonFields):
    recordingTransport.body = {"status": "OVER_QUERY_LIMIT", "predictions": [], "error_message": "Quota"}

    response = placesClient.autoComplete(PlacesAutoCompleteRequest(input=INPUT, common=commonFields))

    assert response.status == Status.OVER_QUERY_LIMIT
    assert response.predictions == []
    assert response.error_message == "Quota"


def testHttpFailureIsTransportError(placesClient, recordingTransport, commonFields):
    recordingTransport.handler = lambda request: httpx.Response(500, text="oops")

    with pytest.raises(PlacesHttpStatusError) as excInfo:
        placesClient.autoComplete(PlacesAutoCompleteRequest(input=INPUT, common=commonFields))

    assert excInfo.value.statusCode == 500


@pytest.mark.asyncio
async def testAsyncAutoComplete(placesClient, recordingTransport, commonFields):
    async with placesClient:
        response = await placesClient.autoCompleteAsync(
            PlacesAutoCompleteRequest(input=INPUT, common=commonFields), asyncio.Event()
        )

    assert response.isOk
    assert recordingTransport.lastParams() == [("key", "test_api_key"), ("input", INPUT)]


@pytest.mark.asyncio
async def testCancellationRaisesQueryCancelled(placesClient, recordingTransport, commonFields):
    """Cancel event set mid-flight gives QueryCancelledError, dood!"""
    recordingTransport.delay = 10
    cancelEvent = asyncio.Event()

    async with placesClient:
        task = asyncio.create_task(
            placesClient.autoCompleteAsync(PlacesAutoCompleteRequest(input=INPUT, common=commonFields), cancelEvent)
        )
        await asyncio.wait_for(recordingTransport.started.wait(), timeout=1)
        cancelEvent.set()

        with pytest.raises(QueryCancelledError, match="The operation was canceled."):
            await asyncio.wait_for(task, timeout=1)

    assert recordingTransport.requests == []


@pytest.mark.asyncio
async def testTypingCancelsPreviousQuery(placesClient, recordingTransport, commonFields):
    """Each keystroke cancels the query for the previous prefix."""
    recordingTransport.delay = 10
    firstCancel = asyncio.Event()

    async with placesClient:
        first = asyncio.create_task(
            placesClient.autoCompleteAsync(PlacesAutoCompleteRequest(input="jag", common=commonFields), firstCancel)
        )
        await asyncio.wait_for(recordingTransport.started.wait(), timeout=1)

        firstCancel.set()
        recordingTransport.delay = None
        second = await placesClient.autoCompleteAsync(
            PlacesAutoCompleteRequest(input="jagtvej", common=commonFields), asyncio.Event()
        )

        with pytest.raises(QueryCancelledError):
            await first

    assert second.isOk
    assert [dict(r.url.params)["input"] for r in recordingTransport.requests] == ["jagtvej"]
