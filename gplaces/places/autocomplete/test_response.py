"""
Unit tests for Place Autocomplete response parsing.
"""

import logging

import pytest

from gplaces.places.autocomplete import PlacesAutoCompleteResponse, Prediction
from gplaces.places.common import PlaceLocationType, Status
from gplaces.places.exceptions import PlacesApiError

JAGTVEJ_PREDICTION = {
    "description": "Jagtvej, 2200 København N, Danmark",
    "matched_substrings": [
        {"length": 7, "offset": 0},
        {"length": 4, "offset": 9},
        {"length": 10, "offset": 14},
    ],
    "place_id": "EiJKYWd0dmVqLCAyMjAwIEvDuGJlbmhhdm4gTiwgRGFubWFyayIuKiwKFAoSCd8jJ9mrU1JGEf9TIN3ZsRSE",
    "reference": "EiJKYWd0dmVqLCAyMjAwIEvDuGJlbmhhdm4gTiwgRGFubWFyayIuKiwKFAoSCd8jJ9mrU1JGEf9TIN3ZsRSE",
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


def test_parse_ok_response():
    """Full prediction is parsed into typed models, dood!"""
    response = PlacesAutoCompleteResponse.from_dict({"status": "OK", "predictions": [JAGTVEJ_PREDICTION]})

    assert response.status == Status.OK
    assert response.isOk
    assert len(response.predictions) == 1

    prediction = response.predictions[0]
    assert prediction.description == "Jagtvej, 2200 København N, Danmark"
    assert prediction.place_id.startswith("EiJKYWd0dmVq")
    assert prediction.reference == prediction.place_id
    assert prediction.distance_meters is None
    assert [(m.offset, m.length) for m in prediction.matched_substrings] == [(0, 7), (9, 4), (14, 10)]
    assert [t.value for t in prediction.terms] == ["Jagtvej", "2200 København N", "Danmark"]
    assert prediction.terms[2].offset == 27
    assert prediction.types == [PlaceLocationType.ROUTE, PlaceLocationType.GEOCODE]
    assert prediction.api_kwargs == {}

    formatting = prediction.structured_formatting
    assert formatting.main_text == "Jagtvej"
    assert formatting.secondary_text == "2200 København N, Danmark"
    assert formatting.main_text_matched_substrings[0].length == 7

    assert response.raiseForStatus() is response


def test_parse_distance_meters():
    prediction = Prediction.from_dict({**JAGTVEJ_PREDICTION, "distance_meters": 1234})
    assert prediction.distance_meters == 1234


def test_unknown_types_are_skipped():
    """Types we don't know are dropped, raw list kept in api_kwargs, dood!"""
    prediction = Prediction.from_dict({**JAGTVEJ_PREDICTION, "types": ["route", "space_elevator"]})

    assert prediction.types == [PlaceLocationType.ROUTE]
    assert prediction.api_kwargs["types"] == ["route", "space_elevator"]


def test_unknown_fields_kept_in_api_kwargs():
    response = PlacesAutoCompleteResponse.from_dict(
        {"status": "OK", "predictions": [{**JAGTVEJ_PREDICTION, "new_field": 1}], "something": True}
    )

    assert response.api_kwargs == {"something": True}
    assert response.predictions[0].api_kwargs == {"new_field": 1}


def test_zero_results():
    response = PlacesAutoCompleteResponse.from_dict({"status": "ZERO_RESULTS", "predictions": []})

    assert response.status == Status.ZERO_RESULTS
    assert response.predictions == []
    assert not response.isOk
    assert response.raiseForStatus() is response


def test_zero_results_with_predictions_drops_them(caplog):
    with caplog.at_level(logging.WARNING):
        response = PlacesAutoCompleteResponse.from_dict(
            {"status": "ZERO_RESULTS", "predictions": [JAGTVEJ_PREDICTION]}
        )

    assert response.predictions == []
    assert "dropping" in caplog.text


@pytest.mark.parametrize(
    "status",
    [Status.OVER_QUERY_LIMIT, Status.REQUEST_DENIED, Status.INVALID_REQUEST, Status.UNKNOWN_ERROR],
)
def test_error_status_is_regular_response(status):
    """Error statuses parse fine and raise only on request, dood!"""
    response = PlacesAutoCompleteResponse.from_dict(
        {"status": status.value, "predictions": [], "error_message": "You have exceeded your quota."}
    )

    assert response.status == status
    assert response.error_message == "You have exceeded your quota."

    with pytest.raises(PlacesApiError) as excInfo:
        response.raiseForStatus()
    assert excInfo.value.status == status.value
    assert "exceeded your quota" in str(excInfo.value)


def test_error_status_without_message():
    response = PlacesAutoCompleteResponse.from_dict({"status": "REQUEST_DENIED"})

    assert response.predictions == []
    assert response.error_message is None
    with pytest.raises(PlacesApiError, match="REQUEST_DENIED"):
        response.raiseForStatus()


def test_missing_or_unknown_status():
    assert PlacesAutoCompleteResponse.from_dict({}).status == Status.UNKNOWN_ERROR
    assert PlacesAutoCompleteResponse.from_dict({"status": "BRAND_NEW"}).status == Status.UNKNOWN_ERROR


def test_info_messages():
    response = PlacesAutoCompleteResponse.from_dict(
        {"status": "OK", "predictions": [], "info_messages": ["Only first 5 results are returned"]}
    )
    assert response.info_messages == ["Only first 5 results are returned"]
