"""
Place Autocomplete response models.

This module contains PlacesAutoCompleteResponse and the prediction dataclasses
it is made of: Prediction, StructuredFormatting, MatchedSubstring and Term.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..common.enums import PlaceLocationType, Status
from ..exceptions import PlacesApiError

logger = logging.getLogger(__name__)


def _extraKwargs(data: Dict[str, Any], known: set[str]) -> Dict[str, Any]:
    return {k: v for k, v in data.items() if k not in known}


@dataclass(slots=True)
class MatchedSubstring:
    """
    Position of input text matched in prediction description
    """

    offset: int = 0
    """Start offset in description"""
    length: int = 0
    """Length of matched text"""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MatchedSubstring":
        """Create MatchedSubstring instance from API response dictionary."""
        return cls(offset=int(data.get("offset", 0)), length=int(data.get("length", 0)))


@dataclass(slots=True)
class Term:
    """
    One section of prediction description, usually terminated with a comma
    """

    offset: int = 0
    """Start offset of term in description"""
    value: str = ""
    """Text of the term"""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Term":
        """Create Term instance from API response dictionary."""
        return cls(offset=int(data.get("offset", 0)), value=data.get("value", ""))


@dataclass(slots=True)
class StructuredFormatting:
    """
    Prediction description split into main text (place name) and secondary text (location)
    """

    main_text: str = ""
    secondary_text: Optional[str] = None
    main_text_matched_substrings: List[MatchedSubstring] = field(default_factory=list)
    api_kwargs: Dict[str, Any] = field(default_factory=dict)
    """Raw API response data"""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StructuredFormatting":
        """Create StructuredFormatting instance from API response dictionary."""
        return cls(
            main_text=data.get("main_text", ""),
            secondary_text=data.get("secondary_text"),
            main_text_matched_substrings=[
                MatchedSubstring.from_dict(item) for item in data.get("main_text_matched_substrings") or []
            ],
            api_kwargs=_extraKwargs(data, {"main_text", "secondary_text", "main_text_matched_substrings"}),
        )


@dataclass(slots=True)
class Prediction:
    """
    Single autocomplete prediction, dood!
    """

    description: str = ""
    """Human-readable name of predicted place"""
    place_id: str = ""
    """Stable place identifier, usable with Place Details"""
    reference: Optional[str] = None
    """Deprecated identifier, kept for completeness"""
    distance_meters: Optional[int] = None
    """Straight-line distance from request `origin`, only when origin was set"""
    structured_formatting: StructuredFormatting = field(default_factory=StructuredFormatting)
    matched_substrings: List[MatchedSubstring] = field(default_factory=list)
    terms: List[Term] = field(default_factory=list)
    types: List[PlaceLocationType] = field(default_factory=list)
    api_kwargs: Dict[str, Any] = field(default_factory=dict)
    """Raw API response data"""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Prediction":
        """Create Prediction instance from API response dictionary.

        Place types we don't know are skipped, raw list stays in `api_kwargs["types"]`.
        """
        rawTypes = data.get("types") or []
        types = [t for t in (PlaceLocationType.fromString(value) for value in rawTypes) if t is not None]

        apiKwargs = _extraKwargs(
            data,
            {
                "description",
                "place_id",
                "reference",
                "distance_meters",
                "structured_formatting",
                "matched_substrings",
                "terms",
                "types",
            },
        )
        if len(types) != len(rawTypes):
            apiKwargs["types"] = list(rawTypes)

        return cls(
            description=data.get("description", ""),
            place_id=data.get("place_id", ""),
            reference=data.get("reference"),
            distance_meters=data.get("distance_meters"),
            structured_formatting=StructuredFormatting.from_dict(data.get("structured_formatting") or {}),
            matched_substrings=[MatchedSubstring.from_dict(item) for item in data.get("matched_substrings") or []],
            terms=[Term.from_dict(item) for item in data.get("terms") or []],
            types=types,
            api_kwargs=apiKwargs,
        )


@dataclass(slots=True)
class PlacesAutoCompleteResponse:
    """
    Place Autocomplete response, dood!

    Non-OK statuses are regular responses, branch on `status` or call
    `raiseForStatus()`. `ZERO_RESULTS` comes with empty `predictions`.
    """

    status: Status = Status.UNKNOWN_ERROR
    predictions: List[Prediction] = field(default_factory=list)
    error_message: Optional[str] = None
    """Detailed error info, present for some non-OK statuses"""
    info_messages: List[str] = field(default_factory=list)
    api_kwargs: Dict[str, Any] = field(default_factory=dict)
    """Raw API response data"""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PlacesAutoCompleteResponse":
        """Create PlacesAutoCompleteResponse instance from API response dictionary."""
        status = Status.fromString(data.get("status"))
        predictions = [Prediction.from_dict(item) for item in data.get("predictions") or []]
        if status == Status.ZERO_RESULTS and predictions:
            logger.warning(f"Got {len(predictions)} predictions with {status} status, dropping them")
            predictions = []

        return cls(
            status=status,
            predictions=predictions,
            error_message=data.get("error_message"),
            info_messages=list(data.get("info_messages") or []),
            api_kwargs=_extraKwargs(data, {"status", "predictions", "error_message", "info_messages"}),
        )

    @property
    def isOk(self) -> bool:
        return self.status == Status.OK

    def raiseForStatus(self) -> "PlacesAutoCompleteResponse":
        """Raise PlacesApiError for error statuses, return self otherwise.

        Raises:
            PlacesApiError: For any status except OK and ZERO_RESULTS
        """
        if self.status.isError:
            raise PlacesApiError(
                self.error_message or f"Places API returned {self.status}",
                status=self.status.value,
            )
        return self
