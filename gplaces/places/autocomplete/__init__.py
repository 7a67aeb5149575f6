"""Place Autocomplete endpoint: request, response and enums."""

from .enums import RestrictPlaceType
from .request import PlacesAutoCompleteRequest, restrictPlaceTypesToString
from .response import (
    MatchedSubstring,
    PlacesAutoCompleteResponse,
    Prediction,
    StructuredFormatting,
    Term,
)

__all__ = [
    "RestrictPlaceType",
    "PlacesAutoCompleteRequest",
    "restrictPlaceTypesToString",
    "MatchedSubstring",
    "PlacesAutoCompleteResponse",
    "Prediction",
    "StructuredFormatting",
    "Term",
]
