"""Types and request plumbing shared by all Places API endpoints."""

from .base import (
    PlacesCommonFields,
    QueryStringParameters,
    appendLocationParameters,
    componentsToString,
    validateCommonFields,
)
from .enums import Component, PlaceLocationType, Status
from .models import Coordinate, LocationBias, LocationRestriction, ViewPort, validateRadius

__all__ = [
    "PlacesCommonFields",
    "QueryStringParameters",
    "appendLocationParameters",
    "componentsToString",
    "validateCommonFields",
    "Component",
    "PlaceLocationType",
    "Status",
    "Coordinate",
    "LocationBias",
    "LocationRestriction",
    "ViewPort",
    "validateRadius",
]
