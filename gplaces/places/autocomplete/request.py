"""
Place Autocomplete request model.

The Place Autocomplete service returns place predictions for a partial text
query, in order of perceived relevance.
https://developers.google.com/maps/documentation/places/web-service/autocomplete
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Optional, Union

from gplaces.utils import formatInvariantNumber

from ..common.base import (
    PlacesCommonFields,
    QueryStringParameters,
    appendLocationParameters,
    componentsToString,
    validateCommonFields,
)
from ..common.enums import Component
from ..common.models import Coordinate, validateRadius
from ..constants import AUTOCOMPLETE_PATH
from ..exceptions import PlacesSerializationError, PlacesValidationError
from .enums import RestrictPlaceType

logger = logging.getLogger(__name__)


def restrictPlaceTypesToString(types: Iterable[Union[RestrictPlaceType, str]]) -> str:
    """Render place type restrictions as `|`-joined lower-case tokens, dood!

    Raises:
        PlacesSerializationError: On value which is not a RestrictPlaceType
    """
    tokens: List[str] = []
    for placeType in types:
        if isinstance(placeType, Enum) and not isinstance(placeType, RestrictPlaceType):
            raise PlacesSerializationError(f"Unknown place type restriction {placeType!r}")
        try:
            tokens.append(RestrictPlaceType(str(placeType).lower()).value)
        except ValueError as e:
            raise PlacesSerializationError(f"Unknown place type restriction {placeType!r}") from e
    return "|".join(tokens)


@dataclass(slots=True)
class PlacesAutoCompleteRequest:
    """
    Place Autocomplete request, dood!

    Example:
        >>> request = PlacesAutoCompleteRequest(
        ...     input="jagtvej 2200 Copenhagen",
        ...     common=PlacesCommonFields(key="your_api_key", language="da"),
        ...     types=[RestrictPlaceType.ADDRESS],
        ... )
        >>> request.getQueryStringParameters().toQueryString()
        'key=your_api_key&input=jagtvej+2200+Copenhagen&language=da&types=address'
    """

    PATH = AUTOCOMPLETE_PATH

    input: str = ""
    """Text to search on, required"""
    common: PlacesCommonFields = field(default_factory=PlacesCommonFields)
    """Key, language, region, location bias and restriction"""
    offset: Optional[str] = None
    """Caret position in `input` the service should use for predictions"""
    location: Optional[Coordinate] = None
    """Point around which to retrieve predictions"""
    radius: Optional[float] = None
    """Distance in meters, 1..50000"""
    types: List[RestrictPlaceType] = field(default_factory=list)
    components: Dict[Component, str] = field(default_factory=dict)
    """Component filters, rendered in insertion order"""
    origin: Optional[Coordinate] = None
    """Origin for `distance_meters` of predictions"""
    sessionToken: Optional[str] = None
    strictBounds: bool = False
    """Return only places strictly within `location` + `radius`"""

    def validate(self) -> None:
        """Check request before it is sent, no side effects besides raising.

        Raises:
            PlacesValidationError: On missing key or input, radius out of
                range, bad location bias/restriction or conflicting bias
        """
        validateCommonFields(self.common)

        if not self.input:
            raise PlacesValidationError("Input must not null or empty")

        validateRadius(self.radius)

        if self.location is not None:
            self.location.validate()
        if self.origin is not None:
            self.origin.validate()

        # location/radius is itself a bias, only one area may reach the wire
        if self.location is not None or self.radius is not None:
            if self.common.locationBias is not None:
                raise PlacesValidationError("LocationBias can't be combined with location or radius")
            if self.common.locationRestriction is not None:
                raise PlacesValidationError("LocationRestriction can't be combined with location or radius")

    def getQueryStringParameters(self) -> QueryStringParameters:
        """Validate request and render it into ordered query-string parameters.

        Raises:
            PlacesValidationError: If validation fails
            PlacesSerializationError: On unknown type or component token
        """
        self.validate()

        parameters = QueryStringParameters()
        parameters.add("key", self.common.key)
        parameters.add("input", self.input)
        parameters.addIfNotEmpty("offset", self.offset)

        if self.location is not None:
            parameters.add("location", self.location.toString())
        if self.radius is not None:
            parameters.add("radius", formatInvariantNumber(self.radius))

        parameters.addIfNotEmpty("language", self.common.language)

        if self.types:
            parameters.add("types", restrictPlaceTypesToString(self.types))
        if self.components:
            parameters.add("components", componentsToString(self.components))

        if self.origin is not None:
            parameters.add("origin", self.origin.toString())
        parameters.addIfNotEmpty("region", self.common.region)
        parameters.addIfNotEmpty("sessiontoken", self.sessionToken)
        if self.strictBounds:
            parameters.add("strictbounds", "true")

        return appendLocationParameters(parameters, self.common)
