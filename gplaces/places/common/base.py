"""
Shared request plumbing for Places API endpoints.

Every endpoint request composes :class:`PlacesCommonFields` by value and
renders itself into :class:`QueryStringParameters` using the helpers below.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Mapping, Optional, Tuple, Union
from urllib.parse import urlencode

from ..constants import QUERY_SAFE_CHARS
from ..exceptions import PlacesSerializationError, PlacesValidationError
from .enums import Component
from .models import LocationBias, LocationRestriction

logger = logging.getLogger(__name__)


class QueryStringParameters:
    """Ordered list of query-string (name, value) pairs, dood!

    Order of `add()` calls is the order on the wire, names may repeat.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Optional[List[Tuple[str, str]]] = None):
        self._items: List[Tuple[str, str]] = list(items or [])

    def add(self, name: str, value: str) -> "QueryStringParameters":
        self._items.append((name, value))
        return self

    def addIfNotEmpty(self, name: str, value: Optional[str]) -> "QueryStringParameters":
        """Add pair only if value is non-empty string."""
        if value:
            self.add(name, value)
        return self

    def names(self) -> List[str]:
        return [name for name, _ in self._items]

    def get(self, name: str) -> Optional[str]:
        """Get first value for name or None."""
        for itemName, value in self._items:
            if itemName == name:
                return value
        return None

    def toList(self) -> List[Tuple[str, str]]:
        return list(self._items)

    def toQueryString(self) -> str:
        """URL-encode parameters preserving their order."""
        return urlencode(self._items, safe=QUERY_SAFE_CHARS)

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, QueryStringParameters):
            return self._items == other._items
        return NotImplemented

    def __repr__(self) -> str:
        return f"QueryStringParameters({self._items!r})"


@dataclass(slots=True)
class PlacesCommonFields:
    """
    Fields every Places request shares
    """

    key: str = ""
    """API key, required"""
    language: Optional[str] = None
    """Language code of results, e.g. `da` or `en-GB`"""
    region: Optional[str] = None
    """Region code (ccTLD) to bias results to"""
    locationBias: Optional[LocationBias] = None
    locationRestriction: Optional[LocationRestriction] = None


def validateCommonFields(common: PlacesCommonFields) -> None:
    """Validate fields shared by all requests.

    Raises:
        PlacesValidationError: On missing key, bad bias/restriction shape
            or both bias and restriction set
    """
    if not common.key or not common.key.strip():
        raise PlacesValidationError("ApiKey must not null or empty")

    if common.locationBias is not None and common.locationRestriction is not None:
        raise PlacesValidationError("LocationBias and LocationRestriction can't be used together")

    if common.locationBias is not None:
        common.locationBias.validate()
    if common.locationRestriction is not None:
        common.locationRestriction.validate()


def appendLocationParameters(parameters: QueryStringParameters, common: PlacesCommonFields) -> QueryStringParameters:
    """Append `locationbias` and `locationrestriction` if set."""
    if common.locationBias is not None:
        parameters.add("locationbias", common.locationBias.toString())
    if common.locationRestriction is not None:
        parameters.add("locationrestriction", common.locationRestriction.toString())
    return parameters


def componentsToString(components: Mapping[Union[Component, str], str]) -> str:
    """Render component filters as `component:value|...` in mapping order, dood!

    Raises:
        PlacesSerializationError: On component kind we don't know
    """
    tokens = []
    for component, value in components.items():
        if isinstance(component, Enum) and not isinstance(component, Component):
            raise PlacesSerializationError(f"Unknown component {component!r}")
        try:
            token = Component(str(component).lower())
        except ValueError as e:
            raise PlacesSerializationError(f"Unknown component {component!r}") from e
        tokens.append(f"{token.value}:{value}")
    return "|".join(tokens)
