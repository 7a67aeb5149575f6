"""
Enums for Place Autocomplete requests.
"""

from enum import StrEnum


class RestrictPlaceType(StrEnum):
    """
    Type collections autocomplete results can be restricted to (`types=`)
    """

    GEOCODE = "geocode"
    """Only geocoding results, no businesses."""
    ADDRESS = "address"
    """Only results with a precise address."""
    ESTABLISHMENT = "establishment"
    """Only business results."""
    REGIONS = "regions"
    """Localities, sublocalities, postal codes, countries and admin areas."""
    CITIES = "cities"
    """Localities and third-level admin areas."""
