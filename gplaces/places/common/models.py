"""
Geographic models shared by Places API requests.

This module contains Coordinate, ViewPort, LocationBias and LocationRestriction
dataclasses together with their query-string renderings.
"""

import math
from dataclasses import dataclass
from typing import List, Optional

from gplaces.utils import formatInvariantNumber

from ..constants import MAX_RADIUS, MIN_RADIUS
from ..exceptions import PlacesValidationError


def validateRadius(radius: Optional[float], name: str = "Radius") -> None:
    """Check radius (in meters) is within [MIN_RADIUS, MAX_RADIUS], None is fine."""
    if radius is None:
        return
    if isinstance(radius, bool) or not isinstance(radius, (int, float)) or math.isnan(radius):
        raise PlacesValidationError(f"{name} must be a number, got {radius!r}")
    if radius < MIN_RADIUS or radius > MAX_RADIUS:
        raise PlacesValidationError(
            f"{name} must be greater than or equal to {MIN_RADIUS} and less than or equal to {MAX_RADIUS}."
        )


@dataclass(slots=True, frozen=True)
class Coordinate:
    """
    Latitude/longitude pair
    """

    latitude: float
    longitude: float

    def validate(self) -> None:
        for value, limit, name in ((self.latitude, 90, "Latitude"), (self.longitude, 180, "Longitude")):
            if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
                raise PlacesValidationError(f"{name} must be a finite number, got {value!r}")
            if abs(value) > limit:
                raise PlacesValidationError(f"{name} must be between -{limit} and {limit}, got {value}")

    def toString(self) -> str:
        """Render as `lat,lng` with invariant decimal formatting, dood!"""
        return f"{formatInvariantNumber(self.latitude)},{formatInvariantNumber(self.longitude)}"

    def __str__(self) -> str:
        return self.toString()

    @classmethod
    def fromString(cls, value: str) -> "Coordinate":
        """Parse `lat,lng` string back into Coordinate.

        Raises:
            PlacesValidationError: If string is not a `lat,lng` pair of numbers
        """
        parts = value.split(",")
        if len(parts) != 2:
            raise PlacesValidationError(f"Coordinate must be in 'lat,lng' form, got {value!r}")
        try:
            return cls(latitude=float(parts[0]), longitude=float(parts[1]))
        except ValueError as e:
            raise PlacesValidationError(f"Coordinate must be in 'lat,lng' form, got {value!r}") from e


@dataclass(slots=True, frozen=True)
class ViewPort:
    """
    Rectangle given by south-west and north-east corners
    """

    southWest: Coordinate
    northEast: Coordinate

    def validate(self) -> None:
        self.southWest.validate()
        self.northEast.validate()
        if self.southWest.latitude > self.northEast.latitude:
            raise PlacesValidationError("ViewPort south-west latitude must not be north of north-east latitude")

    def toString(self) -> str:
        """Render as `south,west|north,east`."""
        return f"{self.southWest.toString()}|{self.northEast.toString()}"

    def __str__(self) -> str:
        return self.toString()


@dataclass(slots=True)
class LocationBias:
    """
    Soft hint narrowing results toward an area, dood!

    Exactly one shape must be set:

    - `ipBias=True`: bias by caller IP address (`ipbias`)
    - `point`: single point (`point:lat,lng`)
    - `location` + `radius`: circle (`circle:radius@lat,lng`)
    - `bounds`: rectangle (`rectangle:south,west|north,east`)
    """

    ipBias: bool = False
    point: Optional[Coordinate] = None
    location: Optional[Coordinate] = None
    """Circle center"""
    radius: Optional[float] = None
    """Circle radius in meters"""
    bounds: Optional[ViewPort] = None

    def _populatedShapes(self) -> List[str]:
        shapes = []
        if self.ipBias:
            shapes.append("ipBias")
        if self.point is not None:
            shapes.append("point")
        if self.location is not None or self.radius is not None:
            shapes.append("circle")
        if self.bounds is not None:
            shapes.append("bounds")
        return shapes

    def validate(self) -> None:
        shapes = self._populatedShapes()
        if not shapes:
            raise PlacesValidationError("LocationBias must have one of ipBias, point, circle or bounds set")
        if len(shapes) > 1:
            raise PlacesValidationError(f"LocationBias must have exactly one shape set, got {', '.join(shapes)}")

        if self.point is not None:
            self.point.validate()
        elif shapes[0] == "circle":
            if self.location is None or self.radius is None:
                raise PlacesValidationError("LocationBias circle requires both location and radius")
            self.location.validate()
            validateRadius(self.radius, "LocationBias radius")
        elif self.bounds is not None:
            self.bounds.validate()

    def toString(self) -> str:
        """Render `locationbias` parameter value. Call validate() first."""
        if self.ipBias:
            return "ipbias"
        if self.point is not None:
            return f"point:{self.point.toString()}"
        if self.location is not None and self.radius is not None:
            return f"circle:{formatInvariantNumber(self.radius)}@{self.location.toString()}"
        if self.bounds is not None:
            return f"rectangle:{self.bounds.toString()}"
        raise PlacesValidationError("LocationBias has no shape set")


@dataclass(slots=True)
class LocationRestriction:
    """
    Hard filter excluding results outside of an area.

    Exactly one shape must be set: `location` + `radius` (circle) or `bounds` (rectangle).
    """

    location: Optional[Coordinate] = None
    radius: Optional[float] = None
    bounds: Optional[ViewPort] = None

    def validate(self) -> None:
        hasCircle = self.location is not None or self.radius is not None
        hasBounds = self.bounds is not None
        if hasCircle == hasBounds:
            raise PlacesValidationError("LocationRestriction must have exactly one of circle or bounds set")

        if self.bounds is not None:
            self.bounds.validate()
            return

        if self.location is None or self.radius is None:
            raise PlacesValidationError("LocationRestriction circle requires both location and radius")
        self.location.validate()
        validateRadius(self.radius, "LocationRestriction radius")

    def toString(self) -> str:
        """Render `locationrestriction` parameter value. Call validate() first."""
        if self.bounds is not None:
            return f"rectangle:{self.bounds.toString()}"
        if self.location is not None and self.radius is not None:
            return f"circle:{formatInvariantNumber(self.radius)}@{self.location.toString()}"
        raise PlacesValidationError("LocationRestriction has no shape set")
