from __future__ import annotations

import math
from abc import ABC, abstractmethod

from ..core.constants import EARTH_RADIUS_METERS, METERS_PER_DEGREE
from ..core.exceptions import ValidationError
from .model import Coordinates


class GeofenceValidator(ABC):
    """Strategy Pattern: decide whether a coordinate is inside a circular fence."""

    @abstractmethod
    def distance_meters(self, observed: Coordinates, target: Coordinates) -> float:
        raise NotImplementedError

    def is_within_radius(self, observed: Coordinates, target: Coordinates, radius_meters: float) -> bool:
        # Points exactly on the boundary are rejected.
        return self.distance_meters(observed, target) < float(radius_meters)


class FlatEarthValidator(GeofenceValidator):
    """Euclidean distance in degree-space scaled by a fixed meters-per-degree.

    Only accurate for small radii close to the equator; longitude degrees shrink
    with latitude and this formula ignores that, as well as the poles and the
    date line.
    """

    def distance_meters(self, observed: Coordinates, target: Coordinates) -> float:
        d_lat = observed.latitude - target.latitude
        d_lng = observed.longitude - target.longitude
        return math.sqrt(d_lat ** 2 + d_lng ** 2) * METERS_PER_DEGREE


class HaversineValidator(GeofenceValidator):
    """Great-circle distance on a spherical earth."""

    def distance_meters(self, observed: Coordinates, target: Coordinates) -> float:
        lat1 = math.radians(observed.latitude)
        lat2 = math.radians(target.latitude)
        d_lat = lat2 - lat1
        d_lng = math.radians(target.longitude - observed.longitude)

        a = math.sin(d_lat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(d_lng / 2) ** 2
        return 2 * EARTH_RADIUS_METERS * math.asin(min(1.0, math.sqrt(a)))


_VALIDATORS = {
    "flat": FlatEarthValidator,
    "haversine": HaversineValidator,
}


def build_validator(method: str = "flat") -> GeofenceValidator:
    try:
        return _VALIDATORS[method.lower()]()
    except KeyError:
        raise ValidationError(f"Unknown geofence method: {method!r}") from None


def is_within_radius(observed: Coordinates, target: Coordinates, radius_meters: float) -> bool:
    """Default admission check used by check-in."""
    return FlatEarthValidator().is_within_radius(observed, target, radius_meters)
