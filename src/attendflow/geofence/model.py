from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinates:
    """A reported or configured point, in degrees."""

    latitude: float
    longitude: float
