from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import PremiseType
from ..geofence.model import Coordinates


@dataclass(frozen=True)
class Location:
    """Domain entity: a monitored premise with a circular geofence."""

    location_id: str
    name: str
    premise_type: PremiseType
    latitude: float
    longitude: float
    radius: float
    qr_code: str
    start_time: str
    end_time: str

    @property
    def point(self) -> Coordinates:
        return Coordinates(self.latitude, self.longitude)

    def to_dict(self) -> dict:
        return {
            "id": self.location_id,
            "name": self.name,
            "type": self.premise_type.value,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "radius": self.radius,
            "qrCode": self.qr_code,
            "startTime": self.start_time,
            "endTime": self.end_time,
        }
