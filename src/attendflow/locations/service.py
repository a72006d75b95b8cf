from __future__ import annotations

import io
import logging
import secrets
import string
import uuid
from dataclasses import replace
from typing import Optional

import qrcode

from ..common.datetime_utils import parse_hhmm
from ..common.validators import require_non_empty, require_positive
from ..core.constants import DEFAULT_RADIUS_METERS, DEFAULT_SHIFT_END, DEFAULT_SHIFT_START
from ..core.enums import PremiseType
from ..core.exceptions import NotFoundError, ValidationError
from .model import Location
from .repository import LocationRepository

logger = logging.getLogger(__name__)

_TOKEN_ALPHABET = string.ascii_uppercase + string.digits


def generate_qr_token() -> str:
    return "QR-" + "".join(secrets.choice(_TOKEN_ALPHABET) for _ in range(6))


def _premise_type(value) -> PremiseType:
    if isinstance(value, PremiseType):
        return value
    try:
        return PremiseType(str(value).strip().upper())
    except ValueError:
        raise ValidationError(f"Invalid premise type: {value!r}") from None


def _shift_time(value: str, field_name: str) -> str:
    try:
        return parse_hhmm(value).strftime("%H:%M")
    except (TypeError, ValueError, AttributeError):
        raise ValidationError(f"{field_name} must be HH:MM") from None


class LocationService:
    """Use case: manage monitored premises (admin)."""

    def __init__(self, locations: LocationRepository):
        self._locations = locations

    def list_locations(self) -> list[Location]:
        return list(self._locations.list_locations())

    def get_location(self, location_id: str) -> Location:
        loc = self._locations.get_location(location_id)
        if not loc:
            raise NotFoundError(f"Location not found: {location_id}")
        return loc

    def add_location(
        self,
        *,
        name: Optional[str] = None,
        latitude: Optional[float] = None,
        longitude: Optional[float] = None,
        premise_type=PremiseType.OFFICE,
        radius: float = DEFAULT_RADIUS_METERS,
        qr_code: Optional[str] = None,
        start_time: str = DEFAULT_SHIFT_START,
        end_time: str = DEFAULT_SHIFT_END,
        location_id: Optional[str] = None,
    ) -> Location:
        location = self._validated(
            Location(
                location_id=location_id or f"loc-{uuid.uuid4().hex[:8]}",
                name=name,
                premise_type=_premise_type(premise_type),
                latitude=latitude,
                longitude=longitude,
                radius=radius,
                qr_code=qr_code if qr_code is not None else generate_qr_token(),
                start_time=start_time,
                end_time=end_time,
            )
        )
        self._locations.add_location(location)
        logger.info("location added: %s (%s)", location.location_id, location.name)
        return location

    def update_location(self, location_id: str, **changes) -> Location:
        current = self.get_location(location_id)
        changes.pop("location_id", None)
        if "premise_type" in changes:
            changes["premise_type"] = _premise_type(changes["premise_type"])

        updated = self._validated(replace(current, **changes))
        self._locations.update_location(updated)
        logger.info("location updated: %s", location_id)
        return updated

    def delete_location(self, location_id: str) -> bool:
        """Remove a location. Employees and records keep their reference to it."""
        deleted = self._locations.delete_location(location_id)
        if deleted:
            logger.info("location deleted: %s", location_id)
        return deleted

    def qr_png(self, location_id: str) -> bytes:
        """PNG image of the location's check-in token."""
        loc = self.get_location(location_id)

        qr = qrcode.QRCode(
            version=1,
            error_correction=qrcode.constants.ERROR_CORRECT_L,
            box_size=10,
            border=2,
        )
        qr.add_data(loc.qr_code)
        qr.make(fit=True)

        img = qr.make_image(fill_color="black", back_color="white")
        buf = io.BytesIO()
        img.save(buf, format="PNG")
        return buf.getvalue()

    def _validated(self, loc: Location) -> Location:
        name = require_non_empty(loc.name, "Location name")
        qr_code = require_non_empty(loc.qr_code, "QR code")
        try:
            latitude = float(loc.latitude)
            longitude = float(loc.longitude)
        except (TypeError, ValueError):
            raise ValidationError("Latitude/longitude must be numbers") from None
        radius = require_positive(loc.radius, "Radius")

        for other in self._locations.list_locations():
            if other.location_id != loc.location_id and other.qr_code == qr_code:
                raise ValidationError(f"QR code already used by {other.name}")

        return replace(
            loc,
            name=name,
            qr_code=qr_code,
            latitude=latitude,
            longitude=longitude,
            radius=radius,
            start_time=_shift_time(loc.start_time, "Start time"),
            end_time=_shift_time(loc.end_time, "End time"),
        )
