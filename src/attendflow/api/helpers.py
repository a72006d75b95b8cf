from __future__ import annotations

from typing import Mapping, Optional

from flask import request

from ..core.exceptions import ValidationError
from ..geofence.model import Coordinates


def json_body() -> dict:
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Expected a JSON object")
    return data


def pick(data: Mapping, mapping: Mapping[str, str]) -> dict:
    """Rename the JSON keys present in data to service keyword names."""
    return {field: data[key] for key, field in mapping.items() if key in data}


def coords_from(data: Mapping) -> Optional[Coordinates]:
    """None when the client could not obtain a position."""
    lat = data.get("latitude", data.get("lat"))
    lng = data.get("longitude", data.get("lng"))
    if lat is None or lng is None:
        return None
    try:
        return Coordinates(float(lat), float(lng))
    except (TypeError, ValueError):
        raise ValidationError("latitude/longitude must be numbers") from None
