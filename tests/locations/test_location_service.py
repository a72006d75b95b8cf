import pytest

from attendflow.core.enums import PremiseType
from attendflow.core.exceptions import NotFoundError, ValidationError


def test_add_location_defaults_and_token(location_service):
    loc = location_service.add_location(name="Showroom", latitude=1.5, longitude=2.5, premise_type="showroom")

    assert loc.premise_type == PremiseType.SHOWROOM
    assert loc.radius == 50.0
    assert loc.start_time == "09:00"
    assert loc.end_time == "18:00"
    assert loc.qr_code.startswith("QR-")
    assert len(loc.qr_code) == 9
    assert location_service.get_location(loc.location_id) == loc


def test_add_location_rejects_bad_input(location_service):
    with pytest.raises(ValidationError):
        location_service.add_location(name="", latitude=0, longitude=0)
    with pytest.raises(ValidationError):
        location_service.add_location(name="X", latitude=0, longitude=0, radius=0)
    with pytest.raises(ValidationError):
        location_service.add_location(name="X", latitude=0, longitude=0, qr_code="HQ-OFFICE-001")
    with pytest.raises(ValidationError):
        location_service.add_location(name="X", latitude=0, longitude=0, start_time="9am")
    with pytest.raises(ValidationError):
        location_service.add_location(name="X", latitude=0, longitude=0, location_id="loc-1")


def test_update_location(location_service):
    loc = location_service.update_location("loc-1", radius="120", name="HQ")

    assert loc.radius == 120.0
    assert loc.name == "HQ"
    assert loc.qr_code == "HQ-OFFICE-001"


def test_delete_location_does_not_cascade(location_service, ledger):
    assert location_service.delete_location("loc-1") is True
    assert location_service.delete_location("loc-1") is False

    assert ledger.get_employee("emp-1").location_id == "loc-1"
    with pytest.raises(NotFoundError):
        location_service.get_location("loc-1")


def test_qr_png(location_service):
    png = location_service.qr_png("loc-1")

    assert png.startswith(b"\x89PNG")


def test_add_location_missing_fields_is_a_validation_error(location_service):
    with pytest.raises(ValidationError):
        location_service.add_location(name="X")
    with pytest.raises(ValidationError):
        location_service.add_location(latitude=1.0, longitude=2.0)
