"""Room Field Validation: verifies the required-field check.

Tests:
    - roomName present → no violation
    - roomName None or absent → violation reported by JSON name
    - empty roomName is accepted (null-only rule)
"""

from types import SimpleNamespace

from roomfinder.core.validate_room import FieldViolation, check_room_fields


def _room(**fields):
    base = {"id": None, "room_id": 1, "room_name": "AAAAA", "room_capacity": 1}
    base.update(fields)
    return SimpleNamespace(**base)


def test_room_with_name_passes():
    assert check_room_fields(_room()) is None


def test_missing_room_name_is_reported():
    violation = check_room_fields(_room(room_name=None))

    assert violation == FieldViolation("roomName", "roomName must not be null")


def test_optional_fields_may_be_null():
    assert check_room_fields(_room(room_id=None, room_capacity=None)) is None


def test_empty_room_name_is_accepted():
    assert check_room_fields(_room(room_name="")) is None


def test_object_without_attribute_is_reported():
    assert check_room_fields(SimpleNamespace()).field == "roomName"
