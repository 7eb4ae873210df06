"""Domain Types: verifies identity wrappers and enum values."""

from roomfinder.core.domain_types import (
    AlertAction, RoomField, RoomPk, SortDirection, SortKey,
)


def test_room_pk_wraps_int():
    assert RoomPk(7) == 7


def test_room_fields_map_to_attributes():
    assert {f.value: f.attribute for f in RoomField} == {
        "id": "id",
        "roomId": "room_id",
        "roomName": "room_name",
        "roomCapacity": "room_capacity",
    }


def test_sort_key_defaults_to_ascending():
    assert SortKey(RoomField.ID).direction is SortDirection.ASC


def test_alert_actions():
    assert {a.value for a in AlertAction} == {"created", "updated", "deleted"}
