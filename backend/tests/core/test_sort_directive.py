"""Sort Directive Parsing: verifies `sort` query value handling."""

import pytest

from roomfinder.core.domain_types import RoomField, SortDirection, SortKey
from roomfinder.core.errors import RoomValidationError
from roomfinder.core.sort_directive import parse_sort


def test_no_values_means_no_keys():
    assert parse_sort(None) == []
    assert parse_sort([]) == []


def test_field_with_direction():
    assert parse_sort(["id,desc"]) == [SortKey(RoomField.ID, SortDirection.DESC)]


def test_direction_defaults_to_ascending():
    assert parse_sort(["roomName"]) == [SortKey(RoomField.ROOM_NAME, SortDirection.ASC)]


def test_direction_is_case_insensitive():
    assert parse_sort(["roomCapacity,DESC"])[0].direction is SortDirection.DESC


def test_trailing_direction_applies_to_every_field():
    assert parse_sort(["roomName,roomId,desc"]) == [
        SortKey(RoomField.ROOM_NAME, SortDirection.DESC),
        SortKey(RoomField.ROOM_ID, SortDirection.DESC),
    ]


def test_repeated_values_keep_order():
    keys = parse_sort(["roomCapacity,desc", "id"])
    assert [k.field for k in keys] == [RoomField.ROOM_CAPACITY, RoomField.ID]


def test_values_without_field_are_ignored():
    assert parse_sort(["", "desc", " , "]) == []


def test_unknown_field_raises():
    with pytest.raises(RoomValidationError) as exc_info:
        parse_sort(["room_name,asc"])
    assert exc_info.value.field == "sort"
    assert exc_info.value.http_status == 400


def test_unknown_direction_is_treated_as_field():
    with pytest.raises(RoomValidationError):
        parse_sort(["id,sideways"])
