"""Room Field Validation: explicit required-field check run before persistence.

Invariants:
    - check_room_fields is PURE: returns a violation descriptor, never raises
    - roomName is the only required field; null is rejected, empty string is not
    - Fields are reported by their JSON name

Design Decisions:
    - Typed result (FieldViolation | None) over exceptions: the shell decides how to fail
"""

from dataclasses import dataclass

from roomfinder.core.repository_protocols import RoomLike


REQUIRED_FIELDS: tuple[tuple[str, str], ...] = (
    ("room_name", "roomName"),
)


@dataclass(frozen=True)
class FieldViolation:
    """A single rejected field."""
    field: str
    message: str


def check_room_fields(room: RoomLike) -> FieldViolation | None:
    """Return the first missing required field, or None when the room is acceptable."""
    for attribute, json_name in REQUIRED_FIELDS:
        if getattr(room, attribute, None) is None:
            return FieldViolation(json_name, f"{json_name} must not be null")
    return None
