"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - RoomPk wraps the server-generated integer id, never confused with the business roomId
    - Sort fields are addressed by their JSON name and mapped to attribute names here only
    - All valid states encoded as Enums, no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

RoomPk = NewType("RoomPk", int)

# BIGINT and INTEGER column ranges; larger values are client errors, not driver faults
BIGINT_MIN: int = -(2**63)
BIGINT_MAX: int = 2**63 - 1
INT_MIN: int = -(2**31)
INT_MAX: int = 2**31 - 1

# page * size stays inside BIGINT while both are at most INT_MAX
MAX_PAGE: int = INT_MAX


# ─── Enums ───────────────────────────────────────────────────────

class SortDirection(str, Enum):
    """Ordering direction accepted in the `sort` query parameter."""
    ASC = "asc"
    DESC = "desc"


class RoomField(str, Enum):
    """Sortable Room attributes, keyed by their JSON name."""
    ID = "id"
    ROOM_ID = "roomId"
    ROOM_NAME = "roomName"
    ROOM_CAPACITY = "roomCapacity"

    @property
    def attribute(self) -> str:
        """ORM attribute name for this field."""
        return _ATTRIBUTES[self]


_ATTRIBUTES: dict[RoomField, str] = {
    RoomField.ID: "id",
    RoomField.ROOM_ID: "room_id",
    RoomField.ROOM_NAME: "room_name",
    RoomField.ROOM_CAPACITY: "room_capacity",
}


class AlertAction(str, Enum):
    """Mutations announced through the alert response header."""
    CREATED = "created"
    UPDATED = "updated"
    DELETED = "deleted"


# ─── Value Types ─────────────────────────────────────────────────

@dataclass(frozen=True)
class SortKey:
    """One parsed `field[,direction]` ordering directive."""
    field: RoomField
    direction: SortDirection = SortDirection.ASC


@dataclass(frozen=True)
class PageRequest:
    """Zero-based page window for list queries."""
    page: int
    size: int

    @property
    def offset(self) -> int:
        return self.page * self.size
