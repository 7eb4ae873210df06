"""Room Schemas: JSON contract for the /api/rooms resource.

Invariants:
    - RoomPayload accepts every field as nullable; roomName is enforced by
      core.validate_room.check_room_fields, not by the schema
    - Integers are bounded to their column ranges (BIGINT ids, INTEGER capacity)
    - RoomResponse is built from ORM rows (from_attributes) and always carries id
    - Serialized field names are camelCase (id, roomId, roomName, roomCapacity)
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from roomfinder.core.domain_types import BIGINT_MAX, BIGINT_MIN, INT_MAX, INT_MIN


class _RoomSchema(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class RoomPayload(_RoomSchema):
    """Room body for create and update requests."""
    id: int | None = Field(None, ge=BIGINT_MIN, le=BIGINT_MAX)
    room_id: int | None = Field(None, ge=BIGINT_MIN, le=BIGINT_MAX)
    room_name: str | None = Field(None, max_length=255)
    room_capacity: int | None = Field(None, ge=INT_MIN, le=INT_MAX)


class RoomResponse(_RoomSchema):
    """Room as returned to clients."""
    id: int
    room_id: int | None
    room_name: str
    room_capacity: int | None
