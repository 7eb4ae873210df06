"""Boundary Protocols: contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - Persistence accessed through the RoomRepository Protocol
    - Implementations provided by shell at the composition root

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - RoomLike lets core validate both request payloads and ORM rows
"""

from typing import Protocol, Sequence

from roomfinder.core.domain_types import RoomPk, SortKey, PageRequest


class RoomLike(Protocol):
    """Structural contract for anything carrying Room fields."""
    id: int | None
    room_id: int | None
    room_name: str | None
    room_capacity: int | None


class RoomRepository(Protocol):
    """Contract for Room persistence, implemented by shell."""
    async def find_all(
        self,
        sort: Sequence[SortKey] = (),
        page: PageRequest | None = None,
    ) -> Sequence[RoomLike]: ...
    async def find_all_with_count(
        self,
        sort: Sequence[SortKey] = (),
        page: PageRequest | None = None,
    ) -> tuple[Sequence[RoomLike], int]: ...
    async def count(self) -> int: ...
    async def find_one(self, room_pk: RoomPk) -> RoomLike | None: ...
    async def save(self, room: RoomLike) -> RoomLike: ...
    async def delete(self, room_pk: RoomPk) -> None: ...
