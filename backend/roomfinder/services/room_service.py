"""Room Service: pass-through seam between the HTTP resource and the repository.

Invariants:
    - Adds no business rules: every call forwards to the repository unchanged
    - Built once at startup and shared by all requests
"""

import logging
from typing import Sequence

from roomfinder.core.domain_types import PageRequest, RoomPk, SortKey
from roomfinder.core.repository_protocols import RoomLike, RoomRepository

logger = logging.getLogger(__name__)


class RoomService:
    """Service for managing Room."""

    def __init__(self, repository: RoomRepository):
        self._repository = repository

    async def save(self, room: RoomLike) -> RoomLike:
        """Save a room (insert when id is unset, full replace otherwise)."""
        logger.debug(f"Request to save Room: {room!r}")
        return await self._repository.save(room)

    async def find_all(
        self, sort: Sequence[SortKey] = (), page: PageRequest | None = None,
    ) -> Sequence[RoomLike]:
        logger.debug("Request to get all Rooms")
        return await self._repository.find_all(sort=sort, page=page)

    async def find_all_with_count(
        self, sort: Sequence[SortKey] = (), page: PageRequest | None = None,
    ) -> tuple[Sequence[RoomLike], int]:
        """Rooms for one page together with the total they were counted against."""
        logger.debug("Request to get a page of Rooms")
        return await self._repository.find_all_with_count(sort=sort, page=page)

    async def count(self) -> int:
        return await self._repository.count()

    async def find_one(self, room_pk: RoomPk) -> RoomLike | None:
        logger.debug("Request to get Room", extra={"room_pk": room_pk})
        return await self._repository.find_one(room_pk)

    async def delete(self, room_pk: RoomPk) -> None:
        logger.info("Request to delete Room", extra={"room_pk": room_pk})
        await self._repository.delete(room_pk)
