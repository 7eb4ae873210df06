"""Room Repository: SQLAlchemy implementation of the RoomRepository Protocol.

Invariants:
    - Every public method opens its own session and, for writes, commits before returning
    - save() never changes an existing id; inserts let the database assign it
    - save() with an unknown id raises ResourceNotFoundError, it never inserts
    - delete() of an absent id is a silent no-op
    - find_all() orders by id ascending unless sort keys say otherwise; id breaks ties
    - find_all_with_count() reads the page and the total in one transaction; on
      PostgreSQL that transaction is REPEATABLE READ so both see the same snapshot

Design Decisions:
    - Built once at startup around the DatabaseSessionManager, so routes share one instance
    - Explicit field copy on update: no ORM write-back outside save()
"""

import logging
from typing import Sequence

from sqlalchemy import delete, func, select

from roomfinder.core.domain_types import (
    PageRequest, RoomField, RoomPk, SortDirection, SortKey,
)
from roomfinder.core.errors import ResourceNotFoundError
from roomfinder.core.repository_protocols import RoomLike
from roomfinder.infrastructure.database import DatabaseSessionManager
from roomfinder.models.room import Room

logger = logging.getLogger(__name__)


class SqlAlchemyRoomRepository:
    """Room persistence gateway backed by an async SQLAlchemy engine."""

    def __init__(self, db: DatabaseSessionManager):
        self._db = db

    async def find_all(
        self,
        sort: Sequence[SortKey] = (),
        page: PageRequest | None = None,
    ) -> list[Room]:
        async with self._db.session() as db:
            result = await db.execute(_select_rooms(sort, page))
            return list(result.scalars().all())

    async def find_all_with_count(
        self,
        sort: Sequence[SortKey] = (),
        page: PageRequest | None = None,
    ) -> tuple[list[Room], int]:
        async with self._db.session() as db:
            if self._db.engine.dialect.name == "postgresql":
                await db.connection(
                    execution_options={"isolation_level": "REPEATABLE READ"},
                )
            result = await db.execute(_select_rooms(sort, page))
            rooms = list(result.scalars().all())
            total = (await db.execute(_COUNT_ROOMS)).scalar_one()
            return rooms, total

    async def count(self) -> int:
        async with self._db.session() as db:
            result = await db.execute(_COUNT_ROOMS)
            return result.scalar_one()

    async def find_one(self, room_pk: RoomPk) -> Room | None:
        async with self._db.session() as db:
            return await db.get(Room, room_pk)

    async def save(self, room: RoomLike) -> Room:
        async with self._db.session() as db:
            if room.id is None:
                row = Room()
                db.add(row)
            else:
                row = await db.get(Room, room.id)
                if row is None:
                    raise ResourceNotFoundError("Room", str(room.id))
            row.room_id = room.room_id
            row.room_name = room.room_name
            row.room_capacity = room.room_capacity
            await db.commit()
            logger.debug("Room saved", extra={"room_pk": row.id})
            return row

    async def delete(self, room_pk: RoomPk) -> None:
        async with self._db.session() as db:
            result = await db.execute(delete(Room).where(Room.id == room_pk))
            await db.commit()
            if result.rowcount == 0:
                logger.debug("Room already absent", extra={"room_pk": room_pk})


_COUNT_ROOMS = select(func.count()).select_from(Room)


def _select_rooms(sort: Sequence[SortKey], page: PageRequest | None):
    query = select(Room).order_by(*_order_by(sort))
    if page is not None:
        query = query.limit(page.size).offset(page.offset)
    return query


def _order_by(sort: Sequence[SortKey]) -> list:
    """Translate SortKeys to ORDER BY clauses, appending id as tie-breaker."""
    clauses = []
    for key in sort:
        column = getattr(Room, key.field.attribute)
        clauses.append(
            column.desc() if key.direction is SortDirection.DESC else column.asc(),
        )
    if not any(key.field is RoomField.ID for key in sort):
        clauses.append(Room.id.asc())
    return clauses
