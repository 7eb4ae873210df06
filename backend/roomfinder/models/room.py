"""Room ORM: persists the single bookable-space entity.

Invariants:
    - id is a server-generated integer primary key, never written by callers
    - room_name is non-nullable
    - room_id and room_capacity are optional

Design Decisions:
    - BigInteger ids with an Integer variant on SQLite so autoincrement works in tests
"""

from sqlalchemy import BigInteger, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from roomfinder.db.base import Base


_PK_TYPE = BigInteger().with_variant(Integer, "sqlite")


class Room(Base):
    """Room entity: a bookable space with a business id, name, and capacity."""
    __tablename__ = "room"

    id: Mapped[int] = mapped_column(
        _PK_TYPE, primary_key=True, autoincrement=True,
    )
    room_id: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    room_name: Mapped[str] = mapped_column(String(255), nullable=False)
    room_capacity: Mapped[int | None] = mapped_column(Integer, nullable=True)

    def __repr__(self) -> str:
        return (
            f"Room(id={self.id!r}, room_id={self.room_id!r}, "
            f"room_name={self.room_name!r}, room_capacity={self.room_capacity!r})"
        )
