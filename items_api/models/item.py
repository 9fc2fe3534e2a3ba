"""Item ORM: the single persisted record type.

Invariants:
    - id is INTEGER PRIMARY KEY AUTOINCREMENT: strictly increasing, never reused
    - name is non-nullable text
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from items_api.db.base import Base


class Item(Base):
    """A named record."""
    __tablename__ = "items"
    # Emits AUTOINCREMENT so ids of deleted rows are not handed out again
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name}
