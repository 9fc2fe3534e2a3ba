"""Item Store: durable CRUD over the items table.

Invariants:
    - One statement per operation, committed on its own (no multi-statement transactions)
    - get_by_id returns None when absent; update/delete return rows affected
    - Ids outside the column range short-circuit to "not found" without a query
    - Failures leave this module only as DatabaseError (raised by DatabaseSessionManager)
"""

import logging

from sqlalchemy import delete, select, update

from items_api.core.domain_types import ItemId, StoreOperation, is_storable_id
from items_api.infrastructure.database import DatabaseSessionManager
from items_api.models.item import Item

logger = logging.getLogger(__name__)


class SqlItemStore:
    """ItemRepository backed by SQLAlchemy (aiosqlite by default)."""

    def __init__(self, db: DatabaseSessionManager):
        self._db = db

    async def create_schema(self) -> None:
        await self._db.create_schema()

    async def list_all(self) -> list[dict]:
        async with self._db.session(StoreOperation.LIST_ALL.value) as db:
            result = await db.execute(select(Item).order_by(Item.id))
            return [item.to_dict() for item in result.scalars().all()]

    async def get_by_id(self, item_id: ItemId) -> dict | None:
        if not is_storable_id(item_id):
            return None
        async with self._db.session(StoreOperation.GET_BY_ID.value) as db:
            item = await db.get(Item, item_id)
            return item.to_dict() if item else None

    async def insert(self, name: str) -> ItemId:
        async with self._db.session(StoreOperation.INSERT.value) as db:
            item = Item(name=name)
            db.add(item)
            await db.commit()
            logger.debug(f"Inserted item {item.id}", extra={"item_id": item.id})
            return ItemId(item.id)

    async def update_by_id(self, item_id: ItemId, name: str) -> int:
        if not is_storable_id(item_id):
            return 0
        stmt = (
            update(Item)
            .where(Item.id == item_id)
            .values(name=name)
            .execution_options(synchronize_session=False)
        )
        async with self._db.session(StoreOperation.UPDATE_BY_ID.value) as db:
            result = await db.execute(stmt)
            await db.commit()
            return result.rowcount

    async def delete_by_id(self, item_id: ItemId) -> int:
        if not is_storable_id(item_id):
            return 0
        stmt = (
            delete(Item)
            .where(Item.id == item_id)
            .execution_options(synchronize_session=False)
        )
        async with self._db.session(StoreOperation.DELETE_BY_ID.value) as db:
            result = await db.execute(stmt)
            await db.commit()
            return result.rowcount
