"""Boundary Protocols: contracts between the router and the record store.

Invariants:
    - Routes depend on ItemRepository, never on SqlItemStore directly
    - get_by_id returns None for "not found", which is distinct from failure
    - update_by_id / delete_by_id return rows affected (0 or 1)
    - Every failure surfaces as core.errors.DatabaseError

Design Decisions:
    - Protocol over ABC: structural subtyping, so test doubles need no inheritance
    - Async methods: implementations do IO on the event loop
"""

from typing import Protocol

from items_api.core.domain_types import ItemId


class ItemRepository(Protocol):
    """Contract for item persistence, implemented by infrastructure/item_store.py."""
    async def list_all(self) -> list[dict]: ...
    async def get_by_id(self, item_id: ItemId) -> dict | None: ...
    async def insert(self, name: str) -> ItemId: ...
    async def update_by_id(self, item_id: ItemId, name: str) -> int: ...
    async def delete_by_id(self, item_id: ItemId) -> int: ...
