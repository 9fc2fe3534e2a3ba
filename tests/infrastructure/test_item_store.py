"""SqlItemStore against a real SQLite file.

Invariants:
    - create_schema is idempotent
    - ids strictly increase and are never reused
    - get_by_id -> None when absent; update/delete -> rows affected (0 or 1)
    - Driver failures surface as DatabaseError tagged with the operation
"""

import pytest
from sqlalchemy import text

from items_api.core.domain_types import MAX_ITEM_ID
from items_api.core.errors import DatabaseError
from items_api.infrastructure.database import DatabaseSessionManager
from items_api.infrastructure.item_store import SqlItemStore


async def test_create_schema_is_idempotent(item_store):
    await item_store.create_schema()
    await item_store.create_schema()
    assert await item_store.list_all() == []


async def test_create_schema_keeps_existing_rows(item_store):
    await item_store.insert("pen")
    await item_store.create_schema()
    assert await item_store.list_all() == [{"id": 1, "name": "pen"}]


async def test_table_uses_autoincrement(db_manager, item_store):
    async with db_manager.engine.connect() as conn:
        ddl = (await conn.execute(
            text("SELECT sql FROM sqlite_master WHERE name = 'items'"),
        )).scalar_one()
    assert "AUTOINCREMENT" in ddl.upper()
    assert "NOT NULL" in ddl.upper()


async def test_insert_assigns_increasing_ids(item_store):
    ids = [await item_store.insert(name) for name in ("a", "b", "c")]
    assert ids == [1, 2, 3]


async def test_insert_after_delete_does_not_reuse_id(item_store):
    await item_store.insert("a")
    last = await item_store.insert("b")
    await item_store.delete_by_id(last)
    assert await item_store.insert("c") == last + 1


async def test_get_by_id_returns_record_or_none(item_store):
    item_id = await item_store.insert("pen")
    assert await item_store.get_by_id(item_id) == {"id": item_id, "name": "pen"}
    assert await item_store.get_by_id(item_id + 1) is None


async def test_update_by_id_reports_rows_affected(item_store):
    item_id = await item_store.insert("pen")
    assert await item_store.update_by_id(item_id, "pencil") == 1
    assert await item_store.get_by_id(item_id) == {"id": item_id, "name": "pencil"}
    assert await item_store.update_by_id(999, "nothing") == 0


async def test_delete_by_id_reports_rows_affected(item_store):
    item_id = await item_store.insert("pen")
    assert await item_store.delete_by_id(item_id) == 1
    assert await item_store.delete_by_id(item_id) == 0
    assert await item_store.get_by_id(item_id) is None


async def test_list_all_is_ordered_by_id(item_store):
    for name in ("z", "y", "x"):
        await item_store.insert(name)
    assert [row["name"] for row in await item_store.list_all()] == ["z", "y", "x"]


async def test_out_of_range_ids_are_absent(item_store):
    too_big = MAX_ITEM_ID + 1
    assert await item_store.get_by_id(too_big) is None
    assert await item_store.update_by_id(too_big, "x") == 0
    assert await item_store.delete_by_id(too_big) == 0


async def test_null_name_violates_constraint(item_store):
    with pytest.raises(DatabaseError) as exc_info:
        await item_store.insert(None)
    assert exc_info.value.operation == "insert"
    assert exc_info.value.reason == "Integrity constraint violated"
    assert await item_store.list_all() == []


@pytest.mark.parametrize("operation,args", [
    ("list_all", ()),
    ("get_by_id", (1,)),
    ("insert", ("pen",)),
    ("update_by_id", (1, "pen")),
    ("delete_by_id", (1,)),
])
async def test_missing_table_raises_database_error(
    db_manager, item_store, operation, args,
):
    async with db_manager.engine.begin() as conn:
        await conn.execute(text("DROP TABLE items"))

    with pytest.raises(DatabaseError) as exc_info:
        await getattr(item_store, operation)(*args)
    assert exc_info.value.operation == operation
    assert exc_info.value.http_status == 500


async def test_unopenable_database_fails_schema_bootstrap(tmp_path):
    manager = DatabaseSessionManager(
        f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'dir' / 'items.db'}",
    )
    try:
        with pytest.raises(DatabaseError) as exc_info:
            await SqlItemStore(manager).create_schema()
        assert exc_info.value.operation == "create_schema"
    finally:
        await manager.dispose()
