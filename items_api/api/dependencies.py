"""FastAPI dependencies.

The store is built once in the app lifespan (main.py) and kept on app.state;
tests replace it through app.dependency_overrides[get_item_store].
"""

from fastapi import Request

from items_api.core.repository_protocols import ItemRepository


def get_item_store(request: Request) -> ItemRepository:
    """FastAPI dependency for the record store."""
    store = getattr(request.app.state, "item_store", None)
    if store is None:
        raise RuntimeError("Item store not initialized")
    return store
