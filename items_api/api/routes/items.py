"""Item Routes: the five CRUD operations over /items.

Invariants:
    - Route table is evaluated in registration order; first match wins
    - {item_id:item_id} only matches ASCII digits; anything else is a routing miss
    - Over-long ids convert to an out-of-range value and answer "Item not found"
    - Bodies are read raw and parsed by core.parse_item_body, so a bad body
      never reaches the store
    - Exactly one store call per well-formed request
    - Errors are raised as ItemsApiError and rendered by api/error_handlers.py
"""

import logging

from fastapi import APIRouter, Depends, Request, status
from starlette.convertors import register_url_convertor

from items_api.api.convertors import ItemIdConvertor
from items_api.api.dependencies import get_item_store
from items_api.core.domain_types import ItemId
from items_api.core.errors import ItemNotFoundError
from items_api.core.parse_item_body import parse_item_name
from items_api.core.repository_protocols import ItemRepository
from items_api.schemas.item import ItemResponse, MessageResponse

logger = logging.getLogger(__name__)

# Must be registered before the route paths below are compiled
register_url_convertor("item_id", ItemIdConvertor())
router = APIRouter(prefix="/items", tags=["items"])


@router.get("", response_model=list[ItemResponse])
async def list_items(store: ItemRepository = Depends(get_item_store)):
    """List every item."""
    return await store.list_all()


@router.get("/{item_id:item_id}", response_model=ItemResponse)
async def get_item(
    item_id: int, store: ItemRepository = Depends(get_item_store),
):
    """Get one item or 404."""
    item = await store.get_by_id(ItemId(item_id))
    if item is None:
        raise ItemNotFoundError(item_id)
    return item


@router.post(
    "", response_model=ItemResponse, status_code=status.HTTP_201_CREATED,
)
async def create_item(
    request: Request, store: ItemRepository = Depends(get_item_store),
):
    """Create an item; the store assigns the id."""
    name = parse_item_name(await request.body())
    item_id = await store.insert(name)
    logger.info(f"Created item {item_id}", extra={"item_id": item_id})
    return {"id": item_id, "name": name}


@router.put("/{item_id:item_id}", response_model=ItemResponse)
async def update_item(
    item_id: int,
    request: Request,
    store: ItemRepository = Depends(get_item_store),
):
    """Rename an item. The id never changes."""
    name = parse_item_name(await request.body())
    if await store.update_by_id(ItemId(item_id), name) == 0:
        raise ItemNotFoundError(item_id)
    logger.info(f"Updated item {item_id}", extra={"item_id": item_id})
    return {"id": item_id, "name": name}


@router.delete("/{item_id:item_id}", response_model=MessageResponse)
async def delete_item(
    item_id: int, store: ItemRepository = Depends(get_item_store),
):
    """Delete an item. Deleting twice is a 404, not an error."""
    if await store.delete_by_id(ItemId(item_id)) == 0:
        raise ItemNotFoundError(item_id)
    logger.info(f"Deleted item {item_id}", extra={"item_id": item_id})
    return {"message": "Item deleted"}
