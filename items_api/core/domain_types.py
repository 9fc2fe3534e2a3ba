"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - ItemId wraps int; ids are store-assigned, positive, never reused
    - MAX_ITEM_ID is the largest value the SQLite INTEGER column can hold
    - StoreOperation lists the five store calls; values double as log labels
"""

from enum import Enum
from typing import NewType


# --- Identity Types ----------------------------------------------------------

ItemId = NewType("ItemId", int)

MAX_ITEM_ID = 2**63 - 1  # signed 64-bit, SQLite INTEGER upper bound


# --- Enums -------------------------------------------------------------------

class StoreOperation(str, Enum):
    """Store calls, one per routed operation."""
    LIST_ALL = "list_all"
    GET_BY_ID = "get_by_id"
    INSERT = "insert"
    UPDATE_BY_ID = "update_by_id"
    DELETE_BY_ID = "delete_by_id"


def is_storable_id(item_id: int) -> bool:
    """True if item_id fits the id column; anything else cannot exist."""
    return 0 <= item_id <= MAX_ITEM_ID
