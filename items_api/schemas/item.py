"""Item Schemas: wire shapes for item requests and responses.

Invariants:
    - ItemWrite.name is a non-empty string; other body keys are ignored
    - ItemResponse is the record shape {"id": int, "name": str}
"""

from pydantic import BaseModel, Field


class ItemWrite(BaseModel):
    """CREATE/UPDATE body. Presence check only, no trimming."""
    name: str = Field(min_length=1)


class ItemResponse(BaseModel):
    """Public-facing item record."""
    id: int
    name: str


class MessageResponse(BaseModel):
    message: str
