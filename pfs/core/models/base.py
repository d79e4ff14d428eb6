"""Base models using Pydantic."""

from pydantic import BaseModel

MAX_U16 = 2**16 - 1
MAX_U64 = 2**64 - 1


class CursorPage(BaseModel):
    model_config = {"extra": "forbid"}

    hasMore: bool
    offset: int = 0
    count: int
