"""Identifier generators."""

import uuid
from typing import Protocol


class IdGenerator(Protocol):
    def new_id(self) -> str:
        """Return a fresh identifier."""
        ...


class UuidIdGenerator:
    """Random UUID4 identifiers, the production default."""

    def new_id(self) -> str:
        return str(uuid.uuid4())


class SequentialIdGenerator:
    """Deterministic identifiers (`<prefix>-1`, `<prefix>-2`, ...)."""

    def __init__(self, prefix: str = "id"):
        self.prefix = prefix
        self._counter = 0

    def new_id(self) -> str:
        self._counter += 1
        return f"{self.prefix}-{self._counter}"
