"""
Lookup key generators.

One generator instance is shared by the city and hotel stages so that
lookup keys never collide between the two.
"""

import uuid
from abc import ABC, abstractmethod


class LookupKeyGenerator(ABC):
    """Hands out lookup record keys that are unique for the whole run."""

    def __init__(self):
        self.issued = 0

    def next(self) -> str:
        key = self._next_key()
        self.issued += 1
        return key

    @abstractmethod
    def _next_key(self) -> str:
        pass


class SequentialKeys(LookupKeyGenerator):
    """Decimal counter keys: "1", "2", "3", ..."""

    def __init__(self, start: int = 0):
        super().__init__()
        self._counter = start

    def _next_key(self) -> str:
        self._counter += 1
        return str(self._counter)


class UuidKeys(LookupKeyGenerator):
    """Random UUID4 keys."""

    def _next_key(self) -> str:
        return str(uuid.uuid4())


def make_key_generator(kind: str) -> LookupKeyGenerator:
    """Build a generator by name ("sequential" or "uuid")."""
    if kind == "sequential":
        return SequentialKeys()
    if kind == "uuid":
        return UuidKeys()
    raise ValueError(f"Unknown lookup key kind: '{kind}'")
