"""
In-memory join helpers used by the loaders.
"""

from typing import Callable, Dict, Hashable, Iterable, List, TypeVar

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


def index_by(records: Iterable[T], key: Callable[[T], K]) -> Dict[K, T]:
    """Index records by key. The first record wins when keys repeat."""
    index: Dict[K, T] = {}
    for record in records:
        index.setdefault(key(record), record)
    return index


def append_grouped(groups: Dict[K, List[V]], key: K, value: V) -> None:
    """Append value to the list stored under key, creating it if needed."""
    groups.setdefault(key, []).append(value)
