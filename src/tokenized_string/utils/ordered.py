"""Ordered-collection helpers.

`removing_duplicates` keeps the LAST occurrence of each value, not the first:

    removing_duplicates(["a", "b", "a"]) == ["b", "a"]

Only `==` is used, so the items do not need to be hashable.
"""

from __future__ import annotations
from typing import Callable, Dict, Iterable, List, MutableSequence, TypeVar

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")


def removing_duplicates(items: Iterable[T]) -> List[T]:
    """Return a new list with only the last occurrence of each value, order preserved."""
    kept: List[T] = []
    for item in reversed(list(items)):
        if item not in kept:
            kept.append(item)
    kept.reverse()
    return kept


def remove_duplicates(items: MutableSequence[T]) -> None:
    """In-place variant of `removing_duplicates`."""
    # scan from the end; drop any item that occurs again further right
    i = len(items) - 1
    while i >= 0:
        if any(items[j] == items[i] for j in range(i + 1, len(items))):
            del items[i]
        i -= 1


def index_by(items: Iterable[V], key: Callable[[V], K]) -> Dict[K, V]:
    """Map `key(item) -> item`. Later items win on key collisions."""
    out: Dict[K, V] = {}
    for item in items:
        out[key(item)] = item
    return out


def map_to(items: Iterable[K], value: Callable[[K], V]) -> Dict[K, V]:
    """Map `item -> value(item)`."""
    return {item: value(item) for item in items}
