"""Order-preserving set operations over vertex collections (pure functions only).

Inputs are never mutated; every call allocates a new list. Order is kept so
that traversal and trace output are reproducible across runs.
"""

from __future__ import annotations

from collections.abc import Collection, Hashable, Iterable
from typing import TypeVar

T = TypeVar("T", bound=Hashable)


def _lookup(items: Iterable[T]) -> Collection[T]:
    if isinstance(items, (set, frozenset, dict)):
        return items
    return set(items)


def union(a: Iterable[T], b: Iterable[T]) -> list[T]:
    """Elements of either collection, duplicate-free, first-seen order."""
    out: dict[T, None] = dict.fromkeys(a)
    out.update(dict.fromkeys(b))
    return list(out)


def intersection(a: Iterable[T], b: Iterable[T]) -> list[T]:
    """Elements of `a` also present in `b`, in `a` order."""
    keep = _lookup(b)
    return [x for x in a if x in keep]


def difference(a: Iterable[T], b: Iterable[T]) -> list[T]:
    """Elements of `a` absent from `b`, in `a` order."""
    drop = _lookup(b)
    return [x for x in a if x not in drop]
