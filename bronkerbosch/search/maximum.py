from __future__ import annotations

from collections.abc import Hashable, Iterable
from typing import TypeVar

T = TypeVar("T", bound=Hashable)


def maximum_cliques(maximal: Iterable[frozenset[T]]) -> list[frozenset[T]]:
    """Maximal cliques of the largest cardinality present (empty for empty input)."""
    cliques = list(maximal)
    largest = 0
    for clique in cliques:
        if len(clique) > largest:
            largest = len(clique)
    return [clique for clique in cliques if len(clique) == largest and largest > 0]
