"""
Insertion-ordered counting multimap used for the room type distribution
and the flow table.
"""

from typing import Dict, Generic, Hashable, Iterator, List, Tuple, TypeVar

K = TypeVar("K", bound=Hashable)


class OrderedCounter(Generic[K]):
    """Counts keys, remembering the order each key was first seen."""

    def __init__(self):
        self._counts: Dict[K, int] = {}

    def add(self, key: K, amount: int = 1) -> None:
        self._counts[key] = self._counts.get(key, 0) + amount

    def __getitem__(self, key: K) -> int:
        return self._counts.get(key, 0)

    def __contains__(self, key: object) -> bool:
        return key in self._counts

    def __iter__(self) -> Iterator[K]:
        return iter(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def items(self) -> List[Tuple[K, int]]:
        """(key, count) pairs in first-seen order."""
        return list(self._counts.items())

    def total(self) -> int:
        return sum(self._counts.values())
