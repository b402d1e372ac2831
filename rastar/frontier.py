"""
Open list for the A* search.
"""

import heapq
from typing import List, NamedTuple

from .errors import FrontierEmpty


class CellRecord(NamedTuple):
    """Frontier entry. Field order gives the heap ordering."""
    total_cost: float
    cell: int


class Frontier:
    """
    Binary-heap open list keyed by total estimated cost.

    The same cell may be present several times with different costs; stale
    entries are left in place and filtered by the caller when popped.
    Entries with equal cost pop in ascending cell-index order.
    """

    def __init__(self):
        self._heap: List[CellRecord] = []

    def insert(self, cell: int, total_cost: float):
        heapq.heappush(self._heap, CellRecord(total_cost, cell))

    def pop_min(self) -> CellRecord:
        """
        Remove and return the entry with the smallest total cost.

        Raises:
            FrontierEmpty: If the frontier has no entries
        """
        if not self._heap:
            raise FrontierEmpty("pop_min() on empty frontier")
        return heapq.heappop(self._heap)

    def peek(self) -> CellRecord:
        if not self._heap:
            raise FrontierEmpty("peek() on empty frontier")
        return self._heap[0]

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
