# top_k.py
"""
top_k.py

Capacity-bounded priority queue that retains the k largest values pushed so
far. It is keyed ascending on value, so the smallest retained value (the
admission threshold) is always at the front and is the one evicted when a
larger value arrives on a full queue.
"""

import heapq
import itertools
from typing import Any, Iterator, List, Tuple


class BoundedTopSet:
    """
    Min-oriented heap of (value, payload) entries with a fixed capacity.

    Only genuine entries are stored; `filled` tells how many there are, and
    the threshold is 0 until the queue is full.
    """

    def __init__(self, capacity: int):
        if capacity < 1:
            raise ValueError(f"Capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self._heap: List[Tuple[int, int, Any]] = []
        # Insertion counter breaks ties so payloads are never compared.
        self._counter = itertools.count()

    def __len__(self) -> int:
        return len(self._heap)

    @property
    def filled(self) -> int:
        return len(self._heap)

    @property
    def is_full(self) -> bool:
        return len(self._heap) >= self.capacity

    @property
    def threshold(self) -> int:
        """
        Smallest value a candidate must beat to be admitted: the minimum held
        value once full, 0 before that.
        """
        if not self.is_full:
            return 0
        return self._heap[0][0]

    def push(self, value: int, payload: Any = None) -> bool:
        """
        Offer an entry. Below capacity it is always admitted; at capacity it is
        admitted only if `value` is strictly greater than the current minimum,
        which is then evicted.

        Returns
        -------
        bool
            Whether the queue changed.
        """
        entry = (value, next(self._counter), payload)
        if not self.is_full:
            heapq.heappush(self._heap, entry)
            return True
        if value > self._heap[0][0]:
            heapq.heapreplace(self._heap, entry)
            return True
        return False

    def peek_min(self) -> Tuple[int, Any]:
        if not self._heap:
            raise IndexError("peek_min on an empty BoundedTopSet")
        value, _, payload = self._heap[0]
        return value, payload

    def items(self) -> List[Tuple[int, Any]]:
        """
        Retained entries sorted by decreasing value.
        """
        ordered = sorted(self._heap, key=lambda e: (e[0], e[1]), reverse=True)
        return [(value, payload) for value, _, payload in ordered]

    def __iter__(self) -> Iterator[Tuple[int, Any]]:
        return iter(self.items())
