"""Stateful containers answering product and index queries."""

from __future__ import annotations

import heapq


class ProductOfNumbers:
    """Stream of integers answering the product of the last ``k`` added."""

    def __init__(self) -> None:
        self._prefix = [1]

    def add(self, num: int) -> None:
        """Append ``num`` to the stream."""
        if num == 0:
            self._prefix = [1]
        else:
            self._prefix.append(self._prefix[-1] * num)

    def get_product(self, k: int) -> int:
        """Return the product of the last ``k`` numbers added."""
        count = len(self._prefix) - 1
        if k > count:
            return 0
        return self._prefix[count] // self._prefix[count - k]


class NumberContainers:
    """Maps indices to numbers and finds the smallest index holding a number."""

    def __init__(self) -> None:
        self._number_at: dict[int, int] = {}
        self._indices: dict[int, list[int]] = {}

    def change(self, index: int, number: int) -> None:
        """Store ``number`` at ``index``, replacing what was there."""
        self._number_at[index] = number
        heapq.heappush(self._indices.setdefault(number, []), index)

    def find(self, number: int) -> int:
        """Return the smallest index holding ``number``, or -1 if none does."""
        heap = self._indices.get(number)
        if not heap:
            return -1
        while heap and self._number_at.get(heap[0]) != number:
            heapq.heappop(heap)
        return heap[0] if heap else -1