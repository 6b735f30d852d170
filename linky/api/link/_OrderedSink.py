"""Reordering buffer for out-of-order results."""

import heapq
from collections.abc import Iterator
from typing import Any


class _OrderedSink:
    """Buffers ``(index, value)`` pairs and releases them in index order.

    Values are released as soon as every lower index has been released, so
    only the out-of-order tail is ever buffered.
    """

    def __init__(self, start: int = 0):
        self._heap: list[tuple[int, Any]] = []
        self._next = start

    def __len__(self) -> int:
        return len(self._heap)

    def push(self, index: int, value: Any) -> None:
        if index < self._next:
            raise ValueError(f"Index {index} was already released")
        heapq.heappush(self._heap, (index, value))

    def drain(self) -> Iterator[Any]:
        """Yield the contiguous in-order prefix that is complete."""
        while self._heap and self._heap[0][0] == self._next:
            _, value = heapq.heappop(self._heap)
            self._next += 1
            yield value
