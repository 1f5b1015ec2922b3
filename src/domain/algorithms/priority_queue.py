from __future__ import annotations

import heapq
import itertools
from typing import Generic, TypeVar

T = TypeVar("T")


class PriorityQueue(Generic[T]):
    """Binary min-heap of items keyed by a numeric priority.

    There is no decrease-key: callers enqueue improved entries again and
    discard stale ones when they are dequeued. Equal priorities come out in
    insertion order.
    """

    __slots__ = ("_heap", "_counter")

    def __init__(self) -> None:
        self._heap: list[tuple[float, int, T]] = []
        self._counter = itertools.count()

    def enqueue(self, item: T, priority: float) -> None:
        heapq.heappush(self._heap, (priority, next(self._counter), item))

    def dequeue(self) -> T | None:
        if not self._heap:
            return None
        _, _, item = heapq.heappop(self._heap)
        return item

    def peek_priority(self) -> float | None:
        return self._heap[0][0] if self._heap else None

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
