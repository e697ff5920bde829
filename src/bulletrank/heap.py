"""Array-backed binary min-heap keyed on relevance score."""

from __future__ import annotations

from typing import Any

from bulletrank.records import score_of


class MinHeap:
    """Min-heap of records ordered by ``relevance_score``.

    The root is always the lowest-scoring record. Each record's score is read
    once, on insert, and stored next to it. Equal scores are never reordered
    against each other, so extraction order among ties is unspecified.
    """

    def __init__(self) -> None:
        self._items: list[tuple[float, Any]] = []

    def __len__(self) -> int:
        return len(self._items)

    def size(self) -> int:
        return len(self._items)

    def peek(self) -> Any | None:
        """Return the lowest-scoring record without removing it, or None."""
        if not self._items:
            return None
        return self._items[0][1]

    def insert(self, record: Any, index: int | None = None) -> None:
        """Add a record. ``index`` only labels the error for a malformed record."""
        self._items.append((score_of(record, index), record))
        self._bubble_up(len(self._items) - 1)

    def extract_min(self) -> Any | None:
        """Remove and return the lowest-scoring record, or None when empty."""
        if not self._items:
            return None
        if len(self._items) == 1:
            return self._items.pop()[1]

        root = self._items[0]
        self._items[0] = self._items.pop()
        self._sink_down(0)
        return root[1]

    def _bubble_up(self, index: int) -> None:
        items = self._items
        element = items[index]
        while index > 0:
            parent_index = (index - 1) // 2
            parent = items[parent_index]
            if element[0] >= parent[0]:
                break
            items[parent_index] = element
            items[index] = parent
            index = parent_index

    def _sink_down(self, index: int) -> None:
        items = self._items
        length = len(items)
        element = items[index]

        while True:
            left = 2 * index + 1
            right = left + 1
            swap = None

            if left < length and items[left][0] < element[0]:
                swap = left
            if right < length:
                bound = element[0] if swap is None else items[swap][0]
                if items[right][0] < bound:
                    swap = right

            if swap is None:
                break
            items[index] = items[swap]
            items[swap] = element
            index = swap
