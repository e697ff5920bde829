"""Bounded min-heap selection: O(K) memory per company."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from bulletrank.heap import MinHeap
from bulletrank.records import group_of, score_of
from bulletrank.strategies.base import BaseStrategy, Groups, register_strategy


@register_strategy
class BoundedHeapStrategy(BaseStrategy):
    name = "heap"
    description = "Stream bullets through a size-K min-heap per company, evicting the lowest score"

    def _select(self, records: Iterable[Any], top_k: int, min_score: float) -> Groups:
        heaps: dict[str, MinHeap] = {}
        for i, record in enumerate(records):
            score = score_of(record, i)
            company = group_of(record)
            heap = heaps.get(company)
            if heap is None:
                heap = heaps[company] = MinHeap()
            if score < min_score:
                continue
            heap.insert(record, i)
            if heap.size() > top_k:
                heap.extract_min()

        result: Groups = {}
        for company, heap in heaps.items():
            drained = []
            while heap.size() > 0:
                drained.append(heap.extract_min())
            # extraction order is ascending
            drained.sort(key=score_of, reverse=True)
            result[company] = drained
        return result
