"""Full-sort selection: group, stable sort descending, truncate."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from bulletrank.records import group_of, score_of
from bulletrank.strategies.base import BaseStrategy, Groups, register_strategy


@register_strategy
class FullSortStrategy(BaseStrategy):
    name = "sort"
    description = "Sort each company's bullets by score and keep the first K (stable on ties)"

    def _select(self, records: Iterable[Any], top_k: int, min_score: float) -> Groups:
        scored: dict[str, list[tuple[float, Any]]] = {}
        for i, record in enumerate(records):
            score = score_of(record, i)
            members = scored.setdefault(group_of(record), [])
            if score >= min_score:
                members.append((score, record))

        result: Groups = {}
        for company, members in scored.items():
            members.sort(key=lambda m: m[0], reverse=True)
            result[company] = [record for _, record in members[:top_k]]
        return result
