"""Selection orchestration: keep the best bullets of each company."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from bulletrank.strategies import get_strategy

logger = logging.getLogger(__name__)


def select_top_k(
    records: Iterable[Any],
    top_k: int = 5,
    min_score: float = 0,
    strategy: str = "sort",
) -> dict[str, list[Any]]:
    """Group records by company and keep the ``top_k`` highest scores per company."""
    selector = get_strategy(strategy)
    groups = selector.select(records, top_k=top_k, min_score=min_score)
    logger.debug(
        "Selected %d bullets across %d companies (strategy=%s, top_k=%s, min_score=%s)",
        sum(len(v) for v in groups.values()), len(groups), strategy, top_k, min_score,
    )
    return groups
