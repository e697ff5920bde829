"""Base strategy ABC and registry."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any

from bulletrank.records import check_params, group_of, score_of

_REGISTRY: dict[str, type[BaseStrategy]] = {}

Groups = dict[str, list[Any]]


class BaseStrategy(ABC):
    """Abstract base for per-company top-K selection strategies.

    Every strategy returns a fresh ``{company: [record, ...]}`` mapping with at
    most ``top_k`` records per company, highest score first. Companies whose
    records all fall below ``min_score`` still appear, mapped to ``[]``.
    """

    name: str = "base"
    description: str = ""

    def select(self, records: Iterable[Any], top_k: int = 5, min_score: float = 0) -> Groups:
        """Keep the ``top_k`` best records of each company scoring at least ``min_score``."""
        check_params(top_k, min_score)
        if top_k <= 0:
            return empty_groups(records)
        return self._select(records, top_k, min_score)

    @abstractmethod
    def _select(self, records: Iterable[Any], top_k: int, min_score: float) -> Groups:
        ...


def empty_groups(records: Iterable[Any]) -> Groups:
    """Map every company seen to an empty list, still validating each record."""
    groups: Groups = {}
    for i, record in enumerate(records):
        score_of(record, i)
        groups.setdefault(group_of(record), [])
    return groups


def register_strategy(cls: type[BaseStrategy]) -> type[BaseStrategy]:
    """Class decorator adding a strategy to the registry under ``cls.name``."""
    existing = _REGISTRY.get(cls.name)
    if existing is not None and existing is not cls:
        raise ValueError(f"Strategy name {cls.name!r} is already taken by {existing.__name__}")
    _REGISTRY[cls.name] = cls
    return cls


def get_strategy(name: str) -> BaseStrategy:
    """Return a fresh instance of the strategy registered as ``name``."""
    try:
        strategy_cls = _REGISTRY[name]
    except KeyError:
        raise KeyError(f"Unknown strategy: {name!r}. Available: {sorted(_REGISTRY)}") from None
    return strategy_cls()


def list_strategies() -> dict[str, type[BaseStrategy]]:
    """Registered strategies by name, in name order."""
    return {name: _REGISTRY[name] for name in sorted(_REGISTRY)}
