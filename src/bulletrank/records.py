"""Field access for opaque bullet records.

Records are whatever the caller hands us: usually dicts decoded from JSON,
sometimes objects exposing attributes. Only two fields are ever read.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from numbers import Real
from typing import Any

from bulletrank.errors import InvalidParameterError, MalformedRecordError

SCORE_FIELD = "relevance_score"
GROUP_FIELD = "company"
UNKNOWN_GROUP = "Unknown"

_MISSING = object()


def get_field(record: Any, name: str, default: Any = None) -> Any:
    """Read ``name`` from a mapping or an attribute-bearing object."""
    if isinstance(record, Mapping):
        return record.get(name, default)
    return getattr(record, name, default)


def score_of(record: Any, index: int | None = None) -> float:
    """Return the record's relevance score, failing fast when it is unusable."""
    value = get_field(record, SCORE_FIELD, _MISSING)
    if value is _MISSING or value is None:
        raise MalformedRecordError(f"missing {SCORE_FIELD!r}", index)
    if isinstance(value, bool) or not isinstance(value, Real):
        raise MalformedRecordError(
            f"{SCORE_FIELD!r} must be a number, got {type(value).__name__}", index,
        )
    if math.isnan(value):
        raise MalformedRecordError(f"{SCORE_FIELD!r} is NaN", index)
    return value


def group_of(record: Any) -> str:
    """Return the record's group key; missing or empty companies fall into ``Unknown``."""
    return get_field(record, GROUP_FIELD) or UNKNOWN_GROUP


def check_params(top_k: Any, min_score: Any) -> None:
    if isinstance(top_k, bool) or not isinstance(top_k, int):
        raise InvalidParameterError(f"top_k must be an integer, got {top_k!r}")
    if isinstance(min_score, bool) or not isinstance(min_score, Real):
        raise InvalidParameterError(f"min_score must be a number, got {min_score!r}")
    if math.isnan(min_score):
        raise InvalidParameterError("min_score must not be NaN")
