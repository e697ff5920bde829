"""Resume payload tools: ID assignment, deletion and score filtering.

A payload looks like ``{"data": {"bullets": [...], ...}, ...}``. Every tool
returns a new payload; keys other than ``data.bullets`` are carried over as-is.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable, Mapping
from typing import Any

from bulletrank.errors import MalformedPayloadError
from bulletrank.records import GROUP_FIELD, get_field, score_of
from bulletrank.select import select_top_k

logger = logging.getLogger(__name__)

ID_FIELD = "id"


def get_bullets(resume_data: Any) -> list[Any]:
    """Return ``resume_data["data"]["bullets"]`` or raise MalformedPayloadError."""
    if not isinstance(resume_data, Mapping):
        raise MalformedPayloadError("resume data must be an object")
    data = resume_data.get("data")
    if not isinstance(data, Mapping):
        raise MalformedPayloadError("resume data has no 'data' object")
    bullets = data.get("bullets")
    if not isinstance(bullets, list):
        raise MalformedPayloadError("resume data has no 'data.bullets' list")
    return bullets


def with_bullets(resume_data: Mapping[str, Any], bullets: list[Any]) -> dict[str, Any]:
    return {**resume_data, "data": {**resume_data["data"], "bullets": bullets}}


def assign_bullet_ids(resume_data: Any) -> dict[str, Any]:
    """Label bullets A1, A2, B1, ... by company order of first appearance."""
    bullets = get_bullets(resume_data)
    letters: dict[Any, str] = {}
    counts: dict[Any, int] = {}
    labelled = []
    for i, bullet in enumerate(bullets):
        if not isinstance(bullet, Mapping):
            raise MalformedPayloadError(f"bullet #{i} must be an object")
        company = bullet.get(GROUP_FIELD)
        if company not in letters:
            letters[company] = chr(65 + len(letters))
        counts[company] = counts.get(company, 0) + 1
        labelled.append({**bullet, ID_FIELD: f"{letters[company]}{counts[company]}"})
    return with_bullets(resume_data, labelled)


def delete_bullets_by_id(resume_data: Any, bullet_ids: Iterable[str]) -> dict[str, Any]:
    """Drop bullets whose id is listed in ``bullet_ids``."""
    bullets = get_bullets(resume_data)
    doomed = set(bullet_ids)
    kept = [b for b in bullets if get_field(b, ID_FIELD) not in doomed]
    logger.debug("Deleted %d of %d bullets", len(bullets) - len(kept), len(bullets))
    return with_bullets(resume_data, kept)


def filter_bullets_by_score(
    resume_data: Any,
    min_score: float = 75,
    bullets_per_company: int = 5,
) -> dict[str, Any]:
    """Keep bullets scoring at least ``min_score``, at most ``bullets_per_company`` each.

    The surviving bullets come back as one flat list, highest score first;
    equal scores keep their original order.
    """
    bullets = get_bullets(resume_data)
    groups = select_top_k(bullets, top_k=bullets_per_company, min_score=min_score, strategy="sort")
    # one count per selected occurrence; a bullet object may repeat in the list
    kept = Counter(id(b) for members in groups.values() for b in members)
    flat = []
    for bullet in sorted(bullets, key=score_of, reverse=True):
        if kept[id(bullet)] > 0:
            kept[id(bullet)] -= 1
            flat.append(bullet)
    return with_bullets(resume_data, flat)


def filter_bullets_by_company(
    resume_data: Any,
    top_k: int = 5,
    min_score: float = 0,
    strategy: str = "sort",
) -> dict[str, list[Any]]:
    """Group the payload's bullets by company, keeping the ``top_k`` best of each."""
    return select_top_k(get_bullets(resume_data), top_k=top_k, min_score=min_score, strategy=strategy)
