"""Pydantic models for tool parameters."""

from __future__ import annotations

from pydantic import BaseModel, Field


class SelectionConfig(BaseModel):
    """Validated parameters for a per-company top-K selection."""

    top_k: int = Field(default=5, ge=1)
    min_score: float = 0.0
    strategy: str = "sort"


class ScoreFilterConfig(BaseModel):
    """Validated parameters for the flat score filter."""

    min_score: float = 75.0
    bullets_per_company: int = Field(default=5, ge=1)
