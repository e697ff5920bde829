"""MCP tool server exposing the resume tools over stdio."""

from __future__ import annotations

import logging
from typing import Any

from mcp.server.fastmcp import FastMCP

from bulletrank import tools
from bulletrank.models import ScoreFilterConfig, SelectionConfig
from bulletrank.providers.webhook import WebhookClient

logger = logging.getLogger(__name__)

mcp = FastMCP("resume-optimizer")


@mcp.tool()
async def fetch_resume_data(job_number: int) -> Any:
    """Fetches resume bullet points with relevance scores from the N8N workflow.

    Args:
        job_number: Job application number (e.g., 33, 34, 35)
    """
    logger.info("Fetching resume data for job %s", job_number)
    return await WebhookClient().fetch(job_number)


@mcp.tool()
def assign_bullet_ids(resume_data: dict[str, Any]) -> dict[str, Any]:
    """Assigns unique IDs (A1, A2, B1, etc.) to bullets for easy reference.

    Args:
        resume_data: Resume data from fetch_resume_data
    """
    return tools.assign_bullet_ids(resume_data)


@mcp.tool()
def delete_bullets_by_id(resume_data: dict[str, Any], bullet_ids: list[str]) -> dict[str, Any]:
    """Removes bullets by their IDs (e.g., ["A3", "B1", "C2"]).

    Args:
        resume_data: Resume data with bullets
        bullet_ids: Array of bullet IDs to delete
    """
    return tools.delete_bullets_by_id(resume_data, bullet_ids)


@mcp.tool()
def filter_bullets_by_score(
    resume_data: dict[str, Any],
    min_score: float = 75,
    bullets_per_company: int = 5,
) -> dict[str, Any]:
    """Filters bullets by minimum score and limits per company.

    Args:
        resume_data: Resume data
        min_score: Minimum score threshold
        bullets_per_company: Max bullets per company
    """
    config = ScoreFilterConfig(min_score=min_score, bullets_per_company=bullets_per_company)
    return tools.filter_bullets_by_score(resume_data, config.min_score, config.bullets_per_company)


@mcp.tool()
def filter_bullets_by_company(
    resume_data: dict[str, Any],
    top_k: int = 5,
    min_score: float = 0,
    strategy: str = "sort",
) -> dict[str, list[Any]]:
    """Groups bullets by company, keeping the top K by relevance score in each.

    Args:
        resume_data: Resume data
        top_k: Bullets to keep per company
        min_score: Minimum score threshold
        strategy: Selection strategy ("sort" or "heap")
    """
    config = SelectionConfig(top_k=top_k, min_score=min_score, strategy=strategy)
    return tools.filter_bullets_by_company(resume_data, config.top_k, config.min_score, config.strategy)


def main() -> None:
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
