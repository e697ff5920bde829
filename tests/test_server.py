"""Tests for the MCP tool server."""

import asyncio

import pytest
from pydantic import ValidationError

from bulletrank import server


def test_tools_registered():
    names = {tool.name for tool in asyncio.run(server.mcp.list_tools())}
    assert names == {
        "fetch_resume_data",
        "assign_bullet_ids",
        "delete_bullets_by_id",
        "filter_bullets_by_score",
        "filter_bullets_by_company",
    }


def test_filter_by_company_tool(resume_data):
    groups = server.filter_bullets_by_company(resume_data, top_k=2, min_score=60, strategy="heap")
    assert [b["relevance_score"] for b in groups["Acme"]] == [90, 70]
    assert groups["Globex"] == []


def test_filter_by_company_tool_rejects_zero_top_k(resume_data):
    with pytest.raises(ValidationError):
        server.filter_bullets_by_company(resume_data, top_k=0)


def test_filter_by_score_tool_rejects_zero_cap(resume_data):
    with pytest.raises(ValidationError):
        server.filter_bullets_by_score(resume_data, bullets_per_company=0)


def test_id_tools(resume_data):
    labelled = server.assign_bullet_ids(resume_data)
    pruned = server.delete_bullets_by_id(labelled, ["A1"])
    assert [b["id"] for b in pruned["data"]["bullets"]] == ["A2", "A3", "B1"]
