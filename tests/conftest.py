import pytest


@pytest.fixture
def bullets():
    return [
        {"company": "Acme", "text": "Shipped the billing rewrite", "relevance_score": 90},
        {"company": "Acme", "text": "Ran the on-call rotation", "relevance_score": 50},
        {"company": "Acme", "text": "Cut p99 latency by 40%", "relevance_score": 70},
        {"company": "Globex", "text": "Migrated CI to containers", "relevance_score": 40},
    ]


@pytest.fixture
def resume_data(bullets):
    return {
        "job": {"number": 33, "title": "Backend Engineer"},
        "data": {"candidate": "J. Doe", "bullets": bullets},
    }
