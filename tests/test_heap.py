"""Tests for the MinHeap primitive."""

import random
from types import SimpleNamespace

import pytest

from bulletrank.errors import MalformedRecordError
from bulletrank.heap import MinHeap


def _rec(score):
    return {"relevance_score": score}


def test_empty_heap_returns_none():
    heap = MinHeap()
    assert heap.size() == 0
    assert len(heap) == 0
    assert heap.peek() is None
    assert heap.extract_min() is None


def test_peek_returns_min_without_removing():
    heap = MinHeap()
    for score in (5, 1, 3):
        heap.insert(_rec(score))

    assert heap.peek() == _rec(1)
    assert heap.size() == 3


def test_single_element_roundtrip():
    heap = MinHeap()
    record = _rec(42)
    heap.insert(record)

    assert heap.extract_min() is record
    assert heap.size() == 0
    assert heap.extract_min() is None


def test_extraction_is_non_decreasing():
    rng = random.Random(7)
    scores = [rng.uniform(-50, 150) for _ in range(200)] + [10, 10, 10]
    heap = MinHeap()
    for s in scores:
        heap.insert(_rec(s))

    drained = []
    while heap.size() > 0:
        drained.append(heap.extract_min()["relevance_score"])

    assert drained == sorted(scores)


def test_interleaved_insert_and_extract():
    heap = MinHeap()
    for s in (8, 3, 9):
        heap.insert(_rec(s))
    assert heap.extract_min()["relevance_score"] == 3
    heap.insert(_rec(1))
    heap.insert(_rec(7))
    assert [heap.extract_min()["relevance_score"] for _ in range(4)] == [1, 7, 8, 9]


def test_accepts_attribute_records():
    heap = MinHeap()
    heap.insert(SimpleNamespace(relevance_score=2.5))
    heap.insert(SimpleNamespace(relevance_score=0.5))
    assert heap.peek().relevance_score == 0.5


def test_insert_rejects_record_without_score():
    heap = MinHeap()
    with pytest.raises(MalformedRecordError, match="relevance_score"):
        heap.insert({"company": "Acme"})
    assert heap.size() == 0
