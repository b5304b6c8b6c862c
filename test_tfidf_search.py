"""
Tests for TF-IDF scoring and ranking
"""
import math

import pytest

from DocSeeker.errors import QueryEncodingError
from DocSeeker.tfidf_search import TFIDFSearchEngine, decode_query, idf, rank, search_query, tf


@pytest.fixture
def index():
    return {
        "a.xhtml": {"FOO": 3},
        "b.xhtml": {"FOO": 1, "BAR": 3},
        "c.xhtml": {"BAZ": 2},
    }


def test_tf():
    assert tf("FOO", {"FOO": 1, "BAR": 3}) == 0.25
    assert tf("QUX", {"FOO": 1, "BAR": 3}) == 0.0


def test_tf_of_empty_document_is_zero():
    assert tf("FOO", {}) == 0.0
    assert tf("", {}) == 0.0


def test_idf(index):
    assert idf("FOO", index) == pytest.approx(math.log10(3 / 2))
    assert idf("BAZ", index) == pytest.approx(math.log10(3))


def test_idf_of_unseen_term_is_log_n(index):
    assert idf("NOWHERE", index) == pytest.approx(math.log10(len(index)))


def test_idf_of_term_in_every_document_is_zero():
    assert idf("FOO", {"a": {"FOO": 1}, "b": {"FOO": 2}}) == 0.0


def test_idf_of_empty_index_is_zero():
    assert idf("FOO", {}) == 0.0


def test_two_document_scenario():
    """A document made only of the query term ranks at or above one where it is rare."""
    index = {"b": {"FOO": 1, "BAR": 3}, "a": {"FOO": 3}}

    results = search_query("foo", index)

    assert [path for path, _ in results] == ["a", "b"]
    scores = dict(results)
    assert scores["a"] >= scores["b"]


def test_ranking_order_and_scores(index):
    results = search_query("foo", index)

    assert [path for path, _ in results] == ["a.xhtml", "b.xhtml", "c.xhtml"]
    foo_idf = math.log10(3 / 2)
    assert results[0][1] == pytest.approx(1.0 * foo_idf)
    assert results[1][1] == pytest.approx(0.25 * foo_idf)
    assert results[2][1] == 0.0


def test_every_document_is_returned(index):
    results = search_query("nothing matches", index)

    assert len(results) == len(index)
    assert all(score == 0.0 for _, score in results)


def test_equal_scores_are_ordered_by_path():
    index = {"z": {"FOO": 1}, "m": {"FOO": 1}, "a": {"FOO": 1}, "q": {"BAR": 1}}

    results = search_query("foo", index)

    assert [path for path, _ in results] == ["a", "m", "z", "q"]


def test_query_is_tokenized_like_documents(index):
    assert search_query("FOO", index) == search_query("  foo ", index)


def test_repeated_query_tokens_add_up(index):
    single = dict(rank(["FOO"], index))
    double = dict(rank(["FOO", "FOO"], index))

    for path in index:
        assert double[path] == pytest.approx(2 * single[path])


def test_search_is_deterministic(index):
    assert search_query("foo baz", index) == search_query("foo baz", index)


def test_search_does_not_modify_index(index):
    before = {path: dict(term_freq) for path, term_freq in index.items()}
    search_query("foo bar baz qux", index)
    assert index == before


def test_empty_query_and_empty_index(index):
    assert search_query("", index) == [("a.xhtml", 0.0), ("b.xhtml", 0.0), ("c.xhtml", 0.0)]
    assert search_query("foo", {}) == []


def test_engine_top_k(index):
    engine = TFIDFSearchEngine(index)

    assert len(engine) == 3
    assert engine.search("foo", top_k=1) == search_query("foo", index)[:1]
    assert len(engine.search("foo")) == 3


def test_decode_query():
    assert decode_query("glClear".encode("utf-8")) == "glClear"
    assert decode_query("čeština".encode("utf-8")) == "čeština"

    with pytest.raises(QueryEncodingError):
        decode_query(b"\xff\xfe")
