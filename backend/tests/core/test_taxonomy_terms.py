"""Taxonomy Terms — tests for term records and descendant collection."""

from types import SimpleNamespace

from app.core.taxonomy_terms import collect_term_ids, format_term


def _term(term_id, parent=0, name="t", count=0):
    return SimpleNamespace(
        term_id=term_id, taxonomy="category", name=name,
        slug=name.lower(), parent=parent, count=count,
    )


TERMS = [_term(1), _term(2, parent=1), _term(3, parent=2), _term(4)]


def test_format_term():
    record = format_term(_term(1, name="News", count=0), {"color": ["red"]})
    assert record == {"id": 1, "name": "News", "slug": "news", "count": 0, "meta": {"color": ["red"]}}


def test_collect_includes_descendants():
    assert sorted(collect_term_ids(TERMS, 1, include_children=True)) == [1, 2, 3]


def test_collect_without_children():
    assert collect_term_ids(TERMS, 1, include_children=False) == [1]


def test_collect_unknown_term_is_empty():
    assert collect_term_ids(TERMS, 99, include_children=True) == []
