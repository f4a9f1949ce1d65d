"""Taxonomy Terms — pure helpers for term records and term hierarchies."""

from app.core.repository_protocols import TermLike


def format_term(term: TermLike, meta: dict[str, list[str | None]]) -> dict:
    return {
        "id": term.term_id,
        "name": term.name,
        "slug": term.slug,
        "count": term.count,
        "meta": meta,
    }


def collect_term_ids(terms: list[TermLike], term_id: int, include_children: bool) -> list[int]:
    """term_id plus, optionally, every descendant. Empty when term_id is not in terms."""
    known = {t.term_id for t in terms}
    if term_id not in known:
        return []
    if not include_children:
        return [term_id]

    children: dict[int, list[int]] = {}
    for term in terms:
        children.setdefault(term.parent, []).append(term.term_id)

    collected: list[int] = []
    pending = [term_id]
    while pending:
        current = pending.pop()
        if current in collected:
            continue
        collected.append(current)
        pending.extend(children.get(current, []))
    return collected
