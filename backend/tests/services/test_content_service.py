"""Content service — behaviour not reachable through the seeded routes.

Tests cover:
    - a taxonomy whose term lookup fails is skipped and logged; the others are still listed
    - posts_by_taxonomy returns [] when term lookup fails
"""

import logging

from app.config import get_settings
from app.core.errors import TermLookupError
from app.core.render_blocks import BlockRenderer
from app.infrastructure.sql_content_store import SqlContentStore
from app.services.content_service import ContentService


class BrokenTaxonomyStore(SqlContentStore):
    """Real store over the seeded site whose term listing fails for one taxonomy."""

    def __init__(self, db, uploads_url, broken: str):
        super().__init__(db, uploads_url)
        self._broken = broken

    async def get_terms(self, taxonomy):
        if taxonomy == self._broken:
            raise TermLookupError(taxonomy)
        return await super().get_terms(taxonomy)


def _service(db, broken):
    settings = get_settings()
    store = BrokenTaxonomyStore(db, settings.uploads_url, broken)
    return ContentService(store, BlockRenderer(), settings)


async def test_failing_taxonomy_is_skipped(test_db, seed_site, caplog):
    service = _service(test_db, broken="topic")

    with caplog.at_level(logging.WARNING, logger="app.services.content_service"):
        result = await service.taxonomies_for_type("post")

    assert sorted(result) == ["category", "post_tag"]
    assert [t["slug"] for t in result["category"]["terms"]] == ["empty", "news", "world"]
    assert any(getattr(r, "taxonomy", None) == "topic" for r in caplog.records)


async def test_failing_taxonomy_on_other_type(test_db, seed_site):
    service = _service(test_db, broken="genre")
    result = await service.taxonomies_for_type("book")
    assert sorted(result) == ["topic"]


async def test_posts_by_taxonomy_with_failing_terms(test_db, seed_site):
    service = _service(test_db, broken="category")
    assert await service.posts_by_taxonomy("category", 1) == []
