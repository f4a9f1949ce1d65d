"""Service test fixtures — in-memory host database, seeded site, FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database with the host schema
    - get_db dependency overridden to use the test session factory
    - db_manager patched so readiness probes hit the test engine
    - seed_site commits one small site; tests only read it

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (ADR: PostgreSQL-specific features not exercised here)
    - Seed built from plain ORM rows so every store query runs for real
"""

from datetime import datetime

import pytest
from httpx import ASGITransport, AsyncClient

from app.db.session import create_host_schema, create_session_factory, drop_host_schema
from app.infrastructure.database import get_db, DatabaseSessionManager
from app.models import Post, PostMeta, PostType, Taxonomy, Term, TermMeta, TermRelationship
import app.infrastructure.database as db_module
from app.main import app


@pytest.fixture
async def test_engine_and_factory():
    engine, factory = create_session_factory("sqlite+aiosqlite:///:memory:")
    await create_host_schema(engine)
    yield engine, factory
    await drop_host_schema(engine)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine_and_factory):
    return test_engine_and_factory[1]


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine_and_factory):
    """FastAPI test client with DB dependency overridden."""
    engine, factory = test_engine_and_factory

    async def override_get_db():
        async with factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = engine
    fake_manager._session_factory = factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


# ─── Seed data ───────────────────────────────────────────────────

def _paragraph(text: str) -> str:
    return f"<!-- wp:paragraph --><p>{text}</p><!-- /wp:paragraph -->"


def _post(id, post_type, slug, title, date, *, status="publish", content="", **kw):
    return Post(
        id=id, post_type=post_type, post_status=status, post_name=slug,
        post_title=title, post_content=content, post_date=date, **kw,
    )


@pytest.fixture
async def seed_site(test_db):
    """A small site: posts, pages, books, attachments, taxonomies, field definitions."""
    test_db.add_all([
        PostType(name="post", label="Posts", menu_position=5, rewrite_slug=""),
        PostType(name="page", label="Pages", hierarchical=True, menu_position=20),
        PostType(name="book", label="Books", menu_position=25, rewrite_slug="books"),
        PostType(name="attachment", label="Media", menu_position=30),
        PostType(name="internal", label="Internal", public=False, menu_position=40),
        PostType(
            name="acf-field", label="Fields", public=False,
            exclude_from_search=True, menu_position=50,
        ),
        Taxonomy(name="category", label="Categories", hierarchical=True, object_types=["post"]),
        Taxonomy(name="topic", label="Topics", object_types=["post", "book"]),
        Taxonomy(name="genre", label="Genres", hierarchical=True, object_types=["book"]),
        Taxonomy(name="secret", label="Secret", public=False, object_types=["post"]),
        Taxonomy(name="post_tag", label="Tags", object_types=["post"]),
    ])
    await test_db.flush()

    test_db.add_all([
        Term(term_id=1, taxonomy="category", name="News", slug="news", count=2),
        Term(term_id=2, taxonomy="category", name="World", slug="world", parent=1, count=1),
        Term(term_id=3, taxonomy="category", name="Empty", slug="empty", count=0),
        Term(term_id=4, taxonomy="topic", name="Featured", slug="featured", count=2),
        Term(term_id=5, taxonomy="genre", name="Fiction", slug="fiction", count=1),
        Term(term_id=6, taxonomy="secret", name="Hidden", slug="hidden", count=1),
        Term(term_id=7, taxonomy="post_tag", name="Misc", slug="misc", count=1),
    ])
    await test_db.flush()
    test_db.add(TermMeta(term_id=1, meta_key="color", meta_value="red"))

    test_db.add_all([
        _post(
            1, "post", "hello-world", "Hello World", datetime(2024, 1, 2, 9, 30),
            content=_paragraph("Welcome to the site."),
        ),
        _post(2, "post", "draft-post", "Draft", datetime(2024, 3, 1), status="draft"),
        _post(
            3, "post", "world-news", "World News", datetime(2024, 2, 1),
            content=_paragraph("Elsewhere."), post_excerpt="Hand written summary",
        ),
        _post(4, "page", "about", "About", datetime(2023, 1, 1)),
        _post(5, "page", "team", "Team", datetime(2023, 1, 2), post_parent=4),
        _post(
            6, "book", "dune", "Dune", datetime(2023, 6, 1),
            content='<!-- wp:heading {"level":2} --><h2>Arrakis</h2><!-- /wp:heading -->',
        ),
        _post(7, "internal", "internal-note", "Note", datetime(2024, 4, 1)),
        _post(
            10, "attachment", "cover", "Cover", datetime(2024, 1, 1), status="inherit",
            post_mime_type="image/jpeg", guid="https://cdn.example.com/cover.jpg",
        ),
        _post(
            11, "attachment", "manual", "Manual", datetime(2024, 1, 1), status="inherit",
            post_mime_type="application/pdf", guid="https://example.com/manual.pdf",
        ),
        _post(
            20, "acf-field", "field_price", "Price", datetime(2024, 1, 1),
            content='a:1:{s:4:"type";s:6:"number";}', post_excerpt="price",
        ),
        _post(
            21, "acf-field", "field_cover", "Cover", datetime(2024, 1, 1),
            content='a:2:{s:4:"type";s:5:"image";s:13:"return_format";s:3:"url";}',
            post_excerpt="cover",
        ),
    ])
    await test_db.flush()

    test_db.add_all([
        PostMeta(post_id=1, meta_key="_thumbnail_id", meta_value="10"),
        PostMeta(post_id=1, meta_key="subtitle", meta_value="Hi"),
        PostMeta(post_id=1, meta_key="price", meta_value="12"),
        PostMeta(post_id=1, meta_key="_price", meta_value="field_price"),
        PostMeta(post_id=1, meta_key="colors", meta_value='a:2:{i:0;s:3:"red";i:1;s:4:"blue";}'),
        PostMeta(post_id=1, meta_key="embed", meta_value='{"provider": "video"}'),
        PostMeta(post_id=3, meta_key="_thumbnail_id", meta_value="11"),
        PostMeta(post_id=6, meta_key="cover", meta_value="10"),
        PostMeta(post_id=6, meta_key="_cover", meta_value="field_cover"),
        PostMeta(post_id=10, meta_key="_wp_attached_file", meta_value="2024/01/cover.jpg"),
        TermRelationship(post_id=1, term_id=1),
        TermRelationship(post_id=1, term_id=4),
        TermRelationship(post_id=1, term_id=7),
        TermRelationship(post_id=2, term_id=1),
        TermRelationship(post_id=3, term_id=2),
        TermRelationship(post_id=6, term_id=4),
        TermRelationship(post_id=6, term_id=5),
    ])
    await test_db.commit()
