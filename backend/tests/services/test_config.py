"""Settings — environment parsing and derived values."""

import pytest
from pydantic import ValidationError

from app.config import Settings


def test_postgres_url_gets_async_driver():
    settings = Settings(database_url="postgresql://u:p@h:5432/d")
    assert settings.database_url == "postgresql+asyncpg://u:p@h:5432/d"


def test_namespace_normalized():
    assert Settings(api_namespace="custom-api/v2/").api_namespace == "/custom-api/v2"
    assert Settings(api_namespace="/").api_namespace == ""


def test_uploads_url_derived_from_site_url():
    settings = Settings(site_url="https://site.test/", uploads_url=None)
    assert settings.site_url == "https://site.test"
    assert settings.uploads_url == "https://site.test/wp-content/uploads"


def test_explicit_uploads_url_kept():
    settings = Settings(uploads_url="https://cdn.test/media/")
    assert settings.uploads_url == "https://cdn.test/media"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("EXCERPT_LENGTH", "20")
    monkeypatch.setenv("PRETTY_PERMALINKS", "false")
    settings = Settings()
    assert settings.excerpt_length == 20
    assert settings.pretty_permalinks is False


def test_permalink_structure_default_and_override():
    assert Settings().permalink_structure == "/%postname%/"
    custom = Settings(permalink_structure="/%year%/%postname%/")
    assert custom.permalink_structure == "/%year%/%postname%/"


def test_permalink_structure_rejects_unknown_tags():
    with pytest.raises(ValidationError, match="%category%"):
        Settings(permalink_structure="/%category%/%postname%/")
