"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All connection details come from environment variables or .env
    - get_settings() is cached (lru_cache): single instance per process
    - site_url never ends with "/"; uploads_url always resolved

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all settings: works out-of-the-box against a local host DB
"""

from functools import lru_cache

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.core.permalinks import DEFAULT_POST_STRUCTURE, unsupported_structure_tags


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database (host CMS tables)
    database_url: str = "postgresql+asyncpg://cms:cms@db:5432/cms"

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosting platforms hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Routes
    api_namespace: str = "/custom-api/v1"

    @field_validator("api_namespace")
    @classmethod
    def normalize_namespace(cls, v: str) -> str:
        return "/" + v.strip("/") if v.strip("/") else ""

    # Site (permalinks, media)
    site_url: str = "http://localhost:8080"
    uploads_url: str | None = None
    pretty_permalinks: bool = True
    # Built-in posts only; supports %year% %monthnum% %day% %hour% %minute% %second% %post_id% %postname%
    permalink_structure: str = DEFAULT_POST_STRUCTURE

    @field_validator("permalink_structure")
    @classmethod
    def check_structure_tags(cls, v: str) -> str:
        unsupported = unsupported_structure_tags(v)
        if unsupported:
            raise ValueError(f"Unsupported permalink tags: {', '.join(unsupported)}")
        return v

    @field_validator("site_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @model_validator(mode="after")
    def default_uploads_url(self):
        if not self.uploads_url:
            self.uploads_url = f"{self.site_url}/wp-content/uploads"
        self.uploads_url = self.uploads_url.rstrip("/")
        return self

    # Formatting
    excerpt_length: int = 55
    typed_fields_enabled: bool = True

    # API
    cors_origins: list[str] = ["http://localhost:3000"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
