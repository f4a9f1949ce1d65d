"""Root conftest — shared test configuration."""

import os

# Settings are cached on first use: fix them before app modules import
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SITE_URL", "https://example.com")
os.environ.setdefault("LOG_FORMAT", "text")
