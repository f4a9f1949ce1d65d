"""Route Dependencies — per-request wiring of store, renderer and service.

Invariants:
    - One SqlContentStore and one ContentService per request (bound to that request's session)
    - The block renderer is process-wide and read-only after startup
    - Typed field provider present only when settings.typed_fields_enabled
"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import Settings, get_settings
from app.core.render_blocks import BlockRenderer
from app.infrastructure.database import get_db
from app.infrastructure.sql_content_store import SqlContentStore
from app.infrastructure.typed_field_provider import TypedFieldProvider
from app.services.content_service import ContentService


@lru_cache
def get_block_renderer() -> BlockRenderer:
    return BlockRenderer()


def get_content_store(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> SqlContentStore:
    return SqlContentStore(db, settings.uploads_url)


def get_content_service(
    store: SqlContentStore = Depends(get_content_store),
    renderer: BlockRenderer = Depends(get_block_renderer),
    settings: Settings = Depends(get_settings),
) -> ContentService:
    provider = TypedFieldProvider(store) if settings.typed_fields_enabled else None
    return ContentService(store, renderer, settings, field_provider=provider)
