"""Content Routes — GET endpoints for published content records.

Invariants:
    - GET only, no authentication
    - Path tokens shaped by URL convertors; no other validation before the store
    - id and slug lookups (except type+id) include custom_fields

Design Decisions:
    - Thin handlers: every route is one ContentService call (ADR: impureim sandwich)
    - Parameter names mirror the URL placeholders, hence `type`/`id`
"""

import logging

from fastapi import APIRouter, Depends

from app.api import convertors  # noqa: F401
from app.api.dependencies import get_content_service
from app.schemas.content import ContentRecord, ContentRecordWithFields
from app.schemas.error import ErrorEnvelope
from app.services.content_service import ContentService

logger = logging.getLogger(__name__)
router = APIRouter(
    tags=["content"], responses={404: {"model": ErrorEnvelope}},
)


@router.get("/all-content", response_model=dict[str, list[ContentRecord]])
async def get_all_content(service: ContentService = Depends(get_content_service)):
    """Every public type mapped to its published records."""
    return await service.all_content()


@router.get("/content/{type:token}", response_model=list[ContentRecord])
async def get_content_by_type(
    type: str, service: ContentService = Depends(get_content_service),
):
    return await service.content_by_type(type)


@router.get("/content/id/{id:int}", response_model=ContentRecordWithFields)
async def get_content_by_id(
    id: int, service: ContentService = Depends(get_content_service),
):
    return await service.content_by_id(id)


@router.get("/content/{type:token}/id/{id:int}", response_model=ContentRecord)
async def get_content_by_type_and_id(
    type: str, id: int, service: ContentService = Depends(get_content_service),
):
    return await service.content_by_type_and_id(type, id)


@router.get(
    "/content/{type:token}/slug/{slug:token}",
    response_model=ContentRecordWithFields,
)
async def get_content_by_type_and_slug(
    type: str, slug: str, service: ContentService = Depends(get_content_service),
):
    return await service.content_by_type_and_slug(type, slug)


@router.get("/content/slug/{slug:token}", response_model=ContentRecordWithFields)
async def get_content_by_slug(
    slug: str, service: ContentService = Depends(get_content_service),
):
    """First published item with this slug across searchable types."""
    return await service.content_by_slug(slug)
