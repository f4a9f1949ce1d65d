"""Taxonomy Routes — taxonomy listings and taxonomy-filtered content.

Invariants:
    - /taxonomies/{type} never lists non-public taxonomies; unknown types give {}
    - /posts-by-taxonomy never 404s: no match is an empty list
"""

from fastapi import APIRouter, Depends

from app.api import convertors  # noqa: F401
from app.api.dependencies import get_content_service
from app.schemas.content import ContentRecord
from app.schemas.taxonomy import TaxonomyRecord
from app.services.content_service import ContentService

router = APIRouter(tags=["taxonomies"])


@router.get("/taxonomies/{type:token}", response_model=dict[str, TaxonomyRecord])
async def get_taxonomies_by_post_type(
    type: str, service: ContentService = Depends(get_content_service),
):
    return await service.taxonomies_for_type(type)


@router.get(
    "/posts-by-taxonomy/{taxonomy:token}/{term_id:int}",
    response_model=list[ContentRecord],
)
async def get_posts_by_taxonomy(
    taxonomy: str, term_id: int,
    service: ContentService = Depends(get_content_service),
):
    """Published items carrying the term, across every type registering the taxonomy."""
    return await service.posts_by_taxonomy(taxonomy, term_id)
