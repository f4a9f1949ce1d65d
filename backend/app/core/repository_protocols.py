"""Boundary Protocols — contracts between core and the host content store.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Every store query that returns content filters on a single status (publish by default)
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, ORM rows satisfy *Like contracts as-is
    - Async in Protocol: boundary methods are async because implementations do IO,
      but core pure functions that USE these protocols are never async themselves:
      the service layer orchestrates the async calls around the pure formatting
"""

from datetime import datetime
from typing import Any, Protocol

from app.core.domain_types import PostId, PostStatus, TermId


class PostLike(Protocol):
    """Structural contract for a host content item."""
    id: int
    post_type: str
    post_status: str
    post_title: str
    post_name: str
    post_content: str
    post_excerpt: str
    post_date: datetime
    post_parent: int
    post_mime_type: str
    guid: str


class PostTypeLike(Protocol):
    """Structural contract for a registered content type."""
    name: str
    label: str
    public: bool
    hierarchical: bool
    exclude_from_search: bool
    rewrite_slug: str | None


class TaxonomyLike(Protocol):
    """Structural contract for a registered taxonomy."""
    name: str
    label: str
    public: bool
    hierarchical: bool
    object_types: list


class TermLike(Protocol):
    """Structural contract for a taxonomy term."""
    term_id: int
    taxonomy: str
    name: str
    slug: str
    parent: int
    count: int


class ContentStore(Protocol):
    """Contract for host content reads, implemented by infrastructure."""
    async def list_post_types(self, public: bool | None = None) -> list[PostTypeLike]: ...
    async def get_post_type(self, name: str) -> PostTypeLike | None: ...
    async def get_post(self, post_id: PostId) -> PostLike | None: ...
    async def query_posts(
        self,
        *,
        post_types: list[str],
        slug: str | None = None,
        term_ids: list[TermId] | None = None,
        status: PostStatus = PostStatus.PUBLISH,
    ) -> list[PostLike]: ...
    async def get_post_meta(self, post_id: PostId) -> list[tuple[str, str | None]]: ...
    async def get_ancestor_slugs(self, post: PostLike) -> list[str]: ...
    async def get_attachment(self, attachment_id: PostId) -> PostLike | None: ...
    async def get_attachment_url(self, attachment_id: PostId) -> str | None: ...
    async def get_object_taxonomies(self, post_type: str) -> list[TaxonomyLike]: ...
    async def get_taxonomy(self, name: str) -> TaxonomyLike | None: ...
    async def get_terms(self, taxonomy: str) -> list[TermLike]: ...
    async def get_term_meta(self, term_id: TermId) -> dict[str, list[str | None]]: ...
    async def get_field_definition(self, field_key: str) -> dict[str, Any] | None: ...


class FieldProvider(Protocol):
    """Optional typed custom-field source (host form plugin).

    get_field returns domain_types.NOT_FOUND when it does not know the field.
    """
    async def get_field(
        self, name: str, post_id: PostId, meta: dict[str, list[str | None]],
    ) -> Any: ...


class BlockRendererLike(Protocol):
    """Contract for the block renderer used by the formatter."""
    def render(self, block: Any) -> str: ...
