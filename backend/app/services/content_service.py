"""Content Service — one async method per route, store reads around pure formatting.

Invariants:
    - Every content query is restricted to published items
    - Base records never carry custom_fields; id/slug lookups (except type+id) do
    - Lookup failures raise ContentLookupError subclasses, never return None
    - Term lookup failures skip the taxonomy; they never reach the caller

Design Decisions:
    - Impureim sandwich: fetch (async store) → format (pure core) → return dict
    - One service per request: small caches (post types) live and die with it
    - field_provider is Optional: capability checked per field, not per request
"""

import logging
from typing import Any

from app.config import Settings
from app.core.domain_types import (
    NOT_FOUND, PostId, PostStatus, TermId, THUMBNAIL_META_KEY,
)
from app.core.errors import (
    ErrorContext, PostMismatchError, PostNotFoundError, PostTypeNotFoundError,
    TermLookupError,
)
from app.core.field_types import to_id
from app.core.format_content import (
    build_content_record, build_custom_fields, group_post_meta, public_meta_keys,
)
from app.core.parse_blocks import parse_blocks
from app.core.permalinks import build_permalink
from app.core.repository_protocols import (
    BlockRendererLike, ContentStore, FieldProvider, PostLike, PostTypeLike,
)
from app.core.taxonomy_terms import collect_term_ids, format_term

logger = logging.getLogger(__name__)


class ContentService:
    """Fetches and formats host content for the REST routes."""

    def __init__(
        self,
        store: ContentStore,
        renderer: BlockRendererLike,
        settings: Settings,
        field_provider: FieldProvider | None = None,
    ):
        self._store = store
        self._renderer = renderer
        self._settings = settings
        self._field_provider = field_provider
        self._post_types: dict[str, PostTypeLike | None] = {}

    # ─── Handlers ────────────────────────────────────────────────

    async def all_content(self) -> dict[str, list[dict]]:
        """Published items of every public type, keyed by type, registration order."""
        response: dict[str, list[dict]] = {}
        for post_type in await self._store.list_post_types(public=True):
            self._post_types[post_type.name] = post_type
            posts = await self._store.query_posts(post_types=[post_type.name])
            response[post_type.name] = [await self.format_post(p) for p in posts]
        return response

    async def content_by_type(self, post_type: str) -> list[dict]:
        if await self._get_post_type(post_type) is None:
            raise PostTypeNotFoundError(post_type)
        posts = await self._store.query_posts(post_types=[post_type])
        return [await self.format_post(p) for p in posts]

    async def content_by_id(self, post_id: int) -> dict:
        post = await self._store.get_post(PostId(post_id))
        if post is None or post.post_status != PostStatus.PUBLISH.value:
            raise PostNotFoundError(ErrorContext(post_id=post_id))
        return await self.format_post_with_custom_fields(post)

    async def content_by_type_and_id(self, post_type: str, post_id: int) -> dict:
        post = await self._store.get_post(PostId(post_id))
        if (
            post is None
            or post.post_type != post_type
            or post.post_status != PostStatus.PUBLISH.value
        ):
            raise PostMismatchError(ErrorContext(post_id=post_id, post_type=post_type))
        return await self.format_post(post)

    async def content_by_slug(self, slug: str) -> dict:
        searchable = [
            t.name for t in await self._store.list_post_types() if not t.exclude_from_search
        ]
        return await self._fetch_first(searchable, slug)

    async def content_by_type_and_slug(self, post_type: str, slug: str) -> dict:
        return await self._fetch_first([post_type], slug)

    async def taxonomies_for_type(self, post_type: str) -> dict[str, dict]:
        """Public taxonomies of a type with all their terms, empty ones included."""
        out: dict[str, dict] = {}
        for taxonomy in await self._store.get_object_taxonomies(post_type):
            if not taxonomy.public:
                continue
            try:
                terms = await self._store.get_terms(taxonomy.name)
            except TermLookupError as e:
                logger.warning(
                    f"Skipping taxonomy: {e.message}",
                    extra={"taxonomy": taxonomy.name, "post_type": post_type},
                )
                continue
            out[taxonomy.name] = {
                "name": taxonomy.label,
                "terms": [
                    format_term(term, await self._store.get_term_meta(TermId(term.term_id)))
                    for term in terms
                ],
            }
        return out

    async def posts_by_taxonomy(self, taxonomy: str, term_id: int) -> list[dict]:
        """Published items of the public types registering taxonomy, carrying term_id."""
        tax = await self._store.get_taxonomy(taxonomy)
        if tax is None:
            return []

        post_types = [
            t.name for t in await self._store.list_post_types(public=True)
            if t.name in (tax.object_types or [])
        ]
        if not post_types:
            return []

        try:
            terms = await self._store.get_terms(taxonomy)
        except TermLookupError:
            return []
        term_ids = collect_term_ids(terms, term_id, include_children=tax.hierarchical)
        if not term_ids:
            return []

        posts = await self._store.query_posts(
            post_types=post_types, term_ids=[TermId(t) for t in term_ids],
        )
        return [await self.format_post(p) for p in posts]

    # ─── Formatting ──────────────────────────────────────────────

    async def format_post(self, post: PostLike) -> dict:
        meta = group_post_meta(await self._store.get_post_meta(PostId(post.id)))
        return await self._format(post, meta)

    async def format_post_with_custom_fields(self, post: PostLike) -> dict:
        meta = group_post_meta(await self._store.get_post_meta(PostId(post.id)))
        data = await self._format(post, meta)
        data["custom_fields"] = build_custom_fields(
            meta, await self._typed_values(post, meta),
        )
        return data

    async def _format(self, post: PostLike, meta: dict[str, list[str | None]]) -> dict:
        return build_content_record(
            post,
            blocks=parse_blocks(post.post_content),
            renderer=self._renderer,
            featured_image=await self._featured_image(meta),
            permalink=await self._permalink(post),
            excerpt_length=self._settings.excerpt_length,
        )

    # ─── Helpers ─────────────────────────────────────────────────

    async def _fetch_first(self, post_types: list[str], slug: str) -> dict:
        posts = await self._store.query_posts(post_types=post_types, slug=slug)
        if not posts:
            raise PostNotFoundError(ErrorContext(slug=slug))
        return await self.format_post_with_custom_fields(posts[0])

    async def _get_post_type(self, name: str) -> PostTypeLike | None:
        if name not in self._post_types:
            self._post_types[name] = await self._store.get_post_type(name)
        return self._post_types[name]

    async def _featured_image(self, meta: dict[str, list[str | None]]) -> str | None:
        values = meta.get(THUMBNAIL_META_KEY)
        attachment_id = to_id(values[0]) if values else None
        if not attachment_id:
            return None
        return await self._store.get_attachment_url(PostId(attachment_id))

    async def _permalink(self, post: PostLike) -> str:
        post_type = await self._get_post_type(post.post_type)
        ancestors: list[str] = []
        if post_type is not None and post_type.hierarchical and post.post_parent:
            ancestors = await self._store.get_ancestor_slugs(post)
        return build_permalink(
            self._settings.site_url,
            post.id,
            post.post_type,
            post.post_name,
            rewrite_slug=post_type.rewrite_slug if post_type is not None else None,
            ancestors=ancestors,
            pretty=self._settings.pretty_permalinks,
            structure=self._settings.permalink_structure,
            post_date=post.post_date,
        )

    async def _typed_values(
        self, post: PostLike, meta: dict[str, list[str | None]],
    ) -> dict[str, Any]:
        if self._field_provider is None:
            return {}
        typed: dict[str, Any] = {}
        for key in public_meta_keys(meta):
            value = await self._field_provider.get_field(key, PostId(post.id), meta)
            if value is not NOT_FOUND:
                typed[key] = value
        return typed
