"""SQL Content Store — ContentStore implementation over the host tables.

Invariants:
    - Read-only: never adds, flushes or commits
    - query_posts filters on exactly one status and orders newest first (date, then id)
    - get_terms raises TermLookupError for unregistered taxonomies
    - Attachment URLs only for image/* attachments ("full" size = original upload)

Design Decisions:
    - Explicit select() per lookup, no ORM relationships (ADR: no lazy loads on AsyncSession)
    - Registered types/taxonomies are small tables: filtered in Python after one SELECT
"""

import logging
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import (
    ATTACHED_FILE_META_KEY, BuiltinPostType, PostId, PostStatus, TermId,
)
from app.core.errors import TermLookupError
from app.core.format_content import maybe_unserialize
from app.models.post import Post, PostMeta
from app.models.post_type import PostType
from app.models.taxonomy import Taxonomy, Term, TermMeta, TermRelationship

logger = logging.getLogger(__name__)

# Guards against cycles in corrupted parent chains
MAX_ANCESTOR_DEPTH = 32


class SqlContentStore:
    """Reads host content through an AsyncSession."""

    def __init__(self, db: AsyncSession, uploads_url: str):
        self._db = db
        self._uploads_url = uploads_url.rstrip("/")

    # ─── Content types ───────────────────────────────────────────

    async def list_post_types(self, public: bool | None = None) -> list[PostType]:
        query = select(PostType).order_by(PostType.menu_position, PostType.name)
        if public is not None:
            query = query.where(PostType.public == public)
        result = await self._db.execute(query)
        return list(result.scalars().all())

    async def get_post_type(self, name: str) -> PostType | None:
        return await self._db.get(PostType, name)

    # ─── Posts ───────────────────────────────────────────────────

    async def get_post(self, post_id: PostId) -> Post | None:
        return await self._db.get(Post, post_id)

    async def query_posts(
        self,
        *,
        post_types: list[str],
        slug: str | None = None,
        term_ids: list[TermId] | None = None,
        status: PostStatus = PostStatus.PUBLISH,
    ) -> list[Post]:
        query = select(Post).where(
            Post.post_status == status.value,
            Post.post_type.in_(post_types),
        )
        if slug is not None:
            query = query.where(Post.post_name == slug)
        if term_ids is not None:
            query = query.where(
                Post.id.in_(
                    select(TermRelationship.post_id).where(
                        TermRelationship.term_id.in_(term_ids),
                    )
                )
            )
        query = query.order_by(Post.post_date.desc(), Post.id.desc())
        result = await self._db.execute(query)
        return list(result.scalars().all())

    async def get_post_meta(self, post_id: PostId) -> list[tuple[str, str | None]]:
        result = await self._db.execute(
            select(PostMeta.meta_key, PostMeta.meta_value)
            .where(PostMeta.post_id == post_id)
            .order_by(PostMeta.meta_id)
        )
        return [(row.meta_key, row.meta_value) for row in result.all()]

    async def get_ancestor_slugs(self, post: Post) -> list[str]:
        slugs: list[str] = []
        parent_id = post.post_parent
        seen = {post.id}
        while parent_id and parent_id not in seen and len(slugs) < MAX_ANCESTOR_DEPTH:
            seen.add(parent_id)
            parent = await self._db.get(Post, parent_id)
            if parent is None:
                break
            slugs.append(parent.post_name)
            parent_id = parent.post_parent
        return list(reversed(slugs))

    # ─── Attachments ─────────────────────────────────────────────

    async def get_attachment(self, attachment_id: PostId) -> Post | None:
        post = await self._db.get(Post, attachment_id)
        if post is None or post.post_type != BuiltinPostType.ATTACHMENT.value:
            return None
        return post

    async def get_attachment_url(self, attachment_id: PostId) -> str | None:
        attachment = await self.get_attachment(attachment_id)
        if attachment is None or not attachment.post_mime_type.startswith("image/"):
            return None
        result = await self._db.execute(
            select(PostMeta.meta_value)
            .where(
                PostMeta.post_id == attachment.id,
                PostMeta.meta_key == ATTACHED_FILE_META_KEY,
            )
            .order_by(PostMeta.meta_id)
            .limit(1)
        )
        attached_file = result.scalar_one_or_none()
        if attached_file:
            return f"{self._uploads_url}/{attached_file.lstrip('/')}"
        return attachment.guid or None

    # ─── Taxonomies ──────────────────────────────────────────────

    async def get_taxonomy(self, name: str) -> Taxonomy | None:
        return await self._db.get(Taxonomy, name)

    async def get_object_taxonomies(self, post_type: str) -> list[Taxonomy]:
        result = await self._db.execute(select(Taxonomy).order_by(Taxonomy.name))
        return [t for t in result.scalars().all() if post_type in (t.object_types or [])]

    async def get_terms(self, taxonomy: str) -> list[Term]:
        if await self.get_taxonomy(taxonomy) is None:
            raise TermLookupError(taxonomy)
        result = await self._db.execute(
            select(Term)
            .where(Term.taxonomy == taxonomy)
            .order_by(Term.name, Term.term_id)
        )
        return list(result.scalars().all())

    async def get_term_meta(self, term_id: TermId) -> dict[str, list[str | None]]:
        result = await self._db.execute(
            select(TermMeta.meta_key, TermMeta.meta_value)
            .where(TermMeta.term_id == term_id)
            .order_by(TermMeta.meta_id)
        )
        meta: dict[str, list[str | None]] = {}
        for row in result.all():
            meta.setdefault(row.meta_key, []).append(row.meta_value)
        return meta

    # ─── Field definitions ───────────────────────────────────────

    async def get_field_definition(self, field_key: str) -> dict[str, Any] | None:
        result = await self._db.execute(
            select(Post)
            .where(
                Post.post_type == BuiltinPostType.FIELD_DEFINITION.value,
                Post.post_name == field_key,
            )
            .limit(1)
        )
        post = result.scalar_one_or_none()
        if post is None:
            return None
        settings = maybe_unserialize(post.post_content)
        if not isinstance(settings, dict):
            logger.warning(
                f"Unreadable field definition {field_key}",
                extra={"post_id": post.id},
            )
            return None
        settings.setdefault("key", field_key)
        settings.setdefault("name", post.post_excerpt)
        return settings
