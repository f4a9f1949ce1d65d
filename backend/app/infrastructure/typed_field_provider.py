"""Typed Field Provider — host form-plugin field values, typed by their definitions.

Invariants:
    - A field is known only when meta "_<name>" holds a "field_…" key AND that
      definition exists; otherwise get_field returns NOT_FOUND
    - Definitions are looked up once per field key per provider instance
    - Attachment fields honour return_format: "id", "url", "array" (default)

Design Decisions:
    - Follows the plugin's storage convention instead of its PHP API, so no plugin
      code is needed to read values it wrote
    - Per-request instance: the definition cache dies with the request
"""

import logging
from typing import Any

from app.core.domain_types import FIELD_KEY_PREFIX, NOT_FOUND, PostId, PROTECTED_META_PREFIX
from app.core.field_types import ATTACHMENT_FIELD_TYPES, coerce_field_value, to_id
from app.core.repository_protocols import ContentStore

logger = logging.getLogger(__name__)


class TypedFieldProvider:
    """FieldProvider backed by field-definition items in the content store."""

    def __init__(self, store: ContentStore):
        self._store = store
        self._definitions: dict[str, dict[str, Any] | None] = {}

    async def get_field(
        self, name: str, post_id: PostId, meta: dict[str, list[str | None]],
    ) -> Any:
        reference = _first(meta.get(PROTECTED_META_PREFIX + name))
        if not isinstance(reference, str) or not reference.startswith(FIELD_KEY_PREFIX):
            return NOT_FOUND

        definition = await self._definition(reference)
        if definition is None:
            return NOT_FOUND

        raw = _first(meta.get(name))
        if definition.get("type") in ATTACHMENT_FIELD_TYPES:
            return await self._attachment_value(definition, raw)
        return coerce_field_value(definition, raw)

    async def _definition(self, field_key: str) -> dict[str, Any] | None:
        if field_key not in self._definitions:
            self._definitions[field_key] = await self._store.get_field_definition(field_key)
        return self._definitions[field_key]

    async def _attachment_value(self, definition: dict[str, Any], raw: str | None) -> Any:
        attachment_id = to_id(raw)
        if attachment_id is None:
            return None
        return_format = definition.get("return_format", "array")
        if return_format == "id":
            return attachment_id

        attachment = await self._store.get_attachment(PostId(attachment_id))
        if attachment is None:
            logger.warning(
                f"Field {definition.get('name')} references missing attachment",
                extra={"post_id": attachment_id},
            )
            return None
        url = await self._store.get_attachment_url(PostId(attachment_id)) or attachment.guid or None
        if return_format == "url":
            return url
        return {
            "id": attachment.id,
            "url": url,
            "title": attachment.post_title,
            "mime_type": attachment.post_mime_type,
        }


def _first(values: list[str | None] | None) -> str | None:
    return values[0] if values else None
