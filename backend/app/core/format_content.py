"""Content Formatting — pure projection of host items into flat JSON-ready records.

Invariants:
    - Record keys: id, type, title, slug, date, excerpt, featured_image, blocks, permalink
    - Unnamed (freeform) blocks always carry rendered == ""
    - custom_fields never contains a key starting with "_"
    - A typed field value wins over the raw stored value for the same key
    - No IO: every host lookup is resolved by the caller and passed in

Design Decisions:
    - Dicts over pydantic models here: core stays framework-free, schemas validate at the route
    - Block keys keep the host's camelCase names (blockName, innerHTML...) for wire compatibility
"""

import re
from datetime import datetime
from typing import Any

import phpserialize

from app.core.domain_types import NOT_FOUND, PROTECTED_META_PREFIX
from app.core.excerpt import DEFAULT_EXCERPT_LENGTH, get_excerpt, render_excerpt_source
from app.core.parse_blocks import ParsedBlock
from app.core.repository_protocols import BlockRendererLike, PostLike

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Serialized string, array, object or number, as the host recognises them
_SERIALIZED = re.compile(r's:[0-9]+:".*";|[aO]:[0-9]+:.*|[bid]:[0-9.E+-]+;', re.DOTALL)


def format_blocks(blocks: list[ParsedBlock], renderer: BlockRendererLike) -> list[dict]:
    """Project parsed blocks into block records; only named blocks are rendered."""
    return [
        {
            "blockName": block.name,
            "attrs": block.attrs,
            "innerHTML": block.inner_html,
            "innerContent": list(block.inner_content),
            "rendered": renderer.render(block) if block.name else "",
        }
        for block in blocks
    ]


def format_date(value: datetime | None) -> str:
    return value.strftime(DATE_FORMAT) if value else ""


def build_content_record(
    post: PostLike,
    *,
    blocks: list[ParsedBlock],
    renderer: BlockRendererLike,
    featured_image: str | None,
    permalink: str,
    excerpt_length: int = DEFAULT_EXCERPT_LENGTH,
) -> dict:
    """Build the base Content Record for one item."""
    # Auto-excerpt needs the rendered body; skip the render when one is stored
    rendered = "" if post.post_excerpt else render_excerpt_source(blocks, renderer)
    excerpt = get_excerpt(post.post_excerpt, rendered, excerpt_length)
    return {
        "id": post.id,
        "type": post.post_type,
        "title": post.post_title or "",
        "slug": post.post_name or "",
        "date": format_date(post.post_date),
        "excerpt": excerpt,
        "featured_image": featured_image,
        "blocks": format_blocks(blocks, renderer),
        "permalink": permalink,
    }


# ─── Custom fields ───────────────────────────────────────────────

def group_post_meta(rows: list[tuple[str, str | None]]) -> dict[str, list[str | None]]:
    """Group ordered (key, value) rows by key, keeping first-seen key order."""
    grouped: dict[str, list[str | None]] = {}
    for key, value in rows:
        grouped.setdefault(key, []).append(value)
    return grouped


def is_protected_meta(key: str) -> bool:
    return key.startswith(PROTECTED_META_PREFIX)


def public_meta_keys(meta: dict[str, list[str | None]]) -> list[str]:
    return [key for key in meta if not is_protected_meta(key)]


def is_serialized(value: str) -> bool:
    """True when value looks like a PHP-serialized scalar, array or object."""
    data = value.strip()
    if data == "N;":
        return True
    if len(data) < 4 or data[1] != ":" or data[-1] not in ";}":
        return False
    return _SERIALIZED.fullmatch(data) is not None


def maybe_unserialize(value: str | None) -> Any:
    """Decode PHP-serialized meta; return everything else (JSON text included) as stored."""
    if not isinstance(value, str) or not is_serialized(value):
        return value
    try:
        decoded = phpserialize.loads(
            value.strip().encode("utf-8"),
            decode_strings=True,
            object_hook=lambda _name, props: props,
        )
    except ValueError:
        return value
    return _lists_from_arrays(decoded)


def _lists_from_arrays(value: Any) -> Any:
    """PHP arrays keyed 0..n-1 become lists, recursively; other arrays stay dicts."""
    if isinstance(value, dict):
        items = {key: _lists_from_arrays(item) for key, item in value.items()}
        if list(items) == list(range(len(items))):
            return list(items.values())
        return items
    return value


def build_custom_fields(
    meta: dict[str, list[str | None]], typed_values: dict[str, Any],
) -> dict[str, Any]:
    """Public custom fields, preferring typed values over raw stored ones."""
    fields: dict[str, Any] = {}
    for key in public_meta_keys(meta):
        typed = typed_values.get(key, NOT_FOUND)
        if typed is not NOT_FOUND:
            fields[key] = typed
        else:
            values = meta[key]
            fields[key] = maybe_unserialize(values[0] if values else None)
    return fields
