"""Permalinks — public URL of a content item, following the host's rewrite rules.

Invariants:
    - Built-in posts follow the configured structure (default "/%postname%/")
    - Pages live at the site root; custom types under their rewrite slug
    - Ancestor slugs (outermost first) prefix hierarchical items
    - The structure's trailing slash (or its absence) applies to every pretty permalink
    - An empty structure means plain (query-string) permalinks, as on the host
"""

import re
from datetime import datetime

from app.core.domain_types import BuiltinPostType

DEFAULT_POST_STRUCTURE = "/%postname%/"

STRUCTURE_TAGS = (
    "%year%", "%monthnum%", "%day%", "%hour%", "%minute%", "%second%",
    "%post_id%", "%postname%",
)
_TAG = re.compile(r"%[a-z_]+%")


def unsupported_structure_tags(structure: str) -> list[str]:
    return [tag for tag in _TAG.findall(structure) if tag not in STRUCTURE_TAGS]


def expand_structure(
    structure: str, post_id: int, slug: str, post_date: datetime | None = None,
) -> str:
    """Replace structure tags for one post; date tags are empty without a date."""
    values = {"%post_id%": str(post_id), "%postname%": slug}
    if post_date is not None:
        values.update({
            "%year%": f"{post_date.year:04d}",
            "%monthnum%": f"{post_date.month:02d}",
            "%day%": f"{post_date.day:02d}",
            "%hour%": f"{post_date.hour:02d}",
            "%minute%": f"{post_date.minute:02d}",
            "%second%": f"{post_date.second:02d}",
        })
    return _TAG.sub(lambda m: values.get(m.group(0), ""), structure)


def build_permalink(
    site_url: str,
    post_id: int,
    post_type: str,
    slug: str,
    rewrite_slug: str | None = None,
    ancestors: list[str] | None = None,
    pretty: bool = True,
    structure: str = DEFAULT_POST_STRUCTURE,
    post_date: datetime | None = None,
) -> str:
    base = site_url.rstrip("/")
    if not pretty or not structure or not slug:
        return f"{base}/{_plain_query(post_id, post_type, slug)}"

    trailing = "/" if structure.endswith("/") else ""
    if post_type == BuiltinPostType.POST.value:
        segments = expand_structure(structure, post_id, slug, post_date).split("/")
    else:
        if post_type == BuiltinPostType.PAGE.value:
            prefix = ""
        else:
            prefix = post_type if rewrite_slug is None else rewrite_slug
        segments = [prefix, *(ancestors or []), slug]

    return f"{base}/" + "/".join(s.strip("/") for s in segments if s.strip("/")) + trailing


def _plain_query(post_id: int, post_type: str, slug: str) -> str:
    if post_type == BuiltinPostType.PAGE.value:
        return f"?page_id={post_id}"
    if post_type == BuiltinPostType.POST.value or not slug:
        return f"?p={post_id}"
    return f"?{post_type}={slug}"
