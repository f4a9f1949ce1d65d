"""Typed Field Coercion — raw stored meta → typed value, by field definition type.

Invariants:
    - Coercion never raises: unparseable input falls back to the decoded raw value
    - Attachment-backed types (image, file) are NOT handled here; they need IO
    - Empty string for numeric/id types coerces to None
"""

from typing import Any

from app.core.format_content import maybe_unserialize

ATTACHMENT_FIELD_TYPES = frozenset({"image", "file"})
NUMERIC_FIELD_TYPES = frozenset({"number", "range"})
LIST_FIELD_TYPES = frozenset({"checkbox", "gallery", "relationship"})
ID_LIST_FIELD_TYPES = frozenset({"gallery", "relationship"})
SINGLE_ID_FIELD_TYPES = frozenset({"post_object", "page_link"})
MULTIPLE_CAPABLE_TYPES = frozenset({"select", "post_object", "page_link", "user"})


def is_multiple(definition: dict[str, Any]) -> bool:
    field_type = definition.get("type")
    return field_type in LIST_FIELD_TYPES or (
        field_type in MULTIPLE_CAPABLE_TYPES and bool(definition.get("multiple"))
    )


def to_number(raw: Any) -> int | float | None:
    if raw is None or raw == "":
        return None
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return raw
    text = str(raw).strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return None


def to_bool(raw: Any) -> bool:
    if isinstance(raw, str):
        return raw.strip().lower() not in ("", "0", "false")
    return bool(raw)


def to_id(raw: Any) -> int | None:
    number = to_number(raw)
    return int(number) if number is not None else None


def to_list(raw: Any) -> list:
    value = maybe_unserialize(raw)
    if value is None or value == "":
        return []
    if isinstance(value, list):
        return value
    if isinstance(value, dict):
        return list(value.values())
    return [value]


def coerce_field_value(definition: dict[str, Any], raw: str | None) -> Any:
    """Coerce a raw meta value per its field definition (non-attachment types)."""
    field_type = definition.get("type")

    if field_type in NUMERIC_FIELD_TYPES:
        return to_number(raw)
    if field_type == "true_false":
        return to_bool(raw)
    if is_multiple(definition):
        values = to_list(raw)
        if field_type in ID_LIST_FIELD_TYPES or field_type in SINGLE_ID_FIELD_TYPES:
            return [i for i in (to_id(v) for v in values) if i is not None]
        return values
    if field_type in SINGLE_ID_FIELD_TYPES:
        return to_id(raw)
    return maybe_unserialize(raw)
