"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - PostId, TermId wrap host integer ids; never use bare int in domain logic
    - All valid states encoded as Enums, no raw string matching
    - NOT_FOUND is the only "field unavailable" marker (None is a valid field value)

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

PostId = NewType("PostId", int)
TermId = NewType("TermId", int)


# ─── Enums ───────────────────────────────────────────────────────

class PostStatus(str, Enum):
    """Host content statuses; only PUBLISH is ever served."""
    PUBLISH = "publish"
    DRAFT = "draft"
    PENDING = "pending"
    PRIVATE = "private"
    FUTURE = "future"
    TRASH = "trash"
    INHERIT = "inherit"


class BuiltinPostType(str, Enum):
    """Post types with host-defined permalink rules."""
    POST = "post"
    PAGE = "page"
    ATTACHMENT = "attachment"
    FIELD_DEFINITION = "acf-field"


# ─── Meta conventions ────────────────────────────────────────────

THUMBNAIL_META_KEY = "_thumbnail_id"
ATTACHED_FILE_META_KEY = "_wp_attached_file"
PROTECTED_META_PREFIX = "_"
FIELD_KEY_PREFIX = "field_"


class _NotFound:
    """Sentinel type for 'typed field not available'."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NOT_FOUND"

    def __bool__(self) -> bool:
        return False


NOT_FOUND = _NotFound()
