"""Error Hierarchy — typed, categorized exceptions for all Content API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - to_response() produces the REST envelope {code, message, data: {status}}
    - Lookup errors (404) carry fixed short messages; no internal details leaked

Design Decisions:
    - Single hierarchy with ContentApiError base: FastAPI global handler catches all (ADR: uniform error shape)
    - Envelope mirrors the host CMS REST error shape so existing front-ends parse it unchanged
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    STORE_LOOKUP = "store_lookup"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    post_id: int | None = None
    post_type: str | None = None
    slug: str | None = None
    taxonomy: str | None = None
    debug_info: dict[str, Any] | None = None


class ContentApiError(Exception):
    """Base exception for all Content API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the REST error envelope."""
        return error_envelope(self.code, self.message, self.http_status)


def error_envelope(code: str, message: str, status: int) -> dict:
    """Build the {code, message, data: {status}} body shared by every error path."""
    return {"code": code, "message": message, "data": {"status": status}}


# ─── Lookup Errors (404) ────────────────────────────────────────

LOOKUP_ERROR_CODE = "custom_api_error"


class ContentLookupError(ContentApiError):
    """Requested content could not be resolved to a published item."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, LOOKUP_ERROR_CODE, ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, context, 404,
        )


class PostTypeNotFoundError(ContentLookupError):
    """Content type is not registered with the host."""
    def __init__(self, post_type: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.post_type = post_type
        super().__init__("Invalid post type", ctx)


class PostNotFoundError(ContentLookupError):
    """No published item matches the id or slug."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__("Post not found", context)


class PostMismatchError(ContentLookupError):
    """Item is missing, unpublished, or of a different type than requested."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__("Post mismatch", context)


# ─── Store Errors ───────────────────────────────────────────────

class TermLookupError(ContentApiError):
    """Term listing failed for a taxonomy (unknown or unreadable taxonomy)."""
    def __init__(self, taxonomy: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.taxonomy = taxonomy
        super().__init__(
            f"Invalid taxonomy: {taxonomy}",
            "invalid_taxonomy", ErrorCategory.STORE_LOOKUP,
            ErrorSeverity.WARNING, ctx, 500,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(ContentApiError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "database_error", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
