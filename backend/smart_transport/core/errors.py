"""Error Hierarchy: typed, categorized exceptions for all service failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the failure envelope {success: false, message}
    - No driver details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with SmartTransportError base: one FastAPI handler catches all
    - ErrorContext carries observability fields without coupling to the logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone

from smart_transport.core.envelope import failure_envelope


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
    STORAGE = "storage"
    UNAVAILABLE = "unavailable"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    collection: str | None = None
    document_id: str | None = None
    debug_info: dict[str, Any] | None = None


class SmartTransportError(Exception):
    """Base exception for all service errors."""

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
        """Convert to the failure envelope."""
        return failure_envelope(self.message)

    def log_extra(self) -> dict:
        """Structured logging fields for this error."""
        return {
            "error_code": self.code,
            "collection": self.context.collection,
            "document_id": self.context.document_id,
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class MissingFieldsError(SmartTransportError):
    """One or more required fields are absent or empty."""
    def __init__(self, missing: list[str], context: ErrorContext | None = None):
        super().__init__(
            f"Missing required fields: {', '.join(missing)}",
            "MISSING_FIELDS", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.missing = missing


class InvalidFieldsError(SmartTransportError):
    """Request body fields have the wrong type or value."""
    def __init__(self, fields: list[str], context: ErrorContext | None = None):
        super().__init__(
            f"Invalid request fields: {', '.join(fields) or 'body'}",
            "INVALID_FIELDS", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.fields = fields


class MalformedIdentifierError(SmartTransportError):
    """Identifier cannot possibly reference a stored document."""
    def __init__(self, document_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.document_id = document_id
        super().__init__(
            f"Invalid id '{document_id}'",
            "MALFORMED_ID", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, ctx, 400,
        )


class EmptyPatchError(SmartTransportError):
    """Update body names none of the resource's updatable fields."""
    def __init__(self, allowed: tuple[str, ...], context: ErrorContext | None = None):
        super().__init__(
            f"No updatable fields supplied (expected any of: {', '.join(allowed)})",
            "EMPTY_PATCH", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class ResourceNotFoundError(SmartTransportError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, key: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.document_id = ctx.document_id or key
        super().__init__(
            f"{resource_type} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404,
        )
        self.resource_type = resource_type
        self.key = key


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StorageError(SmartTransportError):
    """Storage backend operation failed."""
    def __init__(
        self, operation: str, collection: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.collection = collection
        super().__init__(
            f"Storage operation '{operation}' on {collection} failed",
            "STORAGE_ERROR", ErrorCategory.STORAGE,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.operation = operation


class StorageNotReadyError(SmartTransportError):
    """Storage gateway has not finished (or failed) its startup connect."""
    def __init__(self, state: str, context: ErrorContext | None = None):
        super().__init__(
            "Storage is not ready",
            "STORAGE_NOT_READY", ErrorCategory.UNAVAILABLE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.state = state
