"""Error Hierarchy — typed, categorized exceptions for all Holocron failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope used by every error handler
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with HolocronError base: FastAPI global handler catches all (ADR: uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
    - DuplicateKeyError subclasses PersistenceError: the sync orchestrator counts both
      as per-item failures with one except clause
"""

from dataclasses import dataclass, field
from enum import Enum
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
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"
    CONFLICT = "conflict"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    film_id: str | None = None
    uid: str | None = None
    url: str | None = None


class HolocronError(Exception):
    """Base exception for all Holocron errors."""

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
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "film_id": self.context.film_id,
                    "uid": self.context.uid,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

@dataclass(frozen=True)
class FieldViolation:
    """One violated field and the reason it was rejected."""
    field: str
    reason: str


class ValidationFailedError(HolocronError):
    """Film fields missing or malformed — raised before any write."""
    def __init__(
        self, violations: list[FieldViolation], context: ErrorContext | None = None,
    ):
        fields = ", ".join(v.field for v in violations)
        super().__init__(
            f"Invalid film data: {fields}",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.violations = violations

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["details"] = [
            {"field": v.field, "message": v.reason} for v in self.violations
        ]
        return response


class ResourceNotFoundError(HolocronError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )


class AuthenticationError(HolocronError):
    """Missing, expired or malformed bearer token."""
    def __init__(self, message: str = "Authentication required", context: ErrorContext | None = None):
        super().__init__(
            message, "UNAUTHENTICATED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class PermissionDeniedError(HolocronError):
    """Authenticated principal lacks the required role."""
    def __init__(self, role: str, allowed: list[str], context: ErrorContext | None = None):
        super().__init__(
            f"Role '{role}' is not allowed; requires one of: {', '.join(allowed)}",
            "FORBIDDEN", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, context, 403,
        )
        self.role = role
        self.allowed = allowed


# ─── Infrastructure Errors (500-level) ──────────────────────────

class PersistenceError(HolocronError):
    """Store write or read failed."""
    def __init__(
        self,
        message: str,
        operation: str,
        context: ErrorContext | None = None,
        code: str = "PERSISTENCE_ERROR",
        http_status: int = 503,
    ):
        super().__init__(
            f"Database {operation} failed: {message}",
            code, ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, http_status,
        )
        self.operation = operation


class DuplicateKeyError(PersistenceError):
    """Unique constraint on the external uid violated."""
    def __init__(self, uid: str | None, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.uid = uid
        super().__init__(
            f"a film with uid '{uid}' already exists", "create", ctx,
            code="DUPLICATE_KEY", http_status=409,
        )
        self.category = ErrorCategory.CONFLICT
        self.severity = ErrorSeverity.ERROR
        self.uid = uid


class SourceUnavailableError(HolocronError):
    """External feed fetch or decode failed. Never retried."""
    def __init__(self, message: str, url: str | None = None, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.url = url
        super().__init__(
            f"External source unavailable: {message}",
            "SOURCE_UNAVAILABLE", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, ctx, 502,
        )
        self.url = url


class SyncAbortedError(HolocronError):
    """Whole sync pass aborted before any item was processed."""
    def __init__(self, cause: HolocronError, context: ErrorContext | None = None):
        super().__init__(
            f"Sync aborted: {cause.message}",
            "SYNC_ABORTED", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, context, 502,
        )
        self.cause = cause
