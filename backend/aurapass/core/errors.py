"""Error Hierarchy — typed, categorized exceptions for all Aurapass failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are returned to the caller as-is; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope used by every error response
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with AurapassError base: FastAPI global handler catches all (ADR: uniform error shape)
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
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"
    CONFLICT = "conflict"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    gid: str | None = None
    event_id: int | None = None
    debug_info: dict[str, Any] | None = None


class AurapassError(Exception):
    """Base exception for all Aurapass errors."""

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
            "success": False,
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "gid": self.context.gid,
                    "event_id": self.context.event_id,
                },
            },
        }


# ─── Access Errors (401/403) ────────────────────────────────────

class UnauthenticatedError(AurapassError):
    """No bearer credential on a protected request."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Authentication required",
            "UNAUTHENTICATED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class ForbiddenError(AurapassError):
    """Credential invalid, expired, revoked, or lacking the required role."""
    def __init__(self, reason: str = "Access denied", context: ErrorContext | None = None):
        super().__init__(
            reason, "FORBIDDEN", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, context, 403,
        )


class InvalidCredentialsError(AurapassError):
    """Login gid/password pair did not match any user."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Invalid Credentials", "INVALID_CREDENTIALS",
            ErrorCategory.AUTHENTICATION, ErrorSeverity.WARNING, context, 401,
        )


# ─── Domain Errors (400-level) ──────────────────────────────────

class ResourceNotFoundError(AurapassError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class AlreadyRegisteredError(AurapassError):
    """User already holds a registration for the event."""
    def __init__(self, event_id: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.event_id = event_id
        super().__init__(
            "Already Registered", "ALREADY_REGISTERED",
            ErrorCategory.BUSINESS_RULE, ErrorSeverity.ERROR, ctx, 400,
        )


class EventClosedError(AurapassError):
    """Event no longer accepts registrations."""
    def __init__(self, event_id: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.event_id = event_id
        super().__init__(
            "Event Closed", "EVENT_CLOSED",
            ErrorCategory.BUSINESS_RULE, ErrorSeverity.ERROR, ctx, 400,
        )


class WrongPasswordError(AurapassError):
    """Current password did not match on a password change."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Wrong Password", "WRONG_PASSWORD",
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR, context, 400,
        )


class ConflictError(AurapassError):
    """Uniqueness violation that could not be resolved by retrying."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(AurapassError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "PERSISTENCE_FAILURE", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
