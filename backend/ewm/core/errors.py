"""Error Hierarchy — typed, categorized exceptions for all Explore With Me failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST error envelope used by both backend and gateway
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with ExploreError base: FastAPI global handler catches all (ADR: uniform error shape)
    - Not-found helpers per entity keep service code to one line per lookup
    - RequestConditionError is 403: the request is well-formed but the business
      conditions for the operation are not met (ADR: mirrors public API contract)
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
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"
    CONFLICT = "conflict"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: int | None = None
    resource_id: int | None = None


class ExploreError(Exception):
    """Base exception for all Explore With Me errors."""

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
                    "user_id": self.context.user_id,
                    "resource_id": self.context.resource_id,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ValidationFailedError(ExploreError):
    """Input passed schema validation but is semantically invalid."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class RequestConditionError(ExploreError):
    """Conditions for the requested operation are not met."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "CONDITION_NOT_MET", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.WARNING, context, 403,
        )


class ConflictError(ExploreError):
    """Uniqueness or integrity constraint would be violated."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 409,
        )


class ResourceNotFoundError(ExploreError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: object, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} with id={resource_id} was not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class UserNotFoundError(ResourceNotFoundError):
    def __init__(self, user_id: int):
        super().__init__("User", user_id, ErrorContext(user_id=user_id))


class CategoryNotFoundError(ResourceNotFoundError):
    def __init__(self, cat_id: int):
        super().__init__("Category", cat_id, ErrorContext(resource_id=cat_id))


class EventNotFoundError(ResourceNotFoundError):
    def __init__(self, event_id: int):
        super().__init__("Event", event_id, ErrorContext(resource_id=event_id))


class ParticipationRequestNotFoundError(ResourceNotFoundError):
    def __init__(self, request_id: int):
        super().__init__("Request", request_id, ErrorContext(resource_id=request_id))


class CompilationNotFoundError(ResourceNotFoundError):
    def __init__(self, comp_id: int):
        super().__init__("Compilation", comp_id, ErrorContext(resource_id=comp_id))


class SubscriptionNotFoundError(ResourceNotFoundError):
    def __init__(self, subscription_id: int):
        super().__init__(
            "Subscription", subscription_id,
            ErrorContext(resource_id=subscription_id),
        )


class GroupNotFoundError(ResourceNotFoundError):
    def __init__(self, title: str):
        super().__init__("Group", title)


class FollowerNotFoundError(ResourceNotFoundError):
    def __init__(self, follower_id: int):
        super().__init__("Follower", follower_id, ErrorContext(user_id=follower_id))


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(ExploreError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


class MainServerUnavailableError(ExploreError):
    """Gateway could not reach the main server."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"Main server unavailable: {message}",
            "MAIN_SERVER_UNAVAILABLE", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, context, 502,
        )
