"""Error Hierarchy — typed, categorized exceptions for all Ogiri failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are client mistakes; storage errors (500-level) are critical
    - to_response() produces the REST envelope {"error": message} and nothing else
    - No internal details (paths, tracebacks) in user-facing messages

Design Decisions:
    - Single hierarchy with OgiriError base: FastAPI global handler catches all (ADR: uniform error shape)
    - Stores raise these directly; handlers and routes let them propagate
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    STORAGE = "storage"
    CONFLICT = "conflict"
    INTERNAL = "internal"


class OgiriError(Exception):
    """Base exception for all Ogiri errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the REST error body."""
        return {"error": self.message}


# ─── Domain Errors (400-level) ──────────────────────────────────

class ValidationError(OgiriError):
    """A required field is missing or empty."""
    def __init__(self, message: str, field: str):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.field = field


class ResourceNotFoundError(OgiriError):
    """Requested resource does not exist, or is not owned by the claimed parent."""
    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class InactiveResourceError(OgiriError):
    """Resource exists but is closed to new submissions."""
    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(
            f"{resource_type} '{resource_id}' is not accepting answers",
            "RESOURCE_INACTIVE", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.WARNING, 400,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Storage Errors (500-level) ─────────────────────────────────

class StorageError(OgiriError):
    """Backing file could not be read, written, or (de)serialized."""
    def __init__(self, operation: str):
        super().__init__(
            f"Storage {operation} failed",
            "STORAGE_ERROR", ErrorCategory.STORAGE,
            ErrorSeverity.CRITICAL, 500,
        )
        self.operation = operation


class DuplicateRecordError(OgiriError):
    """Create attempted with an id already present in the store."""
    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(
            f"Failed to create {resource_type.lower()}",
            "DUPLICATE_RECORD", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, 500,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id
