"""Error Hierarchy — typed, categorized exceptions for StatusLab failure modes.

Invariants:
    - Every StatusLabError has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - to_response() produces the REST envelope: top-level "message" plus "error" details
    - SimulatedServerError is NOT a StatusLabError — it gets the generic 500, not the domain envelope

Design Decisions:
    - Single hierarchy with StatusLabError base: one global handler catches all (ADR: uniform error shape)
    - Decision functions return outcomes for expected failures; only the 500 path raises
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
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logging and the response envelope."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    path: str | None = None
    field_name: str | None = None


class StatusLabError(Exception):
    """Base exception for all StatusLab errors."""

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
            "message": self.message,
            "error": {
                "code": self.code,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "path": self.context.path,
                    "field": self.context.field_name,
                },
            },
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class InvalidRequestBodyError(StatusLabError):
    """Request body could not be decoded into a ResourceRequest."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"Bad Request: {message}",
            "INVALID_REQUEST_BODY", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


# ─── Faults (500-level) ─────────────────────────────────────────

class SimulatedServerError(Exception):
    """Deliberate unhandled fault raised by the internalerror endpoint."""

    def __init__(self, message: str = "Simulated internal server error."):
        super().__init__(message)
        self.message = message
