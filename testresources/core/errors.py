"""Error Hierarchy — typed, categorized exceptions for classpath inference failures.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - InvalidDependencyCoordinate is the only error the core raises
    - to_dict() produces a flat envelope suitable for build-tool reporting

Design Decisions:
    - Single hierarchy with ClasspathInferenceError base: integrations catch one type
    - ErrorContext as dataclass: carries the offending coordinate without coupling to logging
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and caller handling."""
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    CONFIGURATION = "configuration"


@dataclass
class ErrorContext:
    """Context attached to an error for debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    coordinate: str | None = None
    debug_info: dict[str, Any] | None = None


class ClasspathInferenceError(Exception):
    """Base exception for all classpath inference errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    def to_dict(self) -> dict:
        """Convert to a standardized error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "coordinate": self.context.coordinate,
            }
        }


# ─── Validation Errors ──────────────────────────────────────────

class InvalidDependencyCoordinate(ClasspathInferenceError):
    """A dependency coordinate violates its well-formedness precondition."""
    def __init__(
        self, message: str, field: str, value: object = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "INVALID_DEPENDENCY_COORDINATE", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context,
        )
        self.field = field
        self.value = value


# ─── Configuration Errors ───────────────────────────────────────

class VersionUnavailableError(ClasspathInferenceError):
    """No test resources version was supplied, configured, or installed."""
    def __init__(self, distribution: str, context: ErrorContext | None = None):
        super().__init__(
            f"Cannot determine test resources version: distribution "
            f"'{distribution}' is not installed and TEST_RESOURCES_VERSION is unset",
            "VERSION_UNAVAILABLE", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, context,
        )
        self.distribution = distribution
