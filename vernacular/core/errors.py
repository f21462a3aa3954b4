"""Error Hierarchy — typed, categorized exceptions for all persistence-model failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - IllegalStateError signals protocol misuse (closed sets, key reassignment)
    - InvalidArgumentError signals a rejected constructor/operation argument
    - CompoundValidationError is the only error meant for end users: it carries
      every violation of a non-civilized entity, in the order they were found
    - to_response() produces a JSON-ready envelope

Design Decisions:
    - Single hierarchy with VernacularError base: callers catch one type for
      every failure raised by this package
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING
from datetime import datetime, timezone

if TYPE_CHECKING:
    from vernacular.core.violations import Violation


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
    CONFLICT = "conflict"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    entity_type: str | None = None
    entity_key: str | None = None


class VernacularError(Exception):
    """Base exception for all vernacular errors."""

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

    def to_response(self) -> dict:
        """Convert to standardized error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "entity_type": self.context.entity_type,
                    "entity_key": self.context.entity_key,
                },
            }
        }


# ─── Protocol Misuse ────────────────────────────────────────────

class IllegalStateError(VernacularError):
    """Operation not allowed in the object's current state."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "ILLEGAL_STATE", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context,
        )


class InvalidArgumentError(VernacularError, ValueError):
    """Argument outside its accepted range."""
    def __init__(self, argument: str, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"Invalid argument '{argument}': {message}",
            "INVALID_ARGUMENT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context,
        )
        self.argument = argument


# ─── Semantic Errors ────────────────────────────────────────────

class CompoundValidationError(VernacularError):
    """An entity is not civilized. Carries every violation found."""
    def __init__(
        self, violations: tuple["Violation", ...], context: ErrorContext | None = None,
    ):
        count = len(violations)
        super().__init__(
            f"{count} violation(s): " + "; ".join(str(v) for v in violations),
            "NOT_CIVILIZED", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.WARNING, context,
        )
        self.violations = violations

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["violations"] = [v.to_dict() for v in self.violations]
        return response
