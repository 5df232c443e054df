# xrectsel/domain/common/errors.py

"""
Domain-specific error types for standardized error handling.

Every failure the tool can report is one of these. Services hand them back
inside a failed Result; the command line turns them into a single diagnostic
line on stderr and a non-zero exit status.
"""
from enum import Enum
from typing import Optional, Dict, Any


class ErrorCategory(Enum):
    """Categories of errors in the application."""
    DISPLAY = "Display"
    INPUT = "Input"
    TEMPLATE = "Template"
    VALIDATION = "Validation"
    CONFIGURATION = "Configuration"
    UNKNOWN = "Unknown"


class ErrorSeverity(Enum):
    """Severity levels for errors."""
    WARNING = "Warning"
    ERROR = "Error"
    CRITICAL = "Critical"


class DomainError:
    """
    Base class for domain-specific errors.

    Carries a human-readable message plus the structured bits (category,
    code, details) used for logging and for tests that check which failure
    happened without matching message text.
    """

    def __init__(self,
                 message: str,
                 category: ErrorCategory = ErrorCategory.UNKNOWN,
                 severity: ErrorSeverity = ErrorSeverity.ERROR,
                 code: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None,
                 inner_error: Optional[Exception] = None):
        """
        Initialize a domain error.

        Args:
            message: Human-readable error message, shown after the tool name
            category: Error category
            severity: Error severity
            code: Stable identifier for programmatic handling
            details: Optional additional error details
            inner_error: Optional original exception
        """
        self.message = message
        self.category = category
        self.severity = severity
        self.code = code
        self.details = details or {}
        self.inner_error = inner_error

    def __str__(self) -> str:
        return f"{self.category.value} Error: {self.message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


class ValidationError(DomainError):
    """Error for invalid user input."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None,
                 inner_error: Optional[Exception] = None,
                 category: ErrorCategory = ErrorCategory.VALIDATION,
                 code: Optional[str] = None):
        super().__init__(
            message=message,
            category=category,
            severity=ErrorSeverity.ERROR,
            code=code,
            details=details,
            inner_error=inner_error
        )


class ConfigurationError(DomainError):
    """Error for configuration file issues."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None, inner_error: Optional[Exception] = None):
        super().__init__(
            message=message,
            category=ErrorCategory.CONFIGURATION,
            severity=ErrorSeverity.ERROR,
            details=details,
            inner_error=inner_error
        )


class DisplayConnectionError(DomainError):
    """The X display could not be reached."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None, inner_error: Optional[Exception] = None):
        super().__init__(
            message=message,
            category=ErrorCategory.DISPLAY,
            severity=ErrorSeverity.CRITICAL,
            code="ConnectionFailure",
            details=details,
            inner_error=inner_error
        )


class SelectionError(DomainError):
    """Base class for failures of the interactive selection."""

    def __init__(self, message: str,
                 category: ErrorCategory = ErrorCategory.INPUT,
                 code: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None,
                 inner_error: Optional[Exception] = None):
        super().__init__(
            message=message,
            category=category,
            severity=ErrorSeverity.ERROR,
            code=code,
            details=details,
            inner_error=inner_error
        )


class GrabFailedError(SelectionError):
    """The pointer is grabbed by another client or the grab was refused."""

    def __init__(self, message: str = "failed to grab pointer",
                 details: Optional[Dict[str, Any]] = None, inner_error: Optional[Exception] = None):
        super().__init__(
            message=message,
            category=ErrorCategory.INPUT,
            code="GrabFailed",
            details=details,
            inner_error=inner_error
        )


class GeometryQueryError(SelectionError):
    """The root window geometry could not be read."""

    def __init__(self, message: str = "failed to get root window geometry",
                 details: Optional[Dict[str, Any]] = None, inner_error: Optional[Exception] = None):
        super().__init__(
            message=message,
            category=ErrorCategory.DISPLAY,
            code="GeometryQueryFailed",
            details=details,
            inner_error=inner_error
        )


class TemplateSyntaxError(ValidationError):
    """Base class for malformed format strings."""

    def __init__(self, message: str, position: int, code: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        details = dict(details or {})
        details["position"] = position
        super().__init__(
            message=message,
            details=details,
            category=ErrorCategory.TEMPLATE,
            code=code
        )
        self.position = position


class MalformedRoundingError(TemplateSyntaxError):
    """A rounding clause ran into the end of the format string."""

    def __init__(self, position: int, stop_character: str = "]"):
        super().__init__(
            message=f"No matching {stop_character} found",
            position=position,
            code="MalformedRounding",
            details={"expected": stop_character}
        )


class InvalidDigitError(TemplateSyntaxError):
    """A rounding clause contains something other than a decimal digit."""

    def __init__(self, position: int, character: str):
        super().__init__(
            message=f"Unexpected character {character}",
            position=position,
            code="InvalidDigit",
            details={"character": character}
        )
        self.character = character
