"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Locale identifier errors
        2000-2999: Resource attribute errors
        3000-3999: Hierarchy construction errors
        4000-4999: Bundle loading errors
        5000-5099: Validation errors
    """

    # Locale identifier errors (1000-1999)
    LOCALE_MALFORMED = 1001
    LOCALE_AMBIGUOUS_SUBTAGS = 1002

    # Resource attribute errors (2000-2999)
    ATTRIBUTE_VALUE_UNSUPPORTED = 2001

    # Hierarchy construction errors (3000-3999)
    BASELINE_KEY_MISSING = 3001
    FALLBACK_LOCALE_MISSING = 3002

    # Bundle loading errors (4000-4999)
    BUNDLE_UNREADABLE = 4001
    BUNDLE_NOT_OBJECT = 4002

    # Validation errors (5000-5099)
    VALIDATION_BASELINE_MISSING = 5001
    VALIDATION_ATTRIBUTES_MISSING = 5002
    VALIDATION_UNKNOWN_KEY = 5003
    VALIDATION_LANGUAGE_ROOT_MISSING = 5004
    VALIDATION_LOCALE_MALFORMED = 5005


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        location: Bundle file or locale the error relates to
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    location: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[LOCALE_MALFORMED]: Locale identifier 'en_US_x_y' has 4 parts
              = help: Use language[_Script][_COUNTRY]

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
