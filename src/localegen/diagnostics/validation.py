"""Validation result types for the bundle validator gate.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from .codes import DiagnosticCode

__all__ = [
    "ValidationIssue",
    "ValidationResult",
]


@dataclass(frozen=True, slots=True)
class ValidationIssue:
    """Single structural problem found in the loaded bundles.

    Attributes:
        code: Diagnostic code identifying the check that failed
        message: Human-readable description
        locale_id: Locale the issue was found in (None for global issues)
        key: Resource key involved (None if not key-specific)
    """

    code: DiagnosticCode
    message: str
    locale_id: str | None = None
    key: str | None = None

    def format(self) -> str:
        """Format issue as a single line."""
        location = ""
        if self.locale_id is not None:
            location = f" in '{self.locale_id}'"
            if self.key is not None:
                location += f" at '{self.key}'"
        return f"[{self.code.name}]{location}: {self.message}"


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Immutable outcome of validating a full bundle set.

    Example:
        >>> result = ValidationResult.valid()
        >>> result.is_valid
        True
    """

    errors: tuple[ValidationIssue, ...]

    @property
    def is_valid(self) -> bool:
        """True if no issues were found."""
        return len(self.errors) == 0

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @staticmethod
    def valid() -> "ValidationResult":
        """Create a result with no issues."""
        return ValidationResult(errors=())

    @staticmethod
    def invalid(errors: tuple[ValidationIssue, ...]) -> "ValidationResult":
        """Create a result carrying the given issues."""
        return ValidationResult(errors=errors)
