"""Diagnostic system for localegen errors.

Provides structured error diagnostics with codes and hints, the exception
hierarchy raised by the batch pass, and validation result types.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    BundleLoadError,
    LocaleGenError,
    MalformedLocaleError,
    MissingBaselineKeyError,
    MissingFallbackLocaleError,
    UnsupportedAttributeValueError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate
from .validation import ValidationIssue, ValidationResult

__all__ = [
    "BundleLoadError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "LocaleGenError",
    "MalformedLocaleError",
    "MissingBaselineKeyError",
    "MissingFallbackLocaleError",
    "OutputFormat",
    "UnsupportedAttributeValueError",
    "ValidationIssue",
    "ValidationResult",
]
