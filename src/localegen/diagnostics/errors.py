"""Exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.
Every error is fatal to the current batch pass.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "BundleLoadError",
    "LocaleGenError",
    "MalformedLocaleError",
    "MissingBaselineKeyError",
    "MissingFallbackLocaleError",
    "UnsupportedAttributeValueError",
]


class LocaleGenError(Exception):
    """Base exception for all localegen errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize LocaleGenError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class MalformedLocaleError(LocaleGenError):
    """Locale identifier does not follow language[_Script][_COUNTRY].

    Raised for zero or more than three parts, and for three-part
    identifiers whose script and country subtags have equal length.

    Attributes:
        locale_id: The offending identifier
    """

    def __init__(self, message: str | Diagnostic, *, locale_id: str = "") -> None:
        super().__init__(message)
        self.locale_id = locale_id


class UnsupportedAttributeValueError(LocaleGenError):
    """Typed resource value has no known mapping.

    Attributes:
        value: The value that could not be mapped
        attribute_type: Declared type (e.g., 'icuShortTimePattern')
        accepted_values: Values the declared type accepts
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        value: str = "",
        attribute_type: str = "",
        accepted_values: tuple[str, ...] = (),
    ) -> None:
        super().__init__(message)
        self.value = value
        self.attribute_type = attribute_type
        self.accepted_values = accepted_values


class MissingBaselineKeyError(LocaleGenError):
    """Resource key has no entry in the baseline locale's attribute map.

    Indicates the validator gate was skipped or bypassed; the hierarchy
    builder aborts rather than guessing the key's metadata.

    Attributes:
        key: Resource key without baseline metadata
        baseline_locale: Baseline locale consulted
    """

    def __init__(
        self, message: str | Diagnostic, *, key: str = "", baseline_locale: str = ""
    ) -> None:
        super().__init__(message)
        self.key = key
        self.baseline_locale = baseline_locale


class MissingFallbackLocaleError(LocaleGenError):
    """Language has locales but no bare-language locale to root its tree.

    Attributes:
        locale_id: Locale whose fallback chain could not be rooted
        language: Language code whose bare locale is absent
    """

    def __init__(
        self, message: str | Diagnostic, *, locale_id: str = "", language: str = ""
    ) -> None:
        super().__init__(message)
        self.locale_id = locale_id
        self.language = language


class BundleLoadError(LocaleGenError):
    """Bundle file could not be read or decoded.

    Attributes:
        path: Path of the bundle file
    """

    def __init__(self, message: str | Diagnostic, *, path: str = "") -> None:
        super().__init__(message)
        self.path = path
