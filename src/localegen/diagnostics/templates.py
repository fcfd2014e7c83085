"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    """

    _LOCALE_FORM_HINT = "Use language[_Script][_COUNTRY], e.g. 'en', 'en_GB', 'zh_Hant_TW'"

    @staticmethod
    def locale_malformed(locale_id: str, part_count: int) -> Diagnostic:
        """Locale identifier has the wrong number of parts.

        Args:
            locale_id: The identifier that failed to parse
            part_count: Number of '_'-separated parts found

        Returns:
            Diagnostic for LOCALE_MALFORMED
        """
        msg = f"Locale identifier '{locale_id}' has {part_count} part(s), expected 1 to 3"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_MALFORMED,
            message=msg,
            hint=ErrorTemplate._LOCALE_FORM_HINT,
            location=locale_id,
        )

    @staticmethod
    def locale_ambiguous_subtags(locale_id: str) -> Diagnostic:
        """Script and country subtags cannot be told apart.

        Args:
            locale_id: The three-part identifier with equal-length subtags

        Returns:
            Diagnostic for LOCALE_AMBIGUOUS_SUBTAGS
        """
        msg = f"Locale identifier '{locale_id}' has script and country subtags of equal length"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_AMBIGUOUS_SUBTAGS,
            message=msg,
            hint="Scripts are 4 letters (Hant), countries 2-3 characters (TW, 419)",
            location=locale_id,
        )

    @staticmethod
    def attribute_value_unsupported(
        value: str, attribute_type: str, accepted: Iterable[str]
    ) -> Diagnostic:
        """Typed resource value is outside its controlled vocabulary.

        Args:
            value: The unsupported value
            attribute_type: Declared type name
            accepted: Values the type accepts

        Returns:
            Diagnostic for ATTRIBUTE_VALUE_UNSUPPORTED
        """
        listing = "\n  ".join(accepted)
        msg = (
            f"'{value}' is not one of the {attribute_type} values supported. "
            f"Here is the list of supported values:\n  {listing}"
        )
        return Diagnostic(
            code=DiagnosticCode.ATTRIBUTE_VALUE_UNSUPPORTED,
            message=msg,
            hint=f"Change the value or extend the {attribute_type} mapping",
        )

    @staticmethod
    def baseline_key_missing(key: str, baseline_locale: str) -> Diagnostic:
        """Resource key absent from the baseline attribute map.

        Args:
            key: Resource key
            baseline_locale: Baseline locale identifier

        Returns:
            Diagnostic for BASELINE_KEY_MISSING
        """
        msg = f"Resource '{key}' has no attributes in baseline locale '{baseline_locale}'"
        return Diagnostic(
            code=DiagnosticCode.BASELINE_KEY_MISSING,
            message=msg,
            hint=f"Add an '@{key}' entry to the '{baseline_locale}' bundle",
            location=baseline_locale,
        )

    @staticmethod
    def fallback_locale_missing(locale_id: str, language: str) -> Diagnostic:
        """Bare-language locale absent for a language with other locales.

        Args:
            locale_id: Locale whose chain cannot be rooted
            language: Language code

        Returns:
            Diagnostic for FALLBACK_LOCALE_MISSING
        """
        msg = f"Locale '{locale_id}' has no '{language}' bundle to fall back to"
        return Diagnostic(
            code=DiagnosticCode.FALLBACK_LOCALE_MISSING,
            message=msg,
            hint=f"Provide a '{language}' bundle with the language defaults",
            location=locale_id,
        )

    @staticmethod
    def bundle_unreadable(path: str, reason: str) -> Diagnostic:
        """Bundle file could not be read or decoded.

        Args:
            path: Bundle file path
            reason: Underlying error text

        Returns:
            Diagnostic for BUNDLE_UNREADABLE
        """
        msg = f"Failed to read bundle: {reason}"
        return Diagnostic(
            code=DiagnosticCode.BUNDLE_UNREADABLE,
            message=msg,
            hint="Bundles must be UTF-8 encoded JSON",
            location=path,
        )

    @staticmethod
    def bundle_not_object(path: str, type_name: str) -> Diagnostic:
        """Bundle decoded to something other than a JSON object.

        Args:
            path: Bundle file path
            type_name: Python type name of the decoded value

        Returns:
            Diagnostic for BUNDLE_NOT_OBJECT
        """
        msg = f"Bundle must contain a JSON object, got {type_name}"
        return Diagnostic(
            code=DiagnosticCode.BUNDLE_NOT_OBJECT,
            message=msg,
            location=path,
        )
