"""Tests for pre-build bundle validation.

Python 3.13+.
"""

from localegen.diagnostics import DiagnosticCode
from localegen.hierarchy import BuildContext
from localegen.validation import validate_bundles


def _codes(context: BuildContext) -> list[DiagnosticCode]:
    return [issue.code for issue in validate_bundles(context).errors]


class TestValidateBundles:
    """Each check in isolation."""

    def test_sample_is_valid(self, sample_context: BuildContext) -> None:
        result = validate_bundles(sample_context)
        assert result.is_valid
        assert result.error_count == 0

    def test_missing_translations_are_not_issues(self) -> None:
        context = BuildContext(
            {"en": {"ok": "OK", "cancel": "Cancel"}, "de": {}},
            {"en": {"ok": {}, "cancel": {}}},
        )
        assert validate_bundles(context).is_valid

    def test_baseline_missing(self) -> None:
        context = BuildContext({"de": {"ok": "OK"}}, {})
        assert _codes(context) == [DiagnosticCode.VALIDATION_BASELINE_MISSING]

    def test_attributes_missing(self) -> None:
        context = BuildContext({"en": {"ok": "OK", "cancel": "Cancel"}}, {"en": {"ok": {}}})
        result = validate_bundles(context)
        assert [issue.code for issue in result.errors] == [
            DiagnosticCode.VALIDATION_ATTRIBUTES_MISSING
        ]
        assert result.errors[0].key == "cancel"

    def test_unknown_key(self) -> None:
        context = BuildContext(
            {"en": {"ok": "OK"}, "fr": {"ok": "OK", "extra": "x"}}, {"en": {"ok": {}}}
        )
        result = validate_bundles(context)
        assert [issue.code for issue in result.errors] == [DiagnosticCode.VALIDATION_UNKNOWN_KEY]
        assert result.errors[0].locale_id == "fr"
        assert result.errors[0].key == "extra"

    def test_language_root_missing(self) -> None:
        context = BuildContext({"en": {}, "zh_Hant": {}, "zh_Hant_TW": {}}, {"en": {}})
        result = validate_bundles(context)
        assert [issue.code for issue in result.errors] == [
            DiagnosticCode.VALIDATION_LANGUAGE_ROOT_MISSING
        ]
        assert result.errors[0].locale_id == "zh"

    def test_malformed_locale(self) -> None:
        context = BuildContext({"en": {}, "en_US_POSIX_x": {}}, {"en": {}})
        result = validate_bundles(context)
        assert [issue.code for issue in result.errors] == [
            DiagnosticCode.VALIDATION_LOCALE_MALFORMED
        ]
        assert "en_US_POSIX_x" in result.errors[0].message

    def test_collects_every_issue(self) -> None:
        context = BuildContext(
            {"en": {"ok": "OK"}, "fr_CA": {"extra": "x"}},
            {},
        )
        assert sorted(_codes(context)) == sorted(
            [
                DiagnosticCode.VALIDATION_ATTRIBUTES_MISSING,
                DiagnosticCode.VALIDATION_UNKNOWN_KEY,
                DiagnosticCode.VALIDATION_LANGUAGE_ROOT_MISSING,
            ]
        )
