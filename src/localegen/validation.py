"""Structural validation of a loaded bundle set.

Gate run before the hierarchy build. Reports every issue found instead
of stopping at the first, so a single run lists everything to fix.
Translation completeness is deliberately not checked: locales may omit
any key and inherit it from their fallback chain.

Checks:
    - every locale identifier parses
    - the baseline locale is present
    - every baseline resource has baseline attributes
    - no locale carries a resource the baseline lacks
    - every language has its bare-language locale

Python 3.13+.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from localegen.diagnostics import (
    DiagnosticCode,
    MalformedLocaleError,
    ValidationIssue,
    ValidationResult,
)
from localegen.locale_utils import parse_locale_key

if TYPE_CHECKING:
    from localegen.hierarchy.context import BuildContext

__all__ = ["validate_bundles"]

logger = logging.getLogger(__name__)


def validate_bundles(context: BuildContext) -> ValidationResult:
    """Validate a bundle set before building its hierarchy.

    Args:
        context: Loaded bundles

    Returns:
        ValidationResult listing every issue found
    """
    issues: list[ValidationIssue] = []
    baseline = context.baseline_locale

    languages: set[str] = set()
    for locale_id in context.locale_ids:
        try:
            languages.add(parse_locale_key(locale_id).language)
        except MalformedLocaleError as e:
            issues.append(
                ValidationIssue(
                    code=DiagnosticCode.VALIDATION_LOCALE_MALFORMED,
                    message=str(e.diagnostic or e),
                    locale_id=locale_id,
                )
            )

    if not context.has_locale(baseline):
        issues.append(
            ValidationIssue(
                code=DiagnosticCode.VALIDATION_BASELINE_MISSING,
                message=f"Baseline locale '{baseline}' has no bundle",
            )
        )
    else:
        baseline_keys = context.resources(baseline).keys()
        attributes = context.baseline_attributes
        issues.extend(
            ValidationIssue(
                code=DiagnosticCode.VALIDATION_ATTRIBUTES_MISSING,
                message=f"Resource '{key}' has no '@{key}' attributes",
                locale_id=baseline,
                key=key,
            )
            for key in sorted(baseline_keys)
            if key not in attributes
        )
        for locale_id in context.locale_ids:
            if locale_id == baseline:
                continue
            issues.extend(
                ValidationIssue(
                    code=DiagnosticCode.VALIDATION_UNKNOWN_KEY,
                    message=f"Resource '{key}' is not defined by baseline '{baseline}'",
                    locale_id=locale_id,
                    key=key,
                )
                for key in sorted(context.resources(locale_id))
                if key not in baseline_keys
            )

    issues.extend(
        ValidationIssue(
            code=DiagnosticCode.VALIDATION_LANGUAGE_ROOT_MISSING,
            message=f"Language '{language}' has no '{language}' bundle to fall back to",
            locale_id=language,
        )
        for language in sorted(languages)
        if not context.has_locale(language)
    )

    if issues:
        logger.info("Validation found %d issue(s)", len(issues))
        return ValidationResult.invalid(tuple(issues))
    return ValidationResult.valid()
