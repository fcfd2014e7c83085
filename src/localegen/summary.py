"""Supported-language summary.

Describes each supported language with the number of country variations
and scripts the data provides for it.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from localegen.locale_utils import describe_locale

if TYPE_CHECKING:
    from localegen.hierarchy.forest import HierarchyForest

__all__ = [
    "describe_language",
    "describe_supported_languages",
]


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"


def describe_language(language: str, country_count: int, script_count: int) -> str:
    """One summary line for a language.

    Example:
        >>> describe_language("en", 1, 0)
        '`en` - English (plus one country variation)'
        >>> describe_language("zh", 3, 2)
        '`zh` - Chinese (plus 3 country variations and 2 scripts)'
    """
    name = describe_locale(language)
    scripts = f" and {_plural(script_count, 'script')}" if script_count else ""
    if country_count == 0:
        if script_count == 0:
            return f"`{language}` - {name}"
        return f"`{language}` - {name} (plus {_plural(script_count, 'script')})"
    if country_count == 1:
        return f"`{language}` - {name} (plus one country variation{scripts})"
    return f"`{language}` - {name} (plus {country_count} country variations{scripts})"


def describe_supported_languages(forest: HierarchyForest) -> list[str]:
    """Summary lines for every language in the forest, sorted by language."""
    lines = []
    for language in forest.languages:
        locales = forest.groups.locales(language)
        scripts = forest.groups.scripts(language)
        # With scripts present, only script-carrying locales count as variations.
        country_count = sum(
            1
            for key in locales
            if key.country is not None and (not scripts or key.script is not None)
        )
        script_count = len(scripts)
        lines.append(describe_language(language, country_count, script_count))
    return lines
