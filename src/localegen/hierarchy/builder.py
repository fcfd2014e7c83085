"""Locale grouping.

Groups parsed locale keys by language, records the scripts seen per
language and the countries seen per (language, script) pair. Every
grouping is sorted so downstream stages are reproducible across runs.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import TYPE_CHECKING

from localegen.diagnostics import ErrorTemplate, MissingFallbackLocaleError
from localegen.locale_utils import LocaleKey, parse_locale_key

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from localegen.types import LocaleIdentifier

__all__ = [
    "LocaleGroups",
    "group_locales",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LocaleGroups:
    """Aggregated view of every locale present in the data.

    Attributes:
        language_to_locales: Language to its locale keys, sorted by identifier
        language_to_scripts: Language to script codes seen in its locales
        language_script_to_countries: (language, script) to country codes
            seen on locales carrying both
        by_identifier: Identifier to parsed key
    """

    language_to_locales: Mapping[str, tuple[LocaleKey, ...]]
    language_to_scripts: Mapping[str, tuple[str, ...]]
    language_script_to_countries: Mapping[tuple[str, str], tuple[str, ...]]
    by_identifier: Mapping[LocaleIdentifier, LocaleKey]

    @property
    def languages(self) -> tuple[str, ...]:
        """Language codes, sorted."""
        return tuple(sorted(self.language_to_locales))

    def locales(self, language: str) -> tuple[LocaleKey, ...]:
        return self.language_to_locales.get(language, ())

    def scripts(self, language: str) -> tuple[str, ...]:
        return self.language_to_scripts.get(language, ())

    def countries(self, language: str, script: str) -> tuple[str, ...]:
        return self.language_script_to_countries.get((language, script), ())

    def find(self, locale_id: LocaleIdentifier) -> LocaleKey | None:
        return self.by_identifier.get(locale_id)

    def root(self, language: str, *, for_locale: str | None = None) -> LocaleKey:
        """Bare-language locale of a language.

        Args:
            language: Language code
            for_locale: Locale needing the root, reported on failure

        Raises:
            MissingFallbackLocaleError: If the data has no bare-language locale
        """
        key = self.by_identifier.get(language)
        if key is None:
            locale_id = for_locale or language
            raise MissingFallbackLocaleError(
                ErrorTemplate.fallback_locale_missing(locale_id, language),
                locale_id=locale_id,
                language=language,
            )
        return key


def group_locales(locale_ids: Iterable[LocaleIdentifier]) -> LocaleGroups:
    """Parse and group locale identifiers.

    Args:
        locale_ids: Every locale identifier present in the loaded data

    Returns:
        LocaleGroups with sorted groupings

    Raises:
        MalformedLocaleError: If any identifier fails to parse

    Example:
        >>> groups = group_locales(["zh_Hant_TW", "zh", "zh_Hant", "en"])
        >>> groups.languages
        ('en', 'zh')
        >>> groups.scripts("zh")
        ('Hant',)
        >>> groups.countries("zh", "Hant")
        ('TW',)
    """
    by_language: defaultdict[str, list[LocaleKey]] = defaultdict(list)
    scripts: defaultdict[str, set[str]] = defaultdict(set)
    countries: defaultdict[tuple[str, str], set[str]] = defaultdict(set)
    by_identifier: dict[LocaleIdentifier, LocaleKey] = {}

    for locale_id in sorted(set(locale_ids)):
        key = parse_locale_key(locale_id)
        by_identifier[locale_id] = key
        by_language[key.language].append(key)
        if key.script is not None:
            scripts[key.language].add(key.script)
            if key.country is not None:
                countries[(key.language, key.script)].add(key.country)

    logger.debug(
        "Grouped %d locales into %d languages (%d with scripts)",
        len(by_identifier),
        len(by_language),
        len(scripts),
    )

    return LocaleGroups(
        language_to_locales={
            language: tuple(keys) for language, keys in sorted(by_language.items())
        },
        language_to_scripts={
            language: tuple(sorted(codes)) for language, codes in sorted(scripts.items())
        },
        language_script_to_countries={
            pair: tuple(sorted(codes)) for pair, codes in sorted(countries.items())
        },
        by_identifier=by_identifier,
    )
