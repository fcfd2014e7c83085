"""Locale identifier parsing and description.

Decomposes underscore-separated locale identifiers into language, script
and country subtags using the length heuristic bundle filenames follow,
and describes locales in English using Babel's CLDR display names.

Python 3.13+.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import TYPE_CHECKING

from localegen.constants import LOCALE_SEPARATOR, MAX_LOCALE_PARTS, MIN_SCRIPT_LENGTH
from localegen.diagnostics import ErrorTemplate, MalformedLocaleError

if TYPE_CHECKING:
    from babel import Locale

    from localegen.types import LocaleIdentifier

__all__ = [
    "LocaleKey",
    "describe_locale",
    "get_babel_locale",
    "normalize_locale",
    "parse_locale_key",
]


@dataclass(frozen=True, slots=True)
class LocaleKey:
    """Parsed locale identifier.

    Does not promise validity of the subtags themselves; only the
    structure of the identifier is checked.

    Attributes:
        language: Language subtag (e.g., 'zh')
        script: Script subtag (e.g., 'Hant') or None
        country: Country subtag (e.g., 'TW', '419') or None
        raw: Original identifier as found in the data
    """

    language: str
    script: str | None
    country: str | None
    raw: str

    @property
    def specificity(self) -> int:
        """Number of optional subtags present (0 to 2)."""
        return (self.script is not None) + (self.country is not None)

    @property
    def is_language_only(self) -> bool:
        return self.script is None and self.country is None

    @property
    def language_script(self) -> str | None:
        """Identifier of the script-level locale this key belongs to, if any."""
        if self.script is None:
            return None
        return f"{self.language}{LOCALE_SEPARATOR}{self.script}"

    def __str__(self) -> str:
        return self.raw


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to the underscore form used by bundles.

    Example:
        >>> normalize_locale("zh-Hant-TW")
        'zh_Hant_TW'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.replace("-", LOCALE_SEPARATOR)


@functools.lru_cache(maxsize=512)
def parse_locale_key(locale_id: LocaleIdentifier) -> LocaleKey:
    """Parse a locale identifier into its subtags.

    Part 0 is always the language. With two parts, the second is a script
    when it is at least four characters long and a country otherwise. With
    three parts, the longer of the two trailing parts is the script and the
    shorter the country, in either order.

    Args:
        locale_id: Identifier such as 'en', 'en_GB', 'zh_Hant' or 'zh_Hant_TW'

    Returns:
        Parsed LocaleKey

    Raises:
        MalformedLocaleError: If the identifier has no parts, more than three
            parts, an empty part, or equal-length script and country subtags

    Example:
        >>> parse_locale_key("zh_Hant_TW")
        LocaleKey(language='zh', script='Hant', country='TW', raw='zh_Hant_TW')
        >>> parse_locale_key("es_419").country
        '419'
    """
    parts = locale_id.split(LOCALE_SEPARATOR) if locale_id else []
    if not parts or len(parts) > MAX_LOCALE_PARTS or not all(parts):
        raise MalformedLocaleError(
            ErrorTemplate.locale_malformed(locale_id, len(parts)), locale_id=locale_id
        )

    script: str | None = None
    country: str | None = None
    match parts:
        case [_, subtag]:
            if len(subtag) >= MIN_SCRIPT_LENGTH:
                script = subtag
            else:
                country = subtag
        case [_, first, second]:
            if len(first) == len(second):
                raise MalformedLocaleError(
                    ErrorTemplate.locale_ambiguous_subtags(locale_id), locale_id=locale_id
                )
            script, country = (first, second) if len(first) > len(second) else (second, first)

    return LocaleKey(language=parts[0], script=script, country=country, raw=locale_id)


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Args:
        locale_code: Locale code (BCP-47 or underscore form accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def describe_locale(locale_id: LocaleIdentifier) -> str:
    """Describe a locale in English using CLDR display names.

    Subtags without a CLDR name are shown verbatim.

    Example:
        >>> describe_locale("en_GB")
        'English (United Kingdom)'
        >>> describe_locale("de")
        'German'
    """
    key = parse_locale_key(locale_id)
    english = get_babel_locale("en")
    language = english.languages.get(key.language, key.language)
    details = []
    if key.script is not None:
        details.append(english.scripts.get(key.script, key.script))
    if key.country is not None:
        details.append(english.territories.get(key.country, key.country))
    if not details:
        return language
    return f"{language} ({', '.join(details)})"
