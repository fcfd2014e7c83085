"""Per-language resolution tables.

A resolution table is a small tree of match arms that maps a runtime
(script, country) pair onto the most specific locale the data provides
for one language. Tables are plain data so they can be inspected and
tested without rendering them into any output syntax.

Specificity, most specific first:
    1. script and country both match a locale; once the script has any
       country locale, country-only locales of the language also match here
    2. script matches: the language_script locale, or a stand-in that
       carries the script when no language_script locale exists
    3. country matches, consulted only when no script arm was entered
    4. the bare-language locale

A language with a single locale always resolves to it.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from localegen.enums import MatchState
from localegen.locale_utils import LocaleKey, normalize_locale, parse_locale_key

if TYPE_CHECKING:
    from collections.abc import Mapping

    from localegen.hierarchy.builder import LocaleGroups

__all__ = [
    "CountryArm",
    "LocaleDispatcher",
    "Resolution",
    "ResolutionTable",
    "ScriptArm",
    "build_resolution_table",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CountryArm:
    """Country code branch returning a specific locale."""

    country: str
    target: LocaleKey


@dataclass(frozen=True, slots=True)
class ScriptArm:
    """Script code branch.

    Attributes:
        script: Script code this arm matches
        countries: Country branches tried inside the arm: locales with this
            script, then country-only locales, when the script has any
            country locale at all
        fallback: Locale returned when no country branch matches
        synthetic: True if ``fallback`` is a stand-in because the data has
            no language_script locale
    """

    script: str
    countries: tuple[CountryArm, ...]
    fallback: LocaleKey
    synthetic: bool = False


@dataclass(frozen=True, slots=True)
class Resolution:
    """Outcome of resolving a (language, script, country) triple.

    Attributes:
        locale: Best matching locale, None only for unsupported languages
        state: Terminal state of the resolution pass
    """

    locale: LocaleKey | None
    state: MatchState


def _match_country(arms: tuple[CountryArm, ...], country: str | None) -> LocaleKey | None:
    if country is None:
        return None
    for arm in arms:
        if arm.country == country:
            return arm.target
    return None


@dataclass(frozen=True, slots=True)
class ResolutionTable:
    """Decision structure for one language.

    Attributes:
        language: Language code the table serves
        default: Locale returned when nothing more specific matches
        single: True when the language has exactly one locale
        scripts: Script arms, sorted by script code
        countries: Country arms consulted when no script arm matched
    """

    language: str
    default: LocaleKey
    single: bool = False
    scripts: tuple[ScriptArm, ...] = ()
    countries: tuple[CountryArm, ...] = ()

    def script_arm(self, script: str | None) -> ScriptArm | None:
        if script is None:
            return None
        for arm in self.scripts:
            if arm.script == script:
                return arm
        return None

    def resolve(self, script: str | None = None, country: str | None = None) -> Resolution:
        """Resolve a runtime script/country pair to a locale of this language.

        Single pass with no backtracking: once a script arm is entered its
        fallback is final, even if a country-only arm would have matched.

        Args:
            script: Requested script code, if any
            country: Requested country code, if any

        Returns:
            Resolution carrying the chosen locale and the terminal state
        """
        if self.single:
            return Resolution(self.default, MatchState.LANGUAGE_ONLY)

        arm = self.script_arm(script)
        if arm is not None:
            target = _match_country(arm.countries, country)
            if target is not None:
                return Resolution(target, MatchState.SCRIPT_AND_COUNTRY_MATCHED)
            return Resolution(arm.fallback, MatchState.SCRIPT_MATCHED)

        target = _match_country(self.countries, country)
        if target is not None:
            return Resolution(target, MatchState.COUNTRY_ONLY_MATCHED)
        return Resolution(self.default, MatchState.LANGUAGE_ONLY)


def _script_arm(language: str, script: str, groups: LocaleGroups) -> ScriptArm:
    locales = groups.locales(language)
    carriers = [key for key in locales if key.script == script]
    countries: list[CountryArm] = []
    if any(key.country is not None for key in carriers):
        # Country-only locales join the arm; the scripted locale wins a shared country.
        seen: set[str] = set()
        candidates = [key for key in carriers if key.country is not None] + [
            key for key in locales if key.script is None and key.country is not None
        ]
        for key in candidates:
            if key.country in seen:
                continue
            seen.add(key.country)
            countries.append(CountryArm(key.country, key))
    explicit = next((key for key in carriers if key.country is None), None)
    if explicit is not None:
        return ScriptArm(script, tuple(countries), explicit)

    # Sorted discovery order decides the stand-in.
    stand_in = carriers[0]
    if len(carriers) > 1:
        logger.warning(
            "No %s_%s bundle; %d locales share the script, using %s as stand-in",
            language,
            script,
            len(carriers),
            stand_in.raw,
        )
    return ScriptArm(script, tuple(countries), stand_in, synthetic=True)


def build_resolution_table(language: str, groups: LocaleGroups) -> ResolutionTable:
    """Build the resolution table of one language.

    Args:
        language: Language code present in ``groups``
        groups: Grouping of all locales in the data

    Returns:
        ResolutionTable for the language

    Raises:
        MissingFallbackLocaleError: If a multi-locale language has no
            bare-language locale to default to
    """
    locales = groups.locales(language)
    if len(locales) == 1:
        return ResolutionTable(language=language, default=locales[0], single=True)

    default = groups.root(language)
    scripts = tuple(
        _script_arm(language, script, groups) for script in groups.scripts(language)
    )

    # A country-only locale beats a scripted one for the same country.
    with_country = sorted(
        (key for key in locales if key.country is not None),
        key=lambda key: (key.script is not None, key.raw),
    )
    countries: list[CountryArm] = []
    seen: set[str] = set()
    for key in with_country:
        if key.country in seen:
            continue
        seen.add(key.country)
        countries.append(CountryArm(key.country, key))

    return ResolutionTable(
        language=language,
        default=default,
        scripts=scripts,
        countries=tuple(countries),
    )


class LocaleDispatcher:
    """Resolves an arbitrary locale request to the best known locale.

    Dispatches on language code, then delegates to the language's table.

    Example:
        >>> dispatcher = build_hierarchy(context).dispatcher
        >>> dispatcher.resolve("zh", "Hant", "TW").locale.raw
        'zh_Hant_TW'
        >>> dispatcher.resolve("en", None, "AU").locale.raw
        'en'
    """

    __slots__ = ("_tables",)

    def __init__(self, tables: Mapping[str, ResolutionTable]) -> None:
        self._tables = dict(tables)

    @property
    def supported_languages(self) -> tuple[str, ...]:
        """Supported language codes, sorted."""
        return tuple(sorted(self._tables))

    def is_supported(self, language: str) -> bool:
        return language in self._tables

    def table(self, language: str) -> ResolutionTable:
        """Resolution table of a supported language.

        Raises:
            KeyError: If the language is not supported
        """
        return self._tables[language]

    def resolve(
        self, language: str, script: str | None = None, country: str | None = None
    ) -> Resolution:
        """Resolve a (language, script, country) triple.

        Returns:
            Resolution; state NO_MATCH with locale None for unsupported languages
        """
        table = self._tables.get(language)
        if table is None:
            return Resolution(None, MatchState.NO_MATCH)
        return table.resolve(script, country)

    def resolve_identifier(self, locale_code: str) -> Resolution:
        """Resolve a locale code such as 'zh-Hant-TW' or 'en_AU'.

        Raises:
            MalformedLocaleError: If the code does not parse
        """
        key = parse_locale_key(normalize_locale(locale_code))
        return self.resolve(key.language, key.script, key.country)
