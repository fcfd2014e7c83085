"""Tests for per-language resolution tables and the dispatcher.

Python 3.13+.
"""

import logging

import pytest

from localegen.diagnostics import MalformedLocaleError
from localegen.enums import MatchState
from localegen.hierarchy import (
    LocaleDispatcher,
    build_resolution_table,
    group_locales,
)

SAMPLE_IDS = ["en", "en_GB", "zh", "zh_Hant", "zh_Hant_TW"]


def _dispatcher(ids: list[str]) -> LocaleDispatcher:
    groups = group_locales(ids)
    return LocaleDispatcher(
        {language: build_resolution_table(language, groups) for language in groups.languages}
    )


def _resolve(
    ids: list[str], language: str, script: str | None = None, country: str | None = None
) -> tuple[str | None, MatchState]:
    resolution = _dispatcher(ids).resolve(language, script, country)
    return (
        resolution.locale.raw if resolution.locale is not None else None,
        resolution.state,
    )


class TestSampleResolution:
    """Resolution over en, en_GB, zh, zh_Hant, zh_Hant_TW."""

    def test_unknown_country_falls_to_language(self) -> None:
        assert _resolve(SAMPLE_IDS, "en", None, "AU") == ("en", MatchState.LANGUAGE_ONLY)

    def test_country_match(self) -> None:
        assert _resolve(SAMPLE_IDS, "en", None, "GB") == ("en_GB", MatchState.COUNTRY_ONLY_MATCHED)

    def test_script_and_country(self) -> None:
        assert _resolve(SAMPLE_IDS, "zh", "Hant", "TW") == (
            "zh_Hant_TW",
            MatchState.SCRIPT_AND_COUNTRY_MATCHED,
        )

    def test_script_only(self) -> None:
        assert _resolve(SAMPLE_IDS, "zh", "Hant") == ("zh_Hant", MatchState.SCRIPT_MATCHED)

    def test_script_with_unknown_country(self) -> None:
        assert _resolve(SAMPLE_IDS, "zh", "Hant", "HK") == ("zh_Hant", MatchState.SCRIPT_MATCHED)

    def test_language_only(self) -> None:
        assert _resolve(SAMPLE_IDS, "zh") == ("zh", MatchState.LANGUAGE_ONLY)

    def test_scripted_country_without_script_request(self) -> None:
        """Country arms of a scripted language list every locale with a country."""
        assert _resolve(SAMPLE_IDS, "zh", None, "TW") == (
            "zh_Hant_TW",
            MatchState.COUNTRY_ONLY_MATCHED,
        )

    def test_unrecognized_script_uses_country_arms(self) -> None:
        assert _resolve(SAMPLE_IDS, "zh", "Hans", "TW") == (
            "zh_Hant_TW",
            MatchState.COUNTRY_ONLY_MATCHED,
        )

    def test_unknown_language(self) -> None:
        assert _resolve(SAMPLE_IDS, "fr", None, "FR") == (None, MatchState.NO_MATCH)


class TestResolutionTable:
    """Structure of built tables."""

    def test_single_locale_language(self) -> None:
        """A language with one locale returns it for any request."""
        groups = group_locales(["de"])
        table = build_resolution_table("de", groups)
        assert table.single
        assert table.resolve("Latn", "AT").locale == groups.find("de")

    def test_no_scripts_table(self) -> None:
        table = build_resolution_table("en", group_locales(["en", "en_GB", "en_AU"]))
        assert table.scripts == ()
        assert [arm.country for arm in table.countries] == ["AU", "GB"]

    def test_script_arm_countries(self) -> None:
        table = build_resolution_table(
            "zh", group_locales(["zh", "zh_Hans", "zh_Hant", "zh_Hant_HK", "zh_Hant_TW"])
        )
        arm = table.script_arm("Hant")
        assert arm is not None
        assert [country.country for country in arm.countries] == ["HK", "TW"]
        assert arm.fallback.raw == "zh_Hant"
        assert not arm.synthetic
        hans = table.script_arm("Hans")
        assert hans is not None
        assert hans.countries == ()

    def test_synthetic_stand_in(self) -> None:
        """Without zh_Hant, the first locale carrying Hant stands in."""
        table = build_resolution_table(
            "zh", group_locales(["zh", "zh_Hant_TW", "zh_Hant_HK"])
        )
        arm = table.script_arm("Hant")
        assert arm is not None
        assert arm.synthetic
        assert arm.fallback.raw == "zh_Hant_HK"
        assert table.resolve("Hant", "MO").locale == arm.fallback
        assert table.resolve("Hant", "TW").locale is not None
        assert table.resolve("Hant", "TW").locale.raw == "zh_Hant_TW"  # type: ignore[union-attr]

    def test_synthetic_stand_in_logs_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="localegen.hierarchy.resolution"):
            build_resolution_table("zh", group_locales(["zh", "zh_Hant_TW", "zh_Hant_HK"]))
        assert "stand-in" in caplog.text

    def test_single_carrier_stand_in_is_quiet(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="localegen.hierarchy.resolution"):
            build_resolution_table("zh", group_locales(["zh", "zh_Hant_TW"]))
        assert caplog.text == ""

    def test_country_only_locale_beats_scripted(self) -> None:
        """zh_TW keeps the TW country arm even though zh_Hant_TW sorts first."""
        groups = group_locales(["zh", "zh_Hant", "zh_Hant_TW", "zh_TW"])
        table = build_resolution_table("zh", groups)
        assert table.resolve(None, "TW").locale == groups.find("zh_TW")
        assert table.resolve("Hant", "TW").locale == groups.find("zh_Hant_TW")

    def test_script_arm_commits(self) -> None:
        """Once a script arm is entered, country-only arms are not consulted."""
        groups = group_locales(["zh", "zh_Hans", "zh_TW"])
        resolution = build_resolution_table("zh", groups).resolve("Hans", "TW")
        assert resolution.locale == groups.find("zh_Hans")
        assert resolution.state is MatchState.SCRIPT_MATCHED

    def test_country_only_locale_joins_script_arm(self) -> None:
        """zh_HK answers (Hant, HK) once the Hant arm has country branches."""
        groups = group_locales(["zh", "zh_Hant", "zh_Hant_TW", "zh_HK"])
        table = build_resolution_table("zh", groups)
        arm = table.script_arm("Hant")
        assert arm is not None
        assert [(c.country, c.target.raw) for c in arm.countries] == [
            ("TW", "zh_Hant_TW"),
            ("HK", "zh_HK"),
        ]
        resolution = table.resolve("Hant", "HK")
        assert resolution.locale == groups.find("zh_HK")
        assert resolution.state is MatchState.SCRIPT_AND_COUNTRY_MATCHED

    def test_scripted_locale_wins_shared_country_in_arm(self) -> None:
        groups = group_locales(["zh", "zh_Hant", "zh_Hant_TW", "zh_TW"])
        arm = build_resolution_table("zh", groups).script_arm("Hant")
        assert arm is not None
        assert [(c.country, c.target.raw) for c in arm.countries] == [("TW", "zh_Hant_TW")]


class TestLocaleDispatcher:
    """Test dispatching across languages."""

    def test_supported_languages(self) -> None:
        dispatcher = _dispatcher(SAMPLE_IDS)
        assert dispatcher.supported_languages == ("en", "zh")
        assert dispatcher.is_supported("zh")
        assert not dispatcher.is_supported("fr")

    def test_table_lookup(self) -> None:
        assert _dispatcher(SAMPLE_IDS).table("en").language == "en"
        with pytest.raises(KeyError):
            _dispatcher(SAMPLE_IDS).table("fr")

    def test_resolve_identifier_bcp47(self) -> None:
        resolution = _dispatcher(SAMPLE_IDS).resolve_identifier("zh-Hant-TW")
        assert resolution.locale is not None
        assert resolution.locale.raw == "zh_Hant_TW"

    def test_resolve_identifier_malformed(self) -> None:
        with pytest.raises(MalformedLocaleError):
            _dispatcher(SAMPLE_IDS).resolve_identifier("zh_Hant_TW_x")
