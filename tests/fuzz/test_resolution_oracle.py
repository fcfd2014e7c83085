"""Differential fuzzing of resolution tables against the shadow resolver.

Note: This file is marked with pytest.mark.fuzz and is excluded from normal
test runs. Run via: pytest -m fuzz
"""

from __future__ import annotations

import pytest
from hypothesis import event, given, settings
from hypothesis import strategies as st

from localegen.hierarchy import BuildContext, build_hierarchy
from localegen.hierarchy.builder import group_locales
from localegen.hierarchy.resolution import LocaleDispatcher, build_resolution_table
from tests.fuzz.shadow_resolver import shadow_resolve
from tests.strategies import (
    COUNTRY_POOL,
    LANGUAGE_POOL,
    SCRIPT_POOL,
    build_contexts,
    locale_sets,
)

# Mark all tests in this file as fuzzing tests
pytestmark = pytest.mark.fuzz

_REQUEST_LANGUAGES = [*LANGUAGE_POOL, "fr"]


class TestResolutionOracle:
    """Table resolution agrees with a linear scan."""

    @given(
        locale_sets(),
        st.sampled_from(_REQUEST_LANGUAGES),
        st.none() | st.sampled_from(SCRIPT_POOL),
        st.none() | st.sampled_from(COUNTRY_POOL),
    )
    @settings(max_examples=2000)
    def test_matches_shadow(
        self,
        locale_ids: list[str],
        language: str,
        script: str | None,
        country: str | None,
    ) -> None:
        """Property: dispatcher and shadow pick the same locale and state."""
        groups = group_locales(locale_ids)
        dispatcher = LocaleDispatcher(
            {lang: build_resolution_table(lang, groups) for lang in groups.languages}
        )
        resolution = dispatcher.resolve(language, script, country)
        expected = shadow_resolve(locale_ids, language, script, country)
        event(f"state={resolution.state}")
        actual = resolution.locale.raw if resolution.locale is not None else None
        assert (actual, resolution.state) == expected


class TestBuildStress:
    """Whole-pass invariants over many generated contexts."""

    @given(build_contexts())
    @settings(max_examples=1000)
    def test_every_value_reachable(self, context: BuildContext) -> None:
        """Property: resolved_resources equals own values laid over the parent's view."""
        forest = build_hierarchy(context)
        for node in forest:
            resolved = forest.resolved_resources(node.key.raw)
            for key, value in node.own_resources.items():
                assert resolved[key] == value
