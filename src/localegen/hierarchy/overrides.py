"""Fallback parent selection and override diffing.

Each non-root locale inherits from exactly one less specific locale.
Only the values that differ from that parent's own, complete resource
mapping are kept as the locale's overrides; reading a value back walks
the parent chain.

Parent selection, highest priority first:
    1. script + country, and the language_script locale exists: language_script
    2. country only, language has no scripts: bare language
    3. country only, language has scripts: language_script for a script that
       appears in the identifier and exists in the data, else bare language
    4. bare language: no parent
    5. script only: bare language

A script + country locale without its language_script locale falls back
to the bare language.

Python 3.13+.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from localegen.attributes import typed_value
from localegen.constants import LOCALE_SEPARATOR

if TYPE_CHECKING:
    from collections.abc import Mapping

    from localegen.hierarchy.builder import LocaleGroups
    from localegen.hierarchy.context import BuildContext
    from localegen.locale_utils import LocaleKey
    from localegen.types import OverrideValue, ResourceBundle, ResourceKey, ResourceValue

__all__ = [
    "apply_attributes",
    "compute_overrides",
    "select_parent",
]

logger = logging.getLogger(__name__)


def select_parent(key: LocaleKey, groups: LocaleGroups) -> LocaleKey | None:
    """Choose the locale that a locale falls back to.

    Args:
        key: Locale to find the parent of
        groups: Grouping of all locales in the data

    Returns:
        Parent locale key, or None for a bare-language locale

    Raises:
        MissingFallbackLocaleError: If the bare-language locale needed as
            parent is absent from the data

    Example:
        >>> groups = group_locales(["zh", "zh_Hant", "zh_Hant_TW"])
        >>> select_parent(groups.find("zh_Hant_TW"), groups).raw
        'zh_Hant'
    """
    if key.is_language_only:
        return None

    if key.script is not None and key.country is not None:
        explicit = groups.find(key.language_script or "")
        if explicit is not None:
            return explicit
        logger.debug(
            "Locale %s has no %s bundle, falling back to %s",
            key.raw,
            key.language_script,
            key.language,
        )
    elif key.country is not None:
        for script in groups.scripts(key.language):
            if script not in key.raw:
                continue
            embedded = groups.find(f"{key.language}{LOCALE_SEPARATOR}{script}")
            if embedded is not None:
                return embedded

    return groups.root(key.language, for_locale=key.raw)


def compute_overrides(
    own: ResourceBundle, parent_own: ResourceBundle | None
) -> dict[ResourceKey, ResourceValue]:
    """Keep the values that differ from the parent's own values.

    Compares against the parent's complete mapping as loaded, never the
    parent's own overrides. Keys the parent lacks are always kept; a root
    (no parent) keeps everything.

    Args:
        own: The locale's resource mapping
        parent_own: The parent's resource mapping, or None for a root

    Returns:
        Override mapping in the key order of ``own``

    Example:
        >>> compute_overrides({"a": "x", "b": "y"}, {"a": "x", "b": "z"})
        {'b': 'y'}
    """
    if parent_own is None:
        return dict(own)
    return {
        key: value
        for key, value in own.items()
        if key not in parent_own or parent_own[key] != value
    }


def apply_attributes(
    own: ResourceBundle,
    overrides: Mapping[ResourceKey, ResourceValue],
    context: BuildContext,
) -> dict[ResourceKey, OverrideValue]:
    """Check baseline metadata for every diffed key and type the overrides.

    Args:
        own: The locale's full resource mapping (every key that was diffed)
        overrides: Result of compute_overrides for the locale
        context: Build context holding the baseline attributes

    Returns:
        Overrides with controlled-vocabulary values mapped to enum members

    Raises:
        MissingBaselineKeyError: If any diffed key lacks baseline metadata
        UnsupportedAttributeValueError: If a typed value is outside its vocabulary
    """
    for key in own:
        context.attributes_for(key)
    return {
        key: typed_value(value, context.attributes_for(key))
        for key, value in overrides.items()
    }
