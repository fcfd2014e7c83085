"""Type aliases for the locale hierarchy domain.

Provides semantic type aliases used throughout the package and by
callers annotating loader output or lookups.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping
from typing import Any

from localegen.enums import ScriptCategory, TimeOfDayFormat

__all__ = [
    "LocaleIdentifier",
    "Metadata",
    "OverrideValue",
    "ResourceAttributes",
    "ResourceBundle",
    "ResourceKey",
    "ResourceValue",
]

type LocaleIdentifier = str
"""Underscore-separated locale identifier (e.g., 'en', 'en_GB', 'zh_Hant_TW')."""

type ResourceKey = str
"""Resource identifier shared across all locales (e.g., 'okButtonLabel')."""

type ResourceValue = str | None
"""Localized value as loaded. None marks an explicit null in the source bundle."""

type Metadata = Mapping[str, Any]
"""Per-resource metadata (e.g., {'x-flutter-type': 'scriptCategory'})."""

type ResourceBundle = Mapping[ResourceKey, ResourceValue]
"""All resource values carried by a single locale."""

type ResourceAttributes = Mapping[ResourceKey, Metadata]
"""Per-resource metadata carried by a single locale."""

type OverrideValue = str | TimeOfDayFormat | ScriptCategory | None
"""Resource value after attribute mapping, as carried in a locale's overrides."""
