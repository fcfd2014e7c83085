"""Shared constants for localegen.

Grouped by domain:
- Locale grammar: identifier splitting and script/country disambiguation
- Bundle format: ARB attribute conventions
- Defaults: baseline locale and loader prefix

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Locale grammar
    "LOCALE_SEPARATOR",
    "MAX_LOCALE_PARTS",
    "MIN_SCRIPT_LENGTH",
    # Bundle format
    "ATTRIBUTE_PREFIX",
    "TYPE_ATTRIBUTE",
    "PARAMETERS_ATTRIBUTE",
    "RAW_ACCESSOR_SUFFIX",
    # Defaults
    "DEFAULT_BASELINE_LOCALE",
    "DEFAULT_BUNDLE_PREFIX",
    "BUNDLE_SUFFIX",
]

# ============================================================================
# LOCALE GRAMMAR
# ============================================================================

LOCALE_SEPARATOR: str = "_"

# language[_script][_COUNTRY]
MAX_LOCALE_PARTS: int = 3

# A lone subtag at least this long is a script (Hant), shorter is a country (GB, 419).
MIN_SCRIPT_LENGTH: int = 4

# ============================================================================
# BUNDLE FORMAT
# ============================================================================

# ARB stores metadata for resource "foo" under "@foo".
ATTRIBUTE_PREFIX: str = "@"

TYPE_ATTRIBUTE: str = "x-flutter-type"

PARAMETERS_ATTRIBUTE: str = "parameters"

RAW_ACCESSOR_SUFFIX: str = "Raw"

# ============================================================================
# DEFAULTS
# ============================================================================

DEFAULT_BASELINE_LOCALE: str = "en"

DEFAULT_BUNDLE_PREFIX: str = "material"

BUNDLE_SUFFIX: str = ".arb"
