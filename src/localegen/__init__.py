"""localegen - locale hierarchy construction and fallback resolution.

Turns a flat set of per-locale resource bundles into a fallback forest,
where each locale keeps only the values that differ from its parent, plus
a deterministic dispatcher that resolves any (language, script, country)
request to the most specific locale available.

Public API:
    BuildContext - Loaded resources and attributes for one build
    build_hierarchy - Run the batch pass and return a HierarchyForest
    HierarchyForest - Node arena, chain lookup, resolution tables
    LocaleDispatcher - Resolves locale requests across languages
    parse_locale_key - Parse 'zh_Hant_TW' into language/script/country
    ArbDirectoryLoader - Load '<prefix>_<locale>.arb' bundles
    validate_bundles - Structural validation gate

Exceptions:
    LocaleGenError - Base exception class
    MalformedLocaleError - Identifier does not parse
    UnsupportedAttributeValueError - Typed value outside its vocabulary
    MissingBaselineKeyError - Resource without baseline metadata
    MissingFallbackLocaleError - Language without its bare-language locale
    BundleLoadError - Bundle file unreadable

Submodules:
    localegen.hierarchy - Builder, override computer, resolution tables
    localegen.diagnostics - Error types, codes and formatting
    localegen.attributes - Typed resource values
    localegen.summary - Supported-language descriptions
"""

from .diagnostics import (
    BundleLoadError,
    LocaleGenError,
    MalformedLocaleError,
    MissingBaselineKeyError,
    MissingFallbackLocaleError,
    UnsupportedAttributeValueError,
)
from .enums import MatchState
from .hierarchy import (
    BuildContext,
    HierarchyForest,
    HierarchyNode,
    LocaleDispatcher,
    Resolution,
    ResolutionTable,
    build_hierarchy,
)
from .loading import ArbDirectoryLoader
from .locale_utils import LocaleKey, parse_locale_key
from .validation import validate_bundles

try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _get_version
except ImportError as e:
    raise RuntimeError("importlib.metadata unavailable - Python version too old? " + str(e)) from e

try:
    __version__ = _get_version("localegen")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ArbDirectoryLoader",
    "BuildContext",
    "BundleLoadError",
    "HierarchyForest",
    "HierarchyNode",
    "LocaleDispatcher",
    "LocaleGenError",
    "LocaleKey",
    "MalformedLocaleError",
    "MatchState",
    "MissingBaselineKeyError",
    "MissingFallbackLocaleError",
    "Resolution",
    "ResolutionTable",
    "UnsupportedAttributeValueError",
    "__version__",
    "build_hierarchy",
    "parse_locale_key",
    "validate_bundles",
]
