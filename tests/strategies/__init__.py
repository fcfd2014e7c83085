"""Hypothesis strategies for localegen property-based testing.

Strategies are organized by domain:

- locales: locale identifiers, locale sets and full build contexts

Usage:
    from tests.strategies import build_contexts, locale_sets

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - locale_sets, build_contexts
"""

from .locales import (
    COUNTRY_POOL,
    LANGUAGE_POOL,
    RESOURCE_KEYS,
    SCRIPT_POOL,
    build_contexts,
    locale_identifiers,
    locale_sets,
)

__all__ = [
    "COUNTRY_POOL",
    "LANGUAGE_POOL",
    "RESOURCE_KEYS",
    "SCRIPT_POOL",
    "build_contexts",
    "locale_identifiers",
    "locale_sets",
]
