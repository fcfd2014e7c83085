"""Locale hierarchy construction and fallback resolution.

Submodules:
    context    - BuildContext (per-run loader output)
    builder    - LocaleGroups, group_locales
    overrides  - select_parent, compute_overrides, apply_attributes
    resolution - ResolutionTable and its match arms, LocaleDispatcher
    forest     - HierarchyNode, HierarchyForest, build_hierarchy

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from localegen.hierarchy.builder import LocaleGroups, group_locales
from localegen.hierarchy.context import BuildContext
from localegen.hierarchy.forest import HierarchyForest, HierarchyNode, build_hierarchy
from localegen.hierarchy.overrides import apply_attributes, compute_overrides, select_parent
from localegen.hierarchy.resolution import (
    CountryArm,
    LocaleDispatcher,
    Resolution,
    ResolutionTable,
    ScriptArm,
    build_resolution_table,
)

__all__ = [
    # Entry point
    "build_hierarchy",
    "BuildContext",
    # Forest
    "HierarchyForest",
    "HierarchyNode",
    # Stages
    "LocaleGroups",
    "group_locales",
    "select_parent",
    "compute_overrides",
    "apply_attributes",
    "build_resolution_table",
    # Resolution
    "CountryArm",
    "LocaleDispatcher",
    "Resolution",
    "ResolutionTable",
    "ScriptArm",
]
