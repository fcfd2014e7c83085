"""Hierarchy forest and the batch pass that builds it.

Nodes live in a flat arena ordered by locale identifier; each node refers
to its fallback parent by arena index. Full values are reconstructed by
walking the parent chain, never through host-language inheritance.

Architecture:
    - group_locales(): parse and group identifiers
    - select_parent() / compute_overrides(): per-locale parent and diff
    - build_resolution_table(): per-language decision structure
    - build_hierarchy(): runs the stages in order over one BuildContext

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from localegen.hierarchy.builder import group_locales
from localegen.hierarchy.overrides import apply_attributes, compute_overrides, select_parent
from localegen.hierarchy.resolution import LocaleDispatcher, build_resolution_table

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from localegen.hierarchy.builder import LocaleGroups
    from localegen.hierarchy.context import BuildContext
    from localegen.hierarchy.resolution import ResolutionTable
    from localegen.locale_utils import LocaleKey
    from localegen.types import LocaleIdentifier, OverrideValue, ResourceBundle, ResourceKey

__all__ = [
    "HierarchyForest",
    "HierarchyNode",
    "build_hierarchy",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class HierarchyNode:
    """One locale in the forest.

    Attributes:
        key: Parsed locale identifier
        parent_index: Arena index of the fallback parent (None for roots)
        own_resources: Resource mapping exactly as loaded
        overrides: Values differing from the parent's own values, typed
            through the baseline attributes
    """

    key: LocaleKey
    parent_index: int | None
    own_resources: ResourceBundle
    overrides: Mapping[ResourceKey, OverrideValue]

    @property
    def is_root(self) -> bool:
        return self.parent_index is None


@dataclass(frozen=True, slots=True)
class HierarchyForest:
    """Output of a build: the node arena plus one resolution table per language.

    Attributes:
        nodes: Every locale, sorted by identifier
        tables: Language code to resolution table
        groups: Locale grouping the forest was built from
    """

    nodes: tuple[HierarchyNode, ...]
    tables: Mapping[str, ResolutionTable]
    groups: LocaleGroups
    _index: Mapping[LocaleIdentifier, int] = field(init=False, repr=False, compare=False)
    _dispatcher: LocaleDispatcher = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        index = {node.key.raw: position for position, node in enumerate(self.nodes)}
        object.__setattr__(self, "_index", MappingProxyType(index))
        object.__setattr__(self, "_dispatcher", LocaleDispatcher(self.tables))

    def __iter__(self) -> Iterator[HierarchyNode]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)

    def __contains__(self, locale_id: object) -> bool:
        return locale_id in self._index

    @property
    def languages(self) -> tuple[str, ...]:
        """Supported language codes, sorted."""
        return self.groups.languages

    @property
    def dispatcher(self) -> LocaleDispatcher:
        """Dispatcher over every language table, built once with the forest."""
        return self._dispatcher

    def index_of(self, locale_id: LocaleIdentifier) -> int:
        """Arena index of a locale.

        Raises:
            KeyError: If the locale is not in the forest
        """
        return self._index[locale_id]

    def node(self, locale_id: LocaleIdentifier) -> HierarchyNode:
        return self.nodes[self.index_of(locale_id)]

    def parent(self, locale_id: LocaleIdentifier) -> HierarchyNode | None:
        node = self.node(locale_id)
        if node.parent_index is None:
            return None
        return self.nodes[node.parent_index]

    def chain(self, locale_id: LocaleIdentifier) -> tuple[HierarchyNode, ...]:
        """The node followed by its ancestors, ending at a root."""
        chain = [self.node(locale_id)]
        while chain[-1].parent_index is not None:
            chain.append(self.nodes[chain[-1].parent_index])
        return tuple(chain)

    def nodes_for(self, language: str) -> tuple[HierarchyNode, ...]:
        return tuple(node for node in self.nodes if node.key.language == language)

    def lookup(self, locale_id: LocaleIdentifier, key: ResourceKey) -> OverrideValue:
        """Reconstruct a locale's full value for a key by walking its chain.

        Raises:
            KeyError: If neither the locale nor any ancestor carries the key
        """
        for node in self.chain(locale_id):
            if key in node.overrides:
                return node.overrides[key]
        raise KeyError(key)

    def resolved_resources(self, locale_id: LocaleIdentifier) -> dict[ResourceKey, OverrideValue]:
        """Every value visible from a locale, ancestors first then overrides."""
        resolved: dict[ResourceKey, OverrideValue] = {}
        for node in reversed(self.chain(locale_id)):
            resolved.update(node.overrides)
        return resolved


def build_hierarchy(context: BuildContext) -> HierarchyForest:
    """Build the hierarchy forest and resolution tables for one input set.

    Stages run in order, each consuming the previous stage's full output.
    Any error aborts the pass; no partial forest is returned.

    Args:
        context: Loaded resources and attributes for every locale

    Returns:
        HierarchyForest

    Raises:
        MalformedLocaleError: If a locale identifier does not parse
        MissingFallbackLocaleError: If a language lacks its bare-language locale
        MissingBaselineKeyError: If a resource key lacks baseline metadata
        UnsupportedAttributeValueError: If a typed value is outside its vocabulary
    """
    groups = group_locales(context.locale_ids)

    keys = [groups.by_identifier[locale_id] for locale_id in context.locale_ids]
    index = {key.raw: position for position, key in enumerate(keys)}

    nodes: list[HierarchyNode] = []
    for key in keys:
        parent = select_parent(key, groups)
        own = context.resources(key.raw)
        parent_own = context.resources(parent.raw) if parent is not None else None
        diff = compute_overrides(own, parent_own)
        overrides = apply_attributes(own, diff, context)
        logger.debug(
            "Locale %s: parent %s, %d of %d values overridden",
            key.raw,
            parent.raw if parent is not None else None,
            len(overrides),
            len(own),
        )
        nodes.append(
            HierarchyNode(
                key=key,
                parent_index=index[parent.raw] if parent is not None else None,
                own_resources=own,
                overrides=MappingProxyType(overrides),
            )
        )

    tables = {language: build_resolution_table(language, groups) for language in groups.languages}

    logger.info(
        "Built hierarchy: %d locales, %d languages", len(nodes), len(tables)
    )
    return HierarchyForest(nodes=tuple(nodes), tables=MappingProxyType(tables), groups=groups)
