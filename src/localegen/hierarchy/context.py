"""Per-run build context.

Holds the loader's output for one batch pass: resources and attributes
per locale, plus the baseline locale whose metadata is authoritative.
Constructed once and threaded through every stage; never mutated.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from localegen.constants import DEFAULT_BASELINE_LOCALE
from localegen.diagnostics import ErrorTemplate, MissingBaselineKeyError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from localegen.types import (
        LocaleIdentifier,
        Metadata,
        ResourceAttributes,
        ResourceBundle,
        ResourceKey,
    )

__all__ = ["BuildContext"]

_EMPTY: Mapping[str, Metadata] = MappingProxyType({})


@dataclass(frozen=True, slots=True)
class BuildContext:
    """Input to a single hierarchy build.

    Mappings are copied into read-only views at construction so later
    mutation of the caller's dictionaries cannot leak into a build.

    Attributes:
        locale_to_resources: Locale identifier to resource key/value pairs
        locale_to_attributes: Locale identifier to resource key/metadata pairs
        baseline_locale: Locale whose attributes apply to every locale

    Example:
        >>> context = BuildContext(
        ...     {"en": {"ok": "OK"}, "en_GB": {"ok": "OK"}},
        ...     {"en": {"ok": {"description": "Confirm button"}}},
        ... )
        >>> context.locale_ids
        ('en', 'en_GB')
    """

    locale_to_resources: Mapping[LocaleIdentifier, ResourceBundle]
    locale_to_attributes: Mapping[LocaleIdentifier, ResourceAttributes] = field(
        default_factory=dict
    )
    baseline_locale: LocaleIdentifier = DEFAULT_BASELINE_LOCALE

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "locale_to_resources",
            MappingProxyType(
                {
                    locale: MappingProxyType(dict(resources))
                    for locale, resources in self.locale_to_resources.items()
                }
            ),
        )
        object.__setattr__(
            self,
            "locale_to_attributes",
            MappingProxyType(
                {
                    locale: MappingProxyType(dict(attributes))
                    for locale, attributes in self.locale_to_attributes.items()
                }
            ),
        )

    @property
    def locale_ids(self) -> tuple[LocaleIdentifier, ...]:
        """All locale identifiers with resources, sorted."""
        return tuple(sorted(self.locale_to_resources))

    def has_locale(self, locale_id: LocaleIdentifier) -> bool:
        return locale_id in self.locale_to_resources

    def resources(self, locale_id: LocaleIdentifier) -> ResourceBundle:
        """Resource mapping of a locale exactly as loaded.

        Raises:
            KeyError: If the locale was not loaded
        """
        return self.locale_to_resources[locale_id]

    @property
    def baseline_attributes(self) -> ResourceAttributes:
        return self.locale_to_attributes.get(self.baseline_locale, _EMPTY)

    def attributes_for(self, key: ResourceKey) -> Metadata:
        """Baseline metadata for a resource key.

        Raises:
            MissingBaselineKeyError: If the baseline has no entry for the key
        """
        try:
            return self.baseline_attributes[key]
        except KeyError:
            raise MissingBaselineKeyError(
                ErrorTemplate.baseline_key_missing(key, self.baseline_locale),
                key=key,
                baseline_locale=self.baseline_locale,
            ) from None
