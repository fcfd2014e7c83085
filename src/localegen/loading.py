"""Bundle loading.

Provides the protocol for bundle loaders and an ARB directory
implementation. ARB files are JSON objects; a key "@foo" holds the
metadata of resource "foo".

Components:
    BundleLoader - Protocol for producing a BuildContext (structural typing)
    ArbDirectoryLoader - Reads <prefix>_<locale>.arb files from one directory

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol

from localegen.constants import (
    ATTRIBUTE_PREFIX,
    BUNDLE_SUFFIX,
    DEFAULT_BASELINE_LOCALE,
    DEFAULT_BUNDLE_PREFIX,
)
from localegen.diagnostics import BundleLoadError, ErrorTemplate
from localegen.hierarchy.context import BuildContext
from localegen.locale_utils import parse_locale_key

if TYPE_CHECKING:
    from localegen.types import LocaleIdentifier, Metadata, ResourceValue

__all__ = [
    "ArbDirectoryLoader",
    "BundleLoader",
    "split_bundle",
]

logger = logging.getLogger(__name__)


class BundleLoader(Protocol):
    """Protocol for loaders feeding the hierarchy build.

    This is a Protocol (structural typing) rather than ABC so any object
    with a matching load() can be used.
    """

    def load(self) -> BuildContext:
        """Load every bundle and return the build context.

        Raises:
            BundleLoadError: If a bundle cannot be read or decoded
            MalformedLocaleError: If a bundle names a malformed locale
        """


def split_bundle(
    bundle: dict[str, Any],
) -> tuple[dict[str, ResourceValue], dict[str, Metadata]]:
    """Split a decoded ARB object into resources and attributes.

    Example:
        >>> split_bundle({"ok": "OK", "@ok": {"description": "Confirm"}})
        ({'ok': 'OK'}, {'ok': {'description': 'Confirm'}})
    """
    resources: dict[str, ResourceValue] = {}
    attributes: dict[str, Metadata] = {}
    for key, value in bundle.items():
        if key.startswith(ATTRIBUTE_PREFIX):
            attributes[key[len(ATTRIBUTE_PREFIX):]] = value
        else:
            resources[key] = value
    return resources, attributes


@dataclass(frozen=True, slots=True)
class ArbDirectoryLoader:
    """Loads '<prefix>_<locale>.arb' files from a single directory.

    Example:
        >>> context = ArbDirectoryLoader("l10n", prefix="material").load()
        # Reads l10n/material_en.arb, l10n/material_en_GB.arb, ...

    Attributes:
        directory: Directory holding the bundle files
        prefix: Filename prefix before the locale identifier
        baseline_locale: Baseline locale recorded in the produced context
    """

    directory: str | Path
    prefix: str = DEFAULT_BUNDLE_PREFIX
    baseline_locale: LocaleIdentifier = DEFAULT_BASELINE_LOCALE
    _pattern: re.Pattern[str] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        pattern = re.compile(rf"^{re.escape(self.prefix)}_(\w+){re.escape(BUNDLE_SUFFIX)}$")
        object.__setattr__(self, "_pattern", pattern)

    def bundle_files(self) -> list[tuple[LocaleIdentifier, Path]]:
        """Matching bundle files and their locale identifiers, sorted by filename.

        Raises:
            BundleLoadError: If the directory cannot be listed
        """
        root = Path(self.directory)
        try:
            entries = sorted(root.iterdir())
        except OSError as e:
            raise BundleLoadError(
                ErrorTemplate.bundle_unreadable(str(root), str(e)), path=str(root)
            ) from e

        found: list[tuple[LocaleIdentifier, Path]] = []
        for path in entries:
            match = self._pattern.match(path.name)
            if match is None or not path.is_file():
                continue
            found.append((match.group(1), path))
        return found

    def read_bundle(self, path: Path) -> dict[str, Any]:
        """Decode one bundle file.

        Raises:
            BundleLoadError: If the file is unreadable, not JSON, or not an object
        """
        try:
            bundle = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise BundleLoadError(
                ErrorTemplate.bundle_unreadable(str(path), str(e)), path=str(path)
            ) from e
        if not isinstance(bundle, dict):
            raise BundleLoadError(
                ErrorTemplate.bundle_not_object(str(path), type(bundle).__name__),
                path=str(path),
            )
        return bundle

    def load(self) -> BuildContext:
        """Load every matching bundle into a BuildContext.

        Resources and attributes of files naming the same locale are merged
        in filename order.
        """
        locale_to_resources: dict[LocaleIdentifier, dict[str, ResourceValue]] = {}
        locale_to_attributes: dict[LocaleIdentifier, dict[str, Metadata]] = {}

        for locale_id, path in self.bundle_files():
            parse_locale_key(locale_id)
            resources, attributes = split_bundle(self.read_bundle(path))
            locale_to_resources.setdefault(locale_id, {}).update(resources)
            locale_to_attributes.setdefault(locale_id, {}).update(attributes)
            logger.debug(
                "Loaded %s: %d resources, %d attributes",
                path.name,
                len(resources),
                len(attributes),
            )

        logger.info("Loaded %d locales from %s", len(locale_to_resources), self.directory)
        return BuildContext(
            locale_to_resources,
            locale_to_attributes,
            baseline_locale=self.baseline_locale,
        )
