"""Resource attribute interpretation.

Resource metadata from the baseline locale may declare a controlled-vocabulary
type for a resource. Values of such resources are mapped onto enum members;
any value outside the vocabulary fails the batch pass.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from localegen.constants import PARAMETERS_ATTRIBUTE, RAW_ACCESSOR_SUFFIX, TYPE_ATTRIBUTE
from localegen.diagnostics import ErrorTemplate, UnsupportedAttributeValueError
from localegen.enums import AttributeType, ScriptCategory, TimeOfDayFormat, ValueType

if TYPE_CHECKING:
    from collections.abc import Mapping

    from localegen.types import Metadata, ResourceKey, ResourceValue

__all__ = [
    "ResourceDescriptor",
    "SCRIPT_CATEGORIES",
    "TIME_OF_DAY_PATTERNS",
    "describe_resource",
    "typed_value",
]

TIME_OF_DAY_PATTERNS: Mapping[str, TimeOfDayFormat] = {
    "HH:mm": TimeOfDayFormat.HH_COLON_MM,
    "HH.mm": TimeOfDayFormat.HH_DOT_MM,
    "HH 'h' mm": TimeOfDayFormat.FRENCH_CANADIAN,
    "HH:mm น.": TimeOfDayFormat.HH_COLON_MM,
    "H:mm": TimeOfDayFormat.H_COLON_MM,
    "h:mm a": TimeOfDayFormat.H_COLON_MM_SPACE_A,
    "a h:mm": TimeOfDayFormat.A_SPACE_H_COLON_MM,
    "ah:mm": TimeOfDayFormat.A_SPACE_H_COLON_MM,
}

SCRIPT_CATEGORIES: Mapping[str, ScriptCategory] = {
    "English-like": ScriptCategory.ENGLISH_LIKE,
    "dense": ScriptCategory.DENSE,
    "tall": ScriptCategory.TALL,
}

_VOCABULARIES: Mapping[AttributeType, Mapping[str, TimeOfDayFormat | ScriptCategory]] = {
    AttributeType.ICU_SHORT_TIME_PATTERN: TIME_OF_DAY_PATTERNS,
    AttributeType.SCRIPT_CATEGORY: SCRIPT_CATEGORIES,
}

_VALUE_TYPES: Mapping[AttributeType, ValueType] = {
    AttributeType.ICU_SHORT_TIME_PATTERN: ValueType.TIME_OF_DAY_FORMAT,
    AttributeType.SCRIPT_CATEGORY: ValueType.SCRIPT_CATEGORY,
}


@dataclass(frozen=True, slots=True)
class ResourceDescriptor:
    """How a resource is exposed to consumers of the hierarchy.

    Attributes:
        key: Resource key as found in the bundles
        accessor: Name consumers read the value under; '<key>Raw' when the
            value is a template needing substitution before use
        value_type: Type of the value after attribute mapping
        parameters: Placeholder names declared for the resource
    """

    key: ResourceKey
    accessor: str
    value_type: ValueType
    parameters: tuple[str, ...] = ()


def _attribute_type(attributes: Metadata | None) -> AttributeType | None:
    if not attributes:
        return None
    declared = attributes.get(TYPE_ATTRIBUTE)
    if declared is None:
        return None
    try:
        return AttributeType(declared)
    except ValueError:
        # Unknown type names leave the value a plain string.
        return None


def _parameters(attributes: Metadata | None) -> tuple[str, ...]:
    if not attributes or PARAMETERS_ATTRIBUTE not in attributes:
        return ()
    declared = attributes[PARAMETERS_ATTRIBUTE]
    if isinstance(declared, str):
        return tuple(name.strip() for name in declared.split(",") if name.strip())
    if isinstance(declared, dict):
        return tuple(declared)
    return tuple(str(name) for name in declared)


def describe_resource(key: ResourceKey, attributes: Metadata | None) -> ResourceDescriptor:
    """Describe how the resource is typed and accessed.

    Args:
        key: Resource key
        attributes: Baseline metadata for the key (None if absent)

    Returns:
        ResourceDescriptor for the key

    Example:
        >>> attrs = {"x-flutter-type": "icuShortTimePattern"}
        >>> describe_resource("timeOfDayFormat", attrs).accessor
        'timeOfDayFormatRaw'
    """
    attribute_type = _attribute_type(attributes)
    has_parameters = attributes is not None and PARAMETERS_ATTRIBUTE in attributes
    raw = has_parameters or attribute_type is AttributeType.ICU_SHORT_TIME_PATTERN
    return ResourceDescriptor(
        key=key,
        accessor=f"{key}{RAW_ACCESSOR_SUFFIX}" if raw else key,
        value_type=_VALUE_TYPES.get(attribute_type, ValueType.STRING),
        parameters=_parameters(attributes),
    )


def typed_value(
    value: ResourceValue, attributes: Metadata | None
) -> str | TimeOfDayFormat | ScriptCategory | None:
    """Map a resource value through its declared attribute type.

    Args:
        value: Value as loaded (None passes through unchanged)
        attributes: Baseline metadata for the resource key

    Returns:
        Enum member for typed resources, otherwise the value unchanged

    Raises:
        UnsupportedAttributeValueError: If the value is not a string from the
            declared type's vocabulary

    Example:
        >>> typed_value("HH:mm", {"x-flutter-type": "icuShortTimePattern"})
        <TimeOfDayFormat.HH_COLON_MM: 'HH_colon_mm'>
        >>> typed_value("Cancel", {"description": "Button label"})
        'Cancel'
    """
    if value is None:
        return None
    attribute_type = _attribute_type(attributes)
    if attribute_type is None:
        return value
    vocabulary = _VOCABULARIES[attribute_type]
    if not isinstance(value, str) or value not in vocabulary:
        accepted = tuple(vocabulary)
        raise UnsupportedAttributeValueError(
            ErrorTemplate.attribute_value_unsupported(str(value), attribute_type, accepted),
            value=str(value),
            attribute_type=str(attribute_type),
            accepted_values=accepted,
        )
    return vocabulary[value]
