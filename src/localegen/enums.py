"""Enumerations for localegen type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class MatchState(StrEnum):
    """Terminal state of a single resolution pass.

    StrEnum provides automatic string conversion: str(MatchState.SCRIPT_MATCHED) == "script"
    """

    NO_MATCH = "none"
    """Language is not supported; no locale returned."""

    LANGUAGE_ONLY = "language"
    """Neither script nor country matched; language default returned."""

    SCRIPT_MATCHED = "script"
    """Script matched (explicit or synthetic stand-in), country did not."""

    SCRIPT_AND_COUNTRY_MATCHED = "script_country"
    """Script and country both matched a specific locale."""

    COUNTRY_ONLY_MATCHED = "country"
    """Country matched without a recognized script."""


class AttributeType(StrEnum):
    """Controlled-vocabulary value types declared via resource metadata."""

    ICU_SHORT_TIME_PATTERN = "icuShortTimePattern"
    """ICU short time pattern (e.g., 'HH:mm')."""

    SCRIPT_CATEGORY = "scriptCategory"
    """Typography category of the script (e.g., 'dense')."""


class ValueType(StrEnum):
    """Runtime type of a resource value once attributes are applied."""

    STRING = "string"
    TIME_OF_DAY_FORMAT = "time_of_day_format"
    SCRIPT_CATEGORY = "script_category"


class TimeOfDayFormat(StrEnum):
    """Time-of-day layouts that ICU short time patterns map onto."""

    HH_COLON_MM = "HH_colon_mm"
    """HH:mm (24 hour, zero padded)."""

    HH_DOT_MM = "HH_dot_mm"
    """HH.mm"""

    FRENCH_CANADIAN = "frenchCanadian"
    """HH 'h' mm"""

    H_COLON_MM = "H_colon_mm"
    """H:mm (24 hour, unpadded)."""

    H_COLON_MM_SPACE_A = "h_colon_mm_space_a"
    """h:mm a (12 hour, period suffix)."""

    A_SPACE_H_COLON_MM = "a_space_h_colon_mm"
    """a h:mm (12 hour, period prefix)."""


class ScriptCategory(StrEnum):
    """Typography category of a script."""

    ENGLISH_LIKE = "englishLike"
    DENSE = "dense"
    TALL = "tall"


__all__ = [
    "AttributeType",
    "MatchState",
    "ScriptCategory",
    "TimeOfDayFormat",
    "ValueType",
]
