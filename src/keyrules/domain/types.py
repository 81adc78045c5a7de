"""Rule vocabulary enums and the stable message-key set.

Presence and Macro describe a rule; ValueClass describes a looked-up
input value. Message keys are contract-stable identifiers handed to an
external renderer verbatim.
"""

from __future__ import annotations

from enum import StrEnum


class Presence(StrEnum):
    """Whether a key's absence alone is a failure."""

    REQUIRED = "required"
    OPTIONAL = "optional"


class Macro(StrEnum):
    """Composition operator gating when a predicate runs."""

    BARE = "bare"
    VALUE = "value"
    FILLED = "filled"
    MAYBE = "maybe"


class PredicateKind(StrEnum):
    """Structural tag of a predicate reference."""

    NIL_CHECK = "nil_check"
    FILLED_CHECK = "filled_check"
    OPAQUE = "opaque"


class ValueClass(StrEnum):
    """Classification of a value looked up from an input mapping.

    Computed once per key so macro gating never re-inspects the raw value.
    """

    ABSENT = "absent"
    NIL = "nil"
    BLANK = "blank"
    PRESENT = "present"


# --- Message keys ---

MSG_MISSING = "is missing"
MSG_NOT_NIL = "cannot be defined"
MSG_NOT_FILLED = "must be filled"

_BLANK_TYPES = (str, list, tuple, dict, set, frozenset)

# Sentinel for a key that is not in the input mapping.
ABSENT = object()


def classify_value(value: object) -> ValueClass:
    """Classify *value* as absent, nil, blank, or present.

    Examples:
        >>> classify_value(None)
        <ValueClass.NIL: 'nil'>
        >>> classify_value("")
        <ValueClass.BLANK: 'blank'>
        >>> classify_value(0)
        <ValueClass.PRESENT: 'present'>
    """
    if value is ABSENT:
        return ValueClass.ABSENT
    if value is None:
        return ValueClass.NIL
    if isinstance(value, _BLANK_TYPES) and len(value) == 0:
        return ValueClass.BLANK
    return ValueClass.PRESENT
