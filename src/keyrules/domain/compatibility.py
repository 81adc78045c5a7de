"""Static macro/predicate compatibility rules.

Some macro and predicate combinations are contradictions regardless of
input. ``maybe(:nil?)`` asks to run the nil check only on non-nil values,
so it can never say anything useful. These pairs are rejected while the
schema is being compiled, before any input is seen.
"""

from __future__ import annotations

from keyrules.domain.errors import InvalidSchemaError
from keyrules.domain.predicates import PredicateRef
from keyrules.domain.types import Macro, PredicateKind

# (macro, predicate kind) pairs that can never be compiled.
INCOMPATIBLE_PAIRS: frozenset[tuple[Macro, PredicateKind]] = frozenset(
    {
        (Macro.MAYBE, PredicateKind.NIL_CHECK),
    }
)


def is_compatible(macro: Macro, predicate: PredicateRef) -> bool:
    """Check whether *macro* may gate *predicate*."""
    return (macro, predicate.kind) not in INCOMPATIBLE_PAIRS


def check_macro(key: str, macro: Macro, predicate: PredicateRef) -> None:
    """Raise :class:`InvalidSchemaError` if the pair is contradictory.

    Presence plays no part: the contradiction lives in the pair itself.
    """
    if is_compatible(macro, predicate):
        return
    msg = (
        f"Using {macro}(:{predicate.name}) on key {key!r} makes no sense: "
        f"{predicate.name} cannot be gated by {macro}"
    )
    raise InvalidSchemaError(msg, key=key, macro=str(macro), predicate=predicate.name)
