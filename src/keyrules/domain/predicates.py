"""Predicate references and the predicate table.

A :class:`PredicateRef` only *names* a check. The callable that performs
it and the message-key emitted on failure live in a
:class:`PredicateTable`. ``nil?`` and ``filled?`` are modeled
structurally; every other predicate is opaque to the compiler.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from keyrules.domain.errors import UnknownPredicateError
from keyrules.domain.types import (
    MSG_NOT_FILLED,
    MSG_NOT_NIL,
    PredicateKind,
    ValueClass,
    classify_value,
)

PredicateFn = Callable[[object], bool]


@dataclass(frozen=True)
class PredicateRef:
    """Immutable identifier for an atomic check."""

    kind: PredicateKind
    name: str

    @classmethod
    def opaque(cls, name: str) -> PredicateRef:
        return cls(PredicateKind.OPAQUE, name)

    def __str__(self) -> str:
        return self.name


NIL_CHECK = PredicateRef(PredicateKind.NIL_CHECK, "nil?")
FILLED_CHECK = PredicateRef(PredicateKind.FILLED_CHECK, "filled?")


@dataclass(frozen=True)
class PredicateEntry:
    """A predicate's reference, implementation, and failure message-key."""

    ref: PredicateRef
    fn: PredicateFn
    message: str


def is_nil(value: object) -> bool:
    return value is None


def is_filled(value: object) -> bool:
    return classify_value(value) is ValueClass.PRESENT


def _is_str(value: object) -> bool:
    return isinstance(value, str)


def _is_int(value: object) -> bool:
    # bool is an int subclass but never an integer here
    return isinstance(value, int) and not isinstance(value, bool)


def _is_bool(value: object) -> bool:
    return isinstance(value, bool)


def _is_empty(value: object) -> bool:
    return classify_value(value) in (ValueClass.NIL, ValueClass.BLANK)


class PredicateTable:
    """Mutable registry mapping predicate names to :class:`PredicateEntry`.

    Compiled schemas never hold the table itself, only a read-only
    snapshot taken at compile time (see :meth:`snapshot`).
    """

    def __init__(self, entries: Mapping[str, PredicateEntry] | None = None) -> None:
        self._entries: dict[str, PredicateEntry] = dict(entries or {})

    def register(self, name: str, fn: PredicateFn, message: str) -> PredicateRef:
        """Register an opaque predicate and return its reference.

        Re-registering an existing name replaces it.
        """
        ref = PredicateRef.opaque(name)
        self._entries[name] = PredicateEntry(ref=ref, fn=fn, message=message)
        return ref

    def resolve(self, name: str, *, key: str | None = None) -> PredicateEntry:
        """Look up *name*, raising :class:`UnknownPredicateError` if absent."""
        try:
            return self._entries[name]
        except KeyError:
            msg = f"Unknown predicate {name!r}"
            if key is not None:
                msg = f"{msg} for key {key!r}"
            raise UnknownPredicateError(msg, key=key, predicate=name) from None

    def snapshot(self) -> Mapping[str, PredicateEntry]:
        """Return a read-only copy of the current entries."""
        return MappingProxyType(dict(self._entries))

    def copy(self) -> PredicateTable:
        return PredicateTable(self._entries)

    def names(self) -> list[str]:
        return sorted(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries


DEFAULT_PREDICATES = PredicateTable()


def _register_builtins() -> None:
    """Populate :data:`DEFAULT_PREDICATES` with the built-in predicates."""
    DEFAULT_PREDICATES._entries["nil?"] = PredicateEntry(NIL_CHECK, is_nil, MSG_NOT_NIL)
    DEFAULT_PREDICATES._entries["filled?"] = PredicateEntry(
        FILLED_CHECK, is_filled, MSG_NOT_FILLED
    )
    DEFAULT_PREDICATES.register("str?", _is_str, "must be a string")
    DEFAULT_PREDICATES.register("int?", _is_int, "must be an integer")
    DEFAULT_PREDICATES.register("bool?", _is_bool, "must be boolean")
    DEFAULT_PREDICATES.register("empty?", _is_empty, "must be empty")


_register_builtins()
