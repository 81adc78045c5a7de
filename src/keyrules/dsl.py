"""Fluent rule-definition front-end.

Mirrors the macro language::

    schema = define(
        required("foo", "nil?"),            # required(:foo) { nil? }
        optional("bar").value("nil?"),      # optional(:bar).value(:nil?)
        required("baz").filled("str?"),     # required(:baz).filled(:str?)
    )
"""

from __future__ import annotations

from typing import overload

from keyrules.domain.errors import InvalidSchemaError
from keyrules.domain.predicates import PredicateTable
from keyrules.domain.rules import RuleSpec
from keyrules.domain.types import Macro, Presence
from keyrules.engine.compiler import Schema, compile_schema


class KeyBuilder:
    """A key with a presence requirement, waiting for a macro."""

    def __init__(self, key: str, presence: Presence) -> None:
        self.key = key
        self.presence = presence

    def _rule(self, macro: Macro, predicate: str) -> RuleSpec:
        return RuleSpec(key=self.key, presence=self.presence, macro=macro, predicate=predicate)

    def value(self, predicate: str) -> RuleSpec:
        return self._rule(Macro.VALUE, predicate)

    def filled(self, predicate: str = "filled?") -> RuleSpec:
        return self._rule(Macro.FILLED, predicate)

    def maybe(self, predicate: str) -> RuleSpec:
        return self._rule(Macro.MAYBE, predicate)

    def __repr__(self) -> str:
        return f"{self.presence}(:{self.key})"


def _key(key: str, presence: Presence, predicate: str | None) -> KeyBuilder | RuleSpec:
    builder = KeyBuilder(key, presence)
    if predicate is None:
        return builder
    return builder._rule(Macro.BARE, predicate)


@overload
def required(key: str) -> KeyBuilder: ...
@overload
def required(key: str, predicate: str) -> RuleSpec: ...
def required(key: str, predicate: str | None = None) -> KeyBuilder | RuleSpec:
    """Declare a required key; with *predicate*, the bare block form."""
    return _key(key, Presence.REQUIRED, predicate)


@overload
def optional(key: str) -> KeyBuilder: ...
@overload
def optional(key: str, predicate: str) -> RuleSpec: ...
def optional(key: str, predicate: str | None = None) -> KeyBuilder | RuleSpec:
    """Declare an optional key; with *predicate*, the bare block form."""
    return _key(key, Presence.OPTIONAL, predicate)


def define(*rules: KeyBuilder | RuleSpec, predicates: PredicateTable | None = None) -> Schema:
    """Compile DSL rules into a :class:`Schema`.

    Raises:
        InvalidSchemaError: A key was left without a predicate, or the
            compiler rejected a rule.
    """
    specs: list[RuleSpec] = []
    for rule in rules:
        if isinstance(rule, KeyBuilder):
            msg = f"{rule!r} has no predicate; use .value(), .filled() or .maybe()"
            raise InvalidSchemaError(msg, key=rule.key)
        specs.append(rule)
    return compile_schema(specs, predicates=predicates)
