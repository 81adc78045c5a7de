"""Runtime evaluator: applies compiled rules to an input mapping.

Per key the stages are presence, macro gating, predicate. Each stage may
short-circuit the rest:

- absent + optional: the key passes, nothing else runs.
- absent + required: ``"is missing"`` followed by the predicate's
  message-key as a hint. The predicate is never executed on an absent value.
- ``filled``: nil or blank values fail with ``"must be filled"``.
- ``maybe``: nil values pass without running the predicate.
- ``bare`` / ``value``: the predicate runs on whatever is present.

Evaluation never mutates the schema. Exceptions raised by a predicate
callable propagate unchanged.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from keyrules.domain.types import (
    ABSENT,
    MSG_MISSING,
    MSG_NOT_FILLED,
    Macro,
    ValueClass,
    classify_value,
)
from keyrules.engine.result import Result

if TYPE_CHECKING:
    from keyrules.domain.predicates import PredicateEntry
    from keyrules.domain.rules import RuleNode
    from keyrules.engine.compiler import Schema


def _dedupe(messages: list[str]) -> list[str]:
    """Drop repeated message-keys, keeping first-detected order."""
    return list(dict.fromkeys(messages))


def evaluate_rule(node: RuleNode, entry: PredicateEntry, data: Mapping[str, Any]) -> list[str]:
    """Evaluate one rule against *data* and return its message-keys."""
    value = data.get(node.key, ABSENT)
    value_class = classify_value(value)
    messages: list[str] = []

    if value_class is ValueClass.ABSENT:
        if not node.required:
            return messages
        messages.append(MSG_MISSING)
        messages.append(entry.message)
        return _dedupe(messages)

    if node.macro is Macro.FILLED and value_class in (ValueClass.NIL, ValueClass.BLANK):
        messages.append(MSG_NOT_FILLED)
        return messages
    if node.macro is Macro.MAYBE and value_class is ValueClass.NIL:
        return messages

    if not entry.fn(value):
        messages.append(entry.message)
    return _dedupe(messages)


def evaluate(schema: Schema, data: Mapping[str, Any]) -> Result:
    """Evaluate every rule of *schema* against *data*, in declared order."""
    output: dict[str, Any] = {}
    errors: dict[str, list[str]] = {}
    for node in schema.rules:
        if node.key in data:
            output[node.key] = data[node.key]
        messages = evaluate_rule(node, schema.entry_for(node), data)
        if messages:
            errors[node.key] = messages
    return Result(output=output, errors=errors)
