"""Schema compiler: turns rule specs into an immutable, reusable Schema.

Compilation resolves predicate names, runs the macro compatibility check
for every rule, and freezes the result. A schema that fails any check is
never constructed.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from keyrules.domain.compatibility import check_macro
from keyrules.domain.errors import DuplicateKeyError
from keyrules.domain.predicates import DEFAULT_PREDICATES, PredicateEntry, PredicateTable
from keyrules.domain.rules import RuleNode, RuleSpec
from keyrules.engine.evaluator import evaluate
from keyrules.engine.result import Result

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Schema:
    """Compiled validation plan.

    Holds only frozen data, so one instance may be evaluated concurrently
    against any number of inputs.

    Attributes:
        rules: Compiled rule nodes in declaration order.
        predicates: Read-only snapshot of the predicate entries the rules use.
    """

    rules: tuple[RuleNode, ...]
    predicates: Mapping[str, PredicateEntry]

    @property
    def keys(self) -> list[str]:
        return [node.key for node in self.rules]

    def entry_for(self, node: RuleNode) -> PredicateEntry:
        return self.predicates[node.predicate.name]

    def __call__(self, data: Mapping[str, Any]) -> Result:
        return evaluate(self, data)

    def __len__(self) -> int:
        return len(self.rules)


def _coerce_spec(rule: RuleSpec | Mapping[str, Any]) -> RuleSpec:
    if isinstance(rule, RuleSpec):
        return rule
    return RuleSpec.model_validate(rule)


def compile_schema(
    rules: Iterable[RuleSpec | Mapping[str, Any]],
    *,
    predicates: PredicateTable | None = None,
) -> Schema:
    """Compile *rules* into a :class:`Schema`.

    Args:
        rules: Rule specs, or mappings with the same fields.
        predicates: Predicate table to resolve names against. Defaults to
            :data:`~keyrules.domain.predicates.DEFAULT_PREDICATES`.

    Raises:
        InvalidSchemaError: A rule pairs a macro with a predicate it cannot
            gate, names an unknown predicate, or repeats a key.
        pydantic.ValidationError: A mapping rule is malformed.
    """
    table = predicates if predicates is not None else DEFAULT_PREDICATES
    nodes: list[RuleNode] = []
    used: dict[str, PredicateEntry] = {}
    seen: set[str] = set()

    for rule in rules:
        spec = _coerce_spec(rule)
        if spec.key in seen:
            msg = f"Key {spec.key!r} is declared more than once"
            raise DuplicateKeyError(
                msg, key=spec.key, macro=str(spec.macro), predicate=spec.predicate
            )
        entry = table.resolve(spec.predicate, key=spec.key)
        check_macro(spec.key, spec.macro, entry.ref)

        seen.add(spec.key)
        used[entry.ref.name] = entry
        nodes.append(
            RuleNode(
                key=spec.key,
                presence=spec.presence,
                macro=spec.macro,
                predicate=entry.ref,
            )
        )

    logger.debug("Compiled schema with %d rule(s): %s", len(nodes), [n.key for n in nodes])
    return Schema(rules=tuple(nodes), predicates=MappingProxyType(used))
