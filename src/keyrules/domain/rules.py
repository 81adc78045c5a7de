"""Rule definitions (uncompiled) and compiled rule nodes.

:class:`RuleSpec` is the boundary contract: what a DSL call or a schema
file line says about one key. :class:`RuleNode` is what the compiler
produces after resolving the predicate name and passing the macro check.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field

from keyrules.domain.predicates import PredicateRef
from keyrules.domain.types import Macro, Presence


class RuleSpec(BaseModel):
    """One key rule as written by the schema author."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    key: str = Field(min_length=1)
    presence: Presence
    macro: Macro = Macro.BARE
    predicate: str = Field(min_length=1)

    def describe(self) -> str:
        """Render the rule in DSL form, e.g. ``required(:foo).filled(:nil?)``."""
        head = f"{self.presence}(:{self.key})"
        if self.macro is Macro.BARE:
            return f"{head} {{ {self.predicate} }}"
        return f"{head}.{self.macro}(:{self.predicate})"


@dataclass(frozen=True)
class RuleNode:
    """Compiled rule for a single key.

    INVARIANT: never holds a macro/predicate pair rejected by
    :func:`keyrules.domain.compatibility.check_macro`.
    """

    key: str
    presence: Presence
    macro: Macro
    predicate: PredicateRef

    @property
    def required(self) -> bool:
        return self.presence is Presence.REQUIRED

    def to_dict(self) -> dict[str, str]:
        return {
            "key": self.key,
            "presence": str(self.presence),
            "macro": str(self.macro),
            "predicate": self.predicate.name,
        }
