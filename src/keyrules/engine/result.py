"""Result: the outcome of evaluating a schema against one input.

INVARIANT: A Result is created fresh per evaluation and never mutated.
Validation failure is an ordinary Result, never an exception.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class Result(BaseModel):
    """Evaluation outcome.

    Attributes:
        output: Declared keys that were present in the input, with their values.
        errors: Failing keys in declaration order, each mapped to its
            ordered, de-duplicated message-keys. Empty on success.
    """

    model_config = {"frozen": True}

    output: dict[str, Any] = Field(default_factory=dict)
    errors: dict[str, list[str]] = Field(default_factory=dict)

    @property
    def success(self) -> bool:
        return not self.errors

    @property
    def failure(self) -> bool:
        return bool(self.errors)

    @property
    def messages(self) -> list[str]:
        """All message-keys, concatenated per key in declaration order.

        Duplicates across different keys are kept.
        """
        return [msg for key_messages in self.errors.values() for msg in key_messages]

    def messages_for(self, key: str) -> list[str]:
        return list(self.errors.get(key, []))

    def __bool__(self) -> bool:
        return self.success
