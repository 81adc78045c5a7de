"""Exception hierarchy for keyrules.

Only schema *definition* problems are exceptions. A failed validation is
an ordinary :class:`~keyrules.engine.result.Result`, never raised.
"""

from __future__ import annotations


class KeyrulesError(Exception):
    """Base class for all keyrules errors."""


class InvalidSchemaError(KeyrulesError):
    """A rule definition is structurally invalid.

    Raised synchronously while compiling a schema. Carries the offending
    key, macro and predicate name so the schema source can be fixed.
    """

    def __init__(
        self,
        message: str,
        *,
        key: str | None = None,
        macro: str | None = None,
        predicate: str | None = None,
    ) -> None:
        super().__init__(message)
        self.key = key
        self.macro = macro
        self.predicate = predicate

    def to_detail(self) -> dict[str, str | None]:
        """Return the error context as a plain dict."""
        return {"key": self.key, "macro": self.macro, "predicate": self.predicate}


class UnknownPredicateError(InvalidSchemaError):
    """A rule names a predicate that is not in the predicate table."""


class DuplicateKeyError(InvalidSchemaError):
    """The same key is declared more than once in one schema."""


class SchemaFileError(KeyrulesError):
    """A schema file could not be read, parsed, or validated."""
