"""keyrules: declarative key-rule schemas with compile-time macro checks."""

from __future__ import annotations

from keyrules.domain.errors import (
    DuplicateKeyError,
    InvalidSchemaError,
    KeyrulesError,
    SchemaFileError,
    UnknownPredicateError,
)
from keyrules.domain.predicates import DEFAULT_PREDICATES, PredicateRef, PredicateTable
from keyrules.domain.rules import RuleNode, RuleSpec
from keyrules.domain.types import Macro, Presence
from keyrules.dsl import define, optional, required
from keyrules.engine.compiler import Schema, compile_schema
from keyrules.engine.evaluator import evaluate
from keyrules.engine.result import Result

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_PREDICATES",
    "DuplicateKeyError",
    "InvalidSchemaError",
    "KeyrulesError",
    "Macro",
    "PredicateRef",
    "PredicateTable",
    "Presence",
    "Result",
    "RuleNode",
    "RuleSpec",
    "Schema",
    "SchemaFileError",
    "UnknownPredicateError",
    "__version__",
    "compile_schema",
    "define",
    "evaluate",
    "optional",
    "required",
]
