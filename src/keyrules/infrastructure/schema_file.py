"""Schema file loading.

A schema file is TOML with one ``[[rules]]`` table per key::

    [[rules]]
    key = "foo"
    presence = "required"
    macro = "filled"      # optional, defaults to "bare"
    predicate = "nil?"

Rules are validated against :class:`~keyrules.domain.rules.RuleSpec`
and compiled in file order.
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from keyrules.domain.errors import SchemaFileError
from keyrules.domain.predicates import PredicateTable
from keyrules.domain.rules import RuleSpec
from keyrules.engine.compiler import Schema, compile_schema


class SchemaFile(BaseModel):
    """Top-level shape of a schema file."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    rules: list[RuleSpec] = Field(default_factory=list)


def parse_rules(raw: str, *, source: str = "<string>") -> list[RuleSpec]:
    """Parse TOML text into rule specs.

    Raises:
        SchemaFileError: Invalid TOML or a rule that fails validation.
    """
    try:
        data: dict[str, Any] = tomllib.loads(raw)
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {source}: {exc}"
        raise SchemaFileError(msg) from exc
    try:
        return SchemaFile.model_validate(data).rules
    except ValidationError as exc:
        msg = f"Invalid rule definition in {source}: {exc.error_count()} error(s)"
        raise SchemaFileError(msg) from exc


def read_rules(path: Path) -> list[RuleSpec]:
    """Read and parse the schema file at *path*."""
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        msg = f"Cannot read schema file {path}: {exc}"
        raise SchemaFileError(msg) from exc
    return parse_rules(raw, source=str(path))


def load_schema(path: Path, *, predicates: PredicateTable | None = None) -> Schema:
    """Read, validate, and compile the schema file at *path*.

    Raises:
        SchemaFileError: The file is unreadable or malformed.
        InvalidSchemaError: A rule is rejected by the compiler.
    """
    return compile_schema(read_rules(path), predicates=predicates)
