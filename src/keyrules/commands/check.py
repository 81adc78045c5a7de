"""Command: compile a schema file and report its rules."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from keyrules.commands._base import KeyrulesCommand

if TYPE_CHECKING:
    from keyrules.commands._context import AppContext


@click.command(
    cls=KeyrulesCommand,
    examples="""\
  keyrules check
  keyrules check rules/user.toml
  keyrules --json check rules/user.toml""",
)
@click.argument("schema", required=False)
@click.pass_obj
def check(app: AppContext, schema: str | None) -> None:
    """Compile SCHEMA (default: configured schema path) without validating input."""
    path = app.settings.resolve_schema_path(schema)
    app.emit(app.service().check_schema(path))
