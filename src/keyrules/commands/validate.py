"""Command: validate a JSON document against a schema file."""

from __future__ import annotations

import json
from typing import IO, TYPE_CHECKING

import click

from keyrules.commands._base import KeyrulesCommand
from keyrules.services.result import ServiceResult

if TYPE_CHECKING:
    from keyrules.commands._context import AppContext


@click.command(
    cls=KeyrulesCommand,
    examples="""\
  keyrules validate payload.json
  keyrules validate payload.json --schema rules/user.toml
  echo '{"foo": null}' | keyrules --json validate -""",
)
@click.argument("input_file", metavar="INPUT", type=click.File("r", encoding="utf-8"))
@click.option("-s", "--schema", default=None, help="Schema file (default: configured path).")
@click.pass_obj
def validate(app: AppContext, input_file: IO[str], schema: str | None) -> None:
    """Validate the JSON object in INPUT ('-' for stdin)."""
    try:
        payload = json.load(input_file)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        app.emit(ServiceResult.fail("validate", "INVALID_INPUT", f"Invalid JSON: {exc}"))
        return

    path = app.settings.resolve_schema_path(schema)
    app.emit(app.service().validate(path, payload))
