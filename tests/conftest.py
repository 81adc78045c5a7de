"""Shared pytest fixtures and test helpers for keyrules tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

NIL_SCHEMA_TOML = """\
[[rules]]
key = "foo"
presence = "required"
predicate = "nil?"
"""


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer KEYRULES_* variables out of the tests."""
    monkeypatch.delenv("KEYRULES_CONFIG", raising=False)
    monkeypatch.delenv("KEYRULES_VALIDATION__SCHEMA_PATH", raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def project_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Temp project directory holding a default ``schema.toml``; CWD moves into it."""
    (tmp_path / "schema.toml").write_text(NIL_SCHEMA_TOML, encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    return tmp_path


def write_schema(directory: Path, *rules: dict[str, str], name: str = "schema.toml") -> Path:
    """Write a schema file with one ``[[rules]]`` table per mapping."""
    blocks = []
    for rule in rules:
        lines = ["[[rules]]", *(f'{k} = "{v}"' for k, v in rule.items())]
        blocks.append("\n".join(lines))
    path = directory / name
    path.write_text("\n\n".join(blocks) + "\n", encoding="utf-8")
    return path
