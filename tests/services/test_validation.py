"""Tests for ValidationService."""

from __future__ import annotations

from pathlib import Path

import pytest

from keyrules.domain.predicates import DEFAULT_PREDICATES
from keyrules.services.validation import ValidationService
from tests.conftest import write_schema


@pytest.fixture
def schema_path(tmp_path: Path) -> Path:
    return write_schema(
        tmp_path,
        {"key": "foo", "presence": "required", "macro": "filled", "predicate": "nil?"},
        {"key": "bar", "presence": "optional", "predicate": "int?"},
    )


class TestCheckSchema:
    def test_reports_rules(self, schema_path: Path) -> None:
        result = ValidationService().check_schema(schema_path)
        assert result.ok
        assert result.op == "check_schema"
        assert result.data["count"] == 2
        assert result.data["rules"][0] == {
            "key": "foo",
            "presence": "required",
            "macro": "filled",
            "predicate": "nil?",
        }

    def test_missing_file(self, tmp_path: Path) -> None:
        result = ValidationService().check_schema(tmp_path / "none.toml")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "SCHEMA_FILE"

    def test_contradictory_rule(self, tmp_path: Path) -> None:
        path = write_schema(
            tmp_path, {"key": "foo", "presence": "required", "macro": "maybe", "predicate": "nil?"}
        )
        result = ValidationService().check_schema(path)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_SCHEMA"
        assert result.error.detail["key"] == "foo"
        assert result.error.detail["macro"] == "maybe"
        assert result.error.detail["predicate"] == "nil?"


class TestValidate:
    def test_nil_fails_filled(self, schema_path: Path) -> None:
        result = ValidationService().validate(schema_path, {"foo": None})
        assert not result.ok
        assert result.error is not None
        assert result.error.detail["errors"] == {"foo": ["must be filled"]}

    def test_failure_lists_keys_in_order(self, schema_path: Path) -> None:
        result = ValidationService().validate(schema_path, {"bar": "x"})
        assert result.error is not None
        assert result.error.code == "VALIDATION_FAILED"
        assert list(result.error.detail["errors"].items()) == [
            ("foo", ["is missing", "cannot be defined"]),
            ("bar", ["must be an integer"]),
        ]

    def test_non_mapping_input(self, schema_path: Path) -> None:
        result = ValidationService().validate(schema_path, [1, 2])
        assert result.error is not None
        assert result.error.code == "INVALID_INPUT"

    def test_ok_payload(self, tmp_path: Path) -> None:
        path = write_schema(tmp_path, {"key": "foo", "presence": "required", "predicate": "nil?"})
        result = ValidationService().validate(path, {"foo": None, "extra": 1})
        assert result.ok
        assert result.data == {"output": {"foo": None}}

    def test_custom_predicates(self, tmp_path: Path) -> None:
        table = DEFAULT_PREDICATES.copy()
        table.register("even?", lambda v: v % 2 == 0, "must be even")
        path = write_schema(tmp_path, {"key": "n", "presence": "required", "predicate": "even?"})
        result = ValidationService(predicates=table).validate(path, {"n": 3})
        assert result.error is not None
        assert result.error.detail["errors"] == {"n": ["must be even"]}
