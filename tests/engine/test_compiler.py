"""Tests for schema compilation."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest
from pydantic import ValidationError

from keyrules import (
    DuplicateKeyError,
    InvalidSchemaError,
    PredicateTable,
    RuleSpec,
    UnknownPredicateError,
    compile_schema,
)
from keyrules.domain.predicates import DEFAULT_PREDICATES, NIL_CHECK
from keyrules.domain.types import Macro, Presence


class TestCompileSchema:
    def test_builds_nodes_in_order(self) -> None:
        schema = compile_schema(
            [
                RuleSpec(key="b", presence="required", predicate="nil?"),
                RuleSpec(key="a", presence="optional", macro="filled", predicate="str?"),
            ]
        )
        assert schema.keys == ["b", "a"]
        assert len(schema) == 2
        first = schema.rules[0]
        assert first.presence is Presence.REQUIRED
        assert first.macro is Macro.BARE
        assert first.predicate == NIL_CHECK

    def test_accepts_mappings(self) -> None:
        schema = compile_schema([{"key": "foo", "presence": "optional", "predicate": "nil?"}])
        assert schema.keys == ["foo"]

    def test_malformed_mapping_raises_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            compile_schema([{"key": "foo", "presence": "sometimes", "predicate": "nil?"}])

    def test_empty_schema_always_succeeds(self) -> None:
        schema = compile_schema([])
        assert schema({"anything": 1}).success

    @pytest.mark.parametrize("presence", ["required", "optional"])
    def test_maybe_nil_rejected_for_any_presence(self, presence: str) -> None:
        with pytest.raises(InvalidSchemaError) as exc_info:
            compile_schema(
                [{"key": "foo", "presence": presence, "macro": "maybe", "predicate": "nil?"}]
            )
        assert exc_info.value.key == "foo"
        assert exc_info.value.macro == "maybe"

    def test_invalid_rule_anywhere_rejects_whole_schema(self) -> None:
        rules = [
            {"key": "ok", "presence": "required", "predicate": "str?"},
            {"key": "bad", "presence": "optional", "macro": "maybe", "predicate": "nil?"},
        ]
        with pytest.raises(InvalidSchemaError) as exc_info:
            compile_schema(rules)
        assert exc_info.value.key == "bad"

    def test_unknown_predicate(self) -> None:
        with pytest.raises(UnknownPredicateError):
            compile_schema([{"key": "foo", "presence": "required", "predicate": "shiny?"}])

    def test_duplicate_key(self) -> None:
        rule = {"key": "foo", "presence": "required", "predicate": "nil?"}
        with pytest.raises(DuplicateKeyError):
            compile_schema([rule, rule])


class TestSchemaImmutability:
    def test_schema_is_frozen(self) -> None:
        schema = compile_schema([{"key": "foo", "presence": "required", "predicate": "nil?"}])
        with pytest.raises(AttributeError):
            schema.rules = ()  # type: ignore[misc]

    def test_predicate_snapshot_is_isolated(self) -> None:
        table = DEFAULT_PREDICATES.copy()
        table.register("flag?", lambda v: v == "on", "must be on")
        schema = compile_schema(
            [{"key": "foo", "presence": "required", "predicate": "flag?"}], predicates=table
        )
        table.register("flag?", lambda v: True, "replaced")
        assert schema({"foo": "off"}).errors == {"foo": ["must be on"]}

    def test_snapshot_only_holds_used_predicates(self) -> None:
        schema = compile_schema([{"key": "foo", "presence": "required", "predicate": "nil?"}])
        assert set(schema.predicates) == {"nil?"}

    def test_custom_table_does_not_see_defaults(self) -> None:
        with pytest.raises(UnknownPredicateError):
            compile_schema(
                [{"key": "foo", "presence": "required", "predicate": "nil?"}],
                predicates=PredicateTable(),
            )


class TestDeterminism:
    RULES = [
        {"key": "foo", "presence": "required", "macro": "filled", "predicate": "nil?"},
        {"key": "bar", "presence": "optional", "predicate": "int?"},
    ]
    INPUTS = [{}, {"foo": None}, {"foo": ""}, {"foo": 23, "bar": "x"}, {"bar": 1}]

    def test_same_rules_same_behaviour(self) -> None:
        first = compile_schema(self.RULES)
        second = compile_schema(self.RULES)
        for data in self.INPUTS:
            assert first(data) == second(data)

    def test_repeated_evaluation_is_stable(self) -> None:
        schema = compile_schema(self.RULES)
        rules_before = schema.rules
        results = [schema({"foo": 23}) for _ in range(3)]
        assert results[0] == results[1] == results[2]
        assert schema.rules is rules_before

    def test_concurrent_evaluation(self) -> None:
        schema = compile_schema(self.RULES)
        expected = [schema(data) for data in self.INPUTS]
        with ThreadPoolExecutor(max_workers=8) as pool:
            actual = list(pool.map(schema, self.INPUTS * 20))
        assert actual == expected * 20
