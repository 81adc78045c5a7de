"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator

import pytest
import structlog

from keyrules.config.logging import configure_logging


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    keyrules_level = logging.getLogger("keyrules").level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    logging.getLogger("keyrules").setLevel(keyrules_level)


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True)
        assert logging.getLogger("keyrules").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False)
        assert logging.getLogger("keyrules").level == logging.WARNING

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        structlog.get_logger("keyrules.test").warning("json test", answer=42)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "keyrules.test"
        assert "timestamp" in parsed

    def test_compiler_debug_is_structured(self, capfd: pytest.CaptureFixture[str]) -> None:
        from keyrules import compile_schema

        configure_logging(verbose=True, log_json=True)
        compile_schema([{"key": "foo", "presence": "required", "predicate": "nil?"}])
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["logger"] == "keyrules.engine.compiler"
        assert parsed["level"] == "debug"
        assert "foo" in parsed["event"]

    def test_quiet_by_default(self, capfd: pytest.CaptureFixture[str]) -> None:
        from keyrules import compile_schema

        configure_logging(verbose=False, log_json=True)
        compile_schema([{"key": "foo", "presence": "required", "predicate": "nil?"}])
        assert capfd.readouterr().err == ""

    def test_idempotent_calls(self) -> None:
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        assert len(logging.getLogger().handlers) == 1
