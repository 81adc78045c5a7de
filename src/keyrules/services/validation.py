"""ValidationService: schema checking and input validation.

Translates compiler exceptions and evaluation failures into
ServiceResult payloads the CLI (or any other adapter) can render.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from keyrules.domain.errors import InvalidSchemaError, SchemaFileError
from keyrules.domain.predicates import PredicateTable
from keyrules.engine.compiler import Schema
from keyrules.infrastructure.schema_file import load_schema
from keyrules.services.result import ServiceResult

logger = logging.getLogger(__name__)

CODE_SCHEMA_FILE = "SCHEMA_FILE"
CODE_INVALID_SCHEMA = "INVALID_SCHEMA"
CODE_INVALID_INPUT = "INVALID_INPUT"
CODE_VALIDATION_FAILED = "VALIDATION_FAILED"


class ValidationService:
    """Loads schema files and runs them against input payloads."""

    def __init__(self, predicates: PredicateTable | None = None) -> None:
        self._predicates = predicates

    def _load(self, op: str, path: Path) -> Schema | ServiceResult:
        try:
            return load_schema(path, predicates=self._predicates)
        except SchemaFileError as exc:
            logger.debug("Schema file unusable: %s", exc)
            return ServiceResult.fail(op, CODE_SCHEMA_FILE, str(exc), path=str(path))
        except InvalidSchemaError as exc:
            logger.debug("Schema rejected: %s", exc)
            return ServiceResult.fail(
                op, CODE_INVALID_SCHEMA, str(exc), path=str(path), **exc.to_detail()
            )

    def check_schema(self, path: Path) -> ServiceResult:
        """Compile the schema at *path* without evaluating anything."""
        op = "check_schema"
        loaded = self._load(op, path)
        if isinstance(loaded, ServiceResult):
            return loaded
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "path": str(path),
                "count": len(loaded),
                "rules": [node.to_dict() for node in loaded.rules],
            },
        )

    def validate(self, path: Path, payload: Any) -> ServiceResult:
        """Compile the schema at *path* and evaluate *payload* against it."""
        op = "validate"
        if not isinstance(payload, Mapping):
            msg = f"Input must be a mapping, got {type(payload).__name__}"
            return ServiceResult.fail(op, CODE_INVALID_INPUT, msg)

        loaded = self._load(op, path)
        if isinstance(loaded, ServiceResult):
            return loaded

        result = loaded(payload)
        logger.debug("Validated input against %s: success=%s", path, result.success)
        if result.success:
            return ServiceResult(ok=True, op=op, data={"output": result.output})

        failing = len(result.errors)
        return ServiceResult.fail(
            op,
            CODE_VALIDATION_FAILED,
            f"{failing} key(s) failed validation",
            errors=result.errors,
        )
