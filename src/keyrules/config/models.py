"""Pydantic configuration sections with code-baked defaults.

Sparse TOML contract: defaults baked here, keyrules.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel


class ValidationConfig(BaseModel):
    """[validation] section."""

    model_config = {"frozen": True}

    schema_path: str = "schema.toml"


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    width: int = 120
