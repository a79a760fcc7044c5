"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for the
evaluator and its trace store.

Usage:
    from protoslots.config import EvaluatorSettings

    # Load from environment variables (PROTOSLOTS_*)
    settings = EvaluatorSettings()

    # Or override with explicit values
    settings = EvaluatorSettings(parameter_slot="arg", max_depth=200)
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EvaluatorSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for the evaluator.

    Attributes:
        parameter_slot: Slot bound by parameterized dispatch and passed to
            native computations.
        max_depth: Maximum nesting of evaluate() calls. None leaves only the
            interpreter's recursion limit.
        trace_capacity: Number of dispatch records kept by an in-memory trace
            store built from these settings.

    Environment Variables:
        PROTOSLOTS_PARAMETER_SLOT
        PROTOSLOTS_MAX_DEPTH
        PROTOSLOTS_TRACE_CAPACITY
    """

    model_config = SettingsConfigDict(
        env_prefix="PROTOSLOTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    parameter_slot: str = Field(default="parameter", min_length=1)
    max_depth: int | None = Field(default=None, ge=1)
    trace_capacity: int = Field(default=1000, ge=1)
