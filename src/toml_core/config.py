"""Decoder configuration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class DecoderConfig(BaseModel):
    """Options accepted by ``decode``."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    # Arrays and inline tables each add one level; capped to stay below the interpreter's recursion limit.
    max_depth: int = Field(default=64, ge=1, le=256, description="Maximum nesting depth of arrays and inline tables")
    # Off by default: bare true/false are rejected as a bad value start.
    booleans: bool = Field(default=False, description="Accept true/false literals as values")
