"""Pydantic models describing sha256tool configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from sha256tool.constants import DEFAULT_BUFFER_SIZE


class RuntimeConfig(BaseModel):
    """Stream handling settings."""

    model_config = ConfigDict(extra="forbid")

    buffer_size: int = Field(default=DEFAULT_BUFFER_SIZE, ge=1)


class LoggingConfig(BaseModel):
    """Diagnostic logging controls; console output of results is unaffected."""

    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    log_path: Optional[Path] = None


class Sha256ToolConfig(BaseModel):
    """Root configuration object."""

    model_config = ConfigDict(extra="forbid")

    runtime: RuntimeConfig = Field(default_factory=RuntimeConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


__all__ = ["LoggingConfig", "RuntimeConfig", "Sha256ToolConfig"]
