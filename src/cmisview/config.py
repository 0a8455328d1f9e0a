"""Runtime settings resolved from the environment."""

from __future__ import annotations

import os
from typing import Literal

from pydantic import BaseModel, Field, field_validator

ENV_PREFIX = "CMISVIEW_"

DumpFormat = Literal["auto", "raw", "hex"]

_TRUE_VALUES = {"1", "true", "yes", "on"}


class Settings(BaseModel):
    """Settings shared by the CLI and the report renderer."""

    log_level: str = "INFO"
    json_logs: bool = False
    label_width: int = Field(default=41, gt=0)
    dump_format: DumpFormat = "auto"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid log level: {v!r}")
        return level


def load_settings(environ: dict[str, str] | None = None) -> Settings:
    """Build Settings from ``CMISVIEW_*`` environment variables.

    Search order for each value:
        1. CMISVIEW_<NAME> environment variable
        2. Settings default
    """
    env = os.environ if environ is None else environ
    values: dict[str, object] = {}

    if f"{ENV_PREFIX}LOG_LEVEL" in env:
        values["log_level"] = env[f"{ENV_PREFIX}LOG_LEVEL"]
    if f"{ENV_PREFIX}JSON_LOGS" in env:
        values["json_logs"] = env[f"{ENV_PREFIX}JSON_LOGS"].strip().lower() in _TRUE_VALUES
    if f"{ENV_PREFIX}LABEL_WIDTH" in env:
        values["label_width"] = env[f"{ENV_PREFIX}LABEL_WIDTH"]
    if f"{ENV_PREFIX}DUMP_FORMAT" in env:
        values["dump_format"] = env[f"{ENV_PREFIX}DUMP_FORMAT"].strip().lower()

    return Settings(**values)
