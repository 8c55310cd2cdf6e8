"""Application configuration: settings schema and .fmconvert.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator


CONFIG_FILE = ".fmconvert.yaml"


class Settings(BaseModel):
    # A misspelled key in .fmconvert.yaml would otherwise silently keep the default.
    model_config = ConfigDict(extra="forbid")

    strict_dates: bool = Field(default=False,  description="Unparsable dates abort instead of being dropped")
    require_date: bool = Field(default=False,  description="Target 'date' is mandatory")
    unknown_keys: str  = Field(default="drop", pattern="^(drop|extra|error)$",
                               description="Keys outside both schemas: drop, file under extra, or error")
    log_level:    str  = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value


def _read_config_file(path: Path) -> dict[str, Any]:
    """Parse the optional project config file; it must hold a mapping of Settings keys."""
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid {path.name}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Invalid {path.name}: expected a mapping, got {type(data).__name__}")
    return data


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Build Settings for one conversion run.

    Precedence, lowest first: .fmconvert.yaml in the working directory,
    FMCONVERT_<FIELD> env vars, then non-None CLI overrides. Keys that are
    not Settings fields are rejected, so a typo in the config file fails
    loudly instead of quietly converting with defaults.
    """
    path = Path(CONFIG_FILE)
    data = _read_config_file(path) if path.exists() else {}

    for name in Settings.model_fields:
        if val := os.getenv(f"FMCONVERT_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
