from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Literal, Optional, Union

import yaml
from pydantic import BaseModel, field_validator

from acffields.core.exceptions import ConfigError
from acffields.models.provider_config import ProviderConfig
from acffields.transforms import DEFAULT_HOOK_NAME

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class ReaderConfig(BaseModel):
    hook_name: str = DEFAULT_HOOK_NAME
    on_provider_error: Literal["fail", "warn", "allow"] = "warn"
    log_level: LogLevel = "INFO"

    # None = field provider not installed
    provider: Optional[ProviderConfig] = None

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, v: Any) -> Any:
        return v.upper() if isinstance(v, str) else v

    @field_validator("hook_name")
    @classmethod
    def _non_empty_hook_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("hook_name must be a non-empty string")
        return v


def load_config(
    path: Optional[Union[str, Path]] = None,
    data: Optional[Dict[str, Any]] = None,
) -> ReaderConfig:
    """
    Load and validate a reader configuration.

    Args:
        path: JSON or YAML file
        data: Config dictionary (takes precedence over ``path``)

    Raises:
        ConfigError: If the file is missing or has an unsupported suffix
        pydantic.ValidationError: If the configuration is invalid
    """
    if data is not None:
        return ReaderConfig.model_validate(data)

    if path is None:
        return ReaderConfig()

    config_file = Path(path)
    if not config_file.exists():
        raise ConfigError(f"Config file not found: {path}")

    with open(config_file, "r") as f:
        if config_file.suffix == ".json":
            raw = json.load(f)
        elif config_file.suffix in (".yaml", ".yml"):
            raw = yaml.safe_load(f)
        else:
            raise ConfigError(f"Unsupported config format: {config_file.suffix}. Use .json or .yaml")

    return ReaderConfig.model_validate(raw or {})
