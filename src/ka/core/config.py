"""Configuration loading and validation."""

import logging
import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("~/.config/ka/config.yaml")


class DisplayConfig(BaseModel):
    """Column layout and emphasis markers for the selection list."""
    pid_width: int = 8
    name_width: int = 25
    separator_overhead: int = 11  # two-space gaps plus prompt chrome
    min_cmd_width: int = 10

    ellipsis: str = ".."
    highlight_start: str = "\033[1;42;37m"  # bold white on green
    highlight_end: str = "\033[0m"

    @field_validator("pid_width", "name_width", "min_cmd_width")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"column width must be >= 1, got {v}")
        return v

    @field_validator("ellipsis")
    @classmethod
    def validate_ellipsis(cls, v: str) -> str:
        if len(v) > 3:
            raise ValueError(f"ellipsis must be at most 3 characters, got {v!r}")
        return v


class KaConfig(BaseSettings):
    """Main ka configuration."""
    model_config = SettingsConfigDict(env_prefix="KA_", extra="ignore")

    default_signal: int = 15  # SIGTERM
    fallback_width: int = 80
    fallback_height: int = 24
    page_margin: int = 4  # lines reserved for prompt message and help
    prompt_message: str = "Select processes to kill:"

    display: DisplayConfig = Field(default_factory=DisplayConfig)

    @field_validator("default_signal")
    @classmethod
    def validate_signal(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"default_signal must be >= 1, got {v}")
        return v


def default_config_path() -> Path:
    """$KA_CONFIG if set, else ~/.config/ka/config.yaml."""
    override = os.environ.get("KA_CONFIG")
    path = Path(override) if override else DEFAULT_CONFIG_PATH
    return path.expanduser()


def load_config(config_path: Optional[Path] = None) -> KaConfig:
    """Load configuration from YAML, falling back to defaults when absent."""
    path = config_path if config_path is not None else default_config_path()
    if not path.exists():
        logger.debug(f"Config file not found: {path}. Using default configuration.")
        return KaConfig()

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping, got {type(data).__name__}")

    data = _expand_env_vars(data)
    logger.debug(f"Loaded config from {path}")
    return KaConfig(**data)


def _expand_env_vars(data: Any, _path: str = "") -> Any:
    """Recursively expand ${VAR} references in config data.

    Args:
        data: Config data to process
        _path: Internal tracking for warnings (e.g., "display.ellipsis")
    """
    if isinstance(data, dict):
        return {k: _expand_env_vars(v, f"{_path}.{k}" if _path else k) for k, v in data.items()}
    elif isinstance(data, list):
        return [_expand_env_vars(item, f"{_path}[{i}]") for i, item in enumerate(data)]
    elif isinstance(data, str) and data.startswith("${") and data.endswith("}"):
        env_var = data[2:-1]
        value = os.environ.get(env_var)
        if value is None:
            logger.warning(
                f"Environment variable '{env_var}' not set (referenced at config path: {_path or 'root'}). "
                f"The literal string '{data}' will be used."
            )
            return data
        return value
    return data
