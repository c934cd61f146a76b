"""Configuration settings for icalkit."""

from dataclasses import asdict
from pathlib import Path
from typing import Any

import yaml

from icalkit.config.env import EnvConfig
from icalkit.config.types import AppConfig
from icalkit.config.utils import deep_merge
from icalkit.config.utils import resolve_path
from icalkit.config.validation import validate_config
from icalkit.error_codes import ErrorCode
from icalkit.exceptions import ConfigError


def _load_file_config(config_file: Path) -> dict[str, Any]:
    """Load configuration overrides from a YAML file."""
    if not config_file.exists():
        raise ConfigError(
            f"Configuration file not found: {config_file}",
            {"path": str(config_file)},
            ErrorCode.CONFIG_MISSING
        )

    try:
        with open(config_file, encoding="utf-8") as f:
            loaded = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_file}: {e}", {"path": str(config_file)}) from e

    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ConfigError(
            f"Configuration file must contain a mapping: {config_file}",
            {"path": str(config_file), "type": type(loaded).__name__}
        )
    return loaded

def load_config(config_file: str | Path | None = None) -> AppConfig:
    """Load configuration from defaults, an optional YAML file and environment.
    
    Later sources win: file values override defaults and environment
    variables override both.
    """
    config: dict[str, Any] = asdict(AppConfig())

    config_file = config_file or EnvConfig.get_config_file()
    if config_file:
        config = deep_merge(config, _load_file_config(resolve_path(config_file)))

    EnvConfig.update_config_from_env(config)
    return validate_config(config)
