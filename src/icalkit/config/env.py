"""Environment variable handling for configuration."""

import os
from typing import Any


CONFIG_FILE_ENV = 'ICALKIT_CONFIG_FILE'

class EnvConfig:
    """Environment variable configuration."""

    # Mapping of environment variables to configuration paths
    ENV_MAPPING = {
        'ICALKIT_TIMEZONE': ('timezone',),
        'ICALKIT_USE_TIMEZONE': ('use_timezone',),
        'ICALKIT_SUFFIX_POLICY': ('suffix_policy',),
        'ICALKIT_FOLD_LINES': ('fold_lines',),
        'ICALKIT_PRODID': ('prodid',),
        'ICALKIT_LOG_LEVEL': ('log_level',),
        'ICALKIT_LOG_FILE': ('log_file',),
    }

    @staticmethod
    def get_env_value(env_var: str, default: Any | None = None) -> Any | None:
        """Get value from environment variable with default."""
        return os.getenv(env_var, default)

    @staticmethod
    def _set_nested_value(config: dict[str, Any], path: tuple, value: Any) -> None:
        """Set value in nested dictionary using path tuple."""
        current = config
        for part in path[:-1]:
            if part not in current:
                current[part] = {}
            current = current[part]
        current[path[-1]] = value

    @classmethod
    def update_config_from_env(cls, config: dict[str, Any]) -> None:
        """Update configuration dictionary with environment variables.
        
        Args:
            config: Configuration dictionary to update
        """
        for env_var, path in cls.ENV_MAPPING.items():
            value = cls.get_env_value(env_var)
            if value is not None:
                cls._set_nested_value(config, path, value)

    @classmethod
    def get_config_file(cls) -> str | None:
        """Get the configuration file path from environment."""
        return cls.get_env_value(CONFIG_FILE_ENV)
