"""Configuration validation utilities."""

import logging
from typing import Any

from icalkit.config.types import AppConfig
from icalkit.config.utils import parse_bool
from icalkit.exceptions import ConfigError
from icalkit.services.calendar.formatters import SuffixPolicy
from icalkit.utils.timezone_utils import TimezoneManager


LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')

def _validate_bool(raw: dict[str, Any], key: str) -> bool:
    value = parse_bool(raw[key])
    if value is None:
        raise ConfigError(
            f"Invalid boolean for {key}: {raw[key]!r}",
            {"key": key, "value": raw[key]}
        )
    return value

def validate_config(raw: dict[str, Any]) -> AppConfig:
    """
    Validate a merged configuration mapping.
    
    Args:
        raw: Defaults merged with file and environment values
        
    Returns:
        Validated AppConfig
        
    Raises:
        ConfigError: If configuration is invalid
    """
    unknown = set(raw) - set(AppConfig.__dataclass_fields__)
    if unknown:
        raise ConfigError(
            "Unknown configuration keys",
            {"keys": sorted(unknown)}
        )

    timezone = str(raw['timezone'])
    if not TimezoneManager.is_valid_timezone(timezone):
        raise ConfigError(f"Unknown timezone: {timezone}", {"timezone": timezone})

    policies = [policy.value for policy in SuffixPolicy]
    suffix_policy = str(raw['suffix_policy']).lower()
    if suffix_policy not in policies:
        raise ConfigError(
            f"Unknown suffix policy: {raw['suffix_policy']}",
            {"suffix_policy": raw['suffix_policy'], "allowed": policies}
        )

    log_level = str(raw['log_level']).upper()
    if log_level not in LOG_LEVELS:
        raise ConfigError(f"Unknown log level: {raw['log_level']}", {"log_level": raw['log_level']})

    config = AppConfig(
        timezone=timezone,
        use_timezone=_validate_bool(raw, 'use_timezone'),
        suffix_policy=suffix_policy,
        fold_lines=_validate_bool(raw, 'fold_lines'),
        prodid=str(raw['prodid']),
        log_level=log_level,
        log_file=raw.get('log_file') or None
    )
    logging.getLogger(__name__).debug(f"Validated configuration: {config}")
    return config
