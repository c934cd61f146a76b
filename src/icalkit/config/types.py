"""Configuration type definitions."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class AppConfig:
    """Validated library configuration."""
    timezone: str = "UTC"
    use_timezone: bool = False
    suffix_policy: str = "always"
    fold_lines: bool = True
    prodid: str = "-//icalkit//EN"
    log_level: str = "WARNING"
    log_file: Optional[str] = None
