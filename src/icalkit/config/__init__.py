"""
Configuration package.
"""

from icalkit.config.settings import load_config
from icalkit.config.types import AppConfig

__all__ = ['AppConfig', 'load_config']
