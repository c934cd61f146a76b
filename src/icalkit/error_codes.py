"""Error codes for the icalkit library."""

from enum import Enum

class ErrorCode(Enum):
    """Enumeration of all possible error codes."""
    # Data Errors
    VALIDATION_FAILED = "validation_failed"
    
    # Configuration Errors
    CONFIG_INVALID = "config_invalid"
    CONFIG_MISSING = "config_missing"
