"""
iCalendar property serialization library.
"""

__version__ = '0.1.0'

from .exceptions import (
    ConfigError,
    ICalKitError,
    InvalidFieldError,
)
from .models.event import EventFields, EventFieldsBuilder
from .models.property import Property, PropertySet
from .services.calendar.formatters import SuffixPolicy
from .services.calendar_service import CalendarService

__all__ = [
    'CalendarService',
    'ConfigError',
    'EventFields',
    'EventFieldsBuilder',
    'ICalKitError',
    'InvalidFieldError',
    'Property',
    'PropertySet',
    'SuffixPolicy'
]
