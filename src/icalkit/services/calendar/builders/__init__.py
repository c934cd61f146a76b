"""
Calendar builders package.
"""

from icalkit.services.calendar.builders.event_builder import ALL_DAY_MARKER
from icalkit.services.calendar.builders.event_builder import EventPropertyBuilder

__all__ = [
    'ALL_DAY_MARKER',
    'EventPropertyBuilder'
]
