"""
Models package for icalkit.
Contains the property model and event field value objects.
"""

from icalkit.models.event import EventFields, EventFieldsBuilder, default_uid_generator
from icalkit.models.property import Property, PropertySet

__all__ = ['EventFields', 'EventFieldsBuilder', 'Property', 'PropertySet', 'default_uid_generator']
