"""Event builder turning EventFields into VEVENT properties."""

from icalkit.models.event import EventFields
from icalkit.models.property import PropertySet
from icalkit.services.calendar.formatters import (
    DateTimeFormatter,
    escape_text,
    format_boolean,
    format_integer,
)
from icalkit.utils.logging_utils import EnhancedLoggerMixin


ALL_DAY_MARKER = 'X-MICROSOFT-CDO-ALLDAYEVENT'

# (property name, field name, escape as TEXT)
OPTIONAL_PROPERTIES = (
    ('URL', 'url', False),
    ('LOCATION', 'location', True),
    ('SUMMARY', 'summary', True),
    ('DESCRIPTION', 'description', True),
)

class EventPropertyBuilder(EnhancedLoggerMixin):
    """Builds the ordered property set of a VEVENT."""

    component_type = 'VEVENT'

    def __init__(self, datetime_formatter: DateTimeFormatter | None = None) -> None:
        """Initialize builder."""
        super().__init__()
        self.datetime_formatter = datetime_formatter or DateTimeFormatter()
        self.set_log_context(service="event_builder")

    def build(self, event: EventFields) -> PropertySet:
        """Build a fresh property set for event.

        Raises:
            InvalidFieldError: If the sequence is invalid; nothing is returned
        """
        sequence = format_integer(event.sequence, 'sequence')
        formatter = self.datetime_formatter
        properties = PropertySet()

        # mandatory information
        properties.set('UID', escape_text(event.unique_id))
        properties.add(formatter.build_property('DTSTAMP', event.stamp, False, event.use_timezone))
        properties.add(formatter.build_property('DTSTART', event.start, event.all_day, event.use_timezone))
        properties.add(formatter.build_property('DTEND', event.end, event.all_day, event.use_timezone))
        properties.set('SEQUENCE', sequence)

        # optional information
        for name, field_name, is_text in OPTIONAL_PROPERTIES:
            value = getattr(event, field_name)
            if value is not None:
                properties.set(name, escape_text(value) if is_text else value)

        if event.all_day:
            properties.set(ALL_DAY_MARKER, format_boolean(True))

        self.debug(f"Built {len(properties)} properties", uid=event.unique_id)
        return properties
