"""
Calendar service wiring formatters, builders and the writer together.
"""

from collections.abc import Iterable

from icalkit.config.types import AppConfig
from icalkit.models.event import EventFields
from icalkit.models.event import EventFieldsBuilder
from icalkit.models.event import UidGenerator
from icalkit.models.event import default_uid_generator
from icalkit.models.property import PropertySet
from icalkit.services.calendar.builders import EventPropertyBuilder
from icalkit.services.calendar.formatters import Clock
from icalkit.services.calendar.formatters import DateTimeFormatter
from icalkit.services.calendar.formatters import SuffixPolicy
from icalkit.services.calendar.formatters import escape_text
from icalkit.services.calendar.writer import ContentLineWriter
from icalkit.utils.logging_utils import EnhancedLoggerMixin
from icalkit.utils.logging_utils import log_execution
from icalkit.utils.timezone_utils import TimezoneManager


class CalendarService(EnhancedLoggerMixin):
    """Service for building and rendering calendar events."""

    def __init__(
        self,
        config: AppConfig | None = None,
        clock: Clock | None = None,
        uid_generator: UidGenerator | None = None
    ):
        """Initialize service."""
        super().__init__()
        self.config = config or AppConfig()
        self.uid_generator = uid_generator or default_uid_generator

        self.timezone_manager = TimezoneManager(self.config.timezone)
        self.datetime_formatter = DateTimeFormatter(
            timezone_manager=self.timezone_manager,
            suffix_policy=SuffixPolicy(self.config.suffix_policy),
            clock=clock
        )
        self.event_builder = EventPropertyBuilder(self.datetime_formatter)
        self.writer = ContentLineWriter(fold_lines=self.config.fold_lines)
        self.set_log_context(service="calendar")
        self.debug(
            "Calendar service ready",
            timezone=self.config.timezone,
            suffix_policy=self.config.suffix_policy
        )

    def new_event(self, unique_id: str | None = None) -> EventFieldsBuilder:
        """Start an event preset with the configured defaults."""
        return EventFieldsBuilder(
            unique_id,
            uid_generator=self.uid_generator,
            use_timezone=self.config.use_timezone
        )

    def build_properties(self, event: EventFields) -> PropertySet:
        return self.event_builder.build(event)

    def render_event(self, event: EventFields) -> str:
        """Render event as a VEVENT block."""
        return self.writer.render_component(
            self.event_builder.component_type,
            self.build_properties(event)
        )

    def build_calendar_properties(self) -> PropertySet:
        """Create the VCALENDAR header properties."""
        properties = PropertySet()
        properties.set('PRODID', escape_text(self.config.prodid))
        properties.set('VERSION', '2.0')
        properties.set('CALSCALE', 'GREGORIAN')
        properties.set('METHOD', 'PUBLISH')
        return properties

    @log_execution(level='DEBUG')
    def render_calendar(self, events: Iterable[EventFields]) -> str:
        """Render events inside a single VCALENDAR document.

        Every event is rendered before anything is returned, so an invalid
        event aborts the whole document.
        """
        components = [self.render_event(event) for event in events]
        self.info(f"Rendered calendar with {len(components)} events")
        return self.writer.render_calendar(components, self.build_calendar_properties())
