"""Value formatters turning typed field values into iCalendar text."""

from collections.abc import Callable
from datetime import date, datetime, time
from enum import Enum
from typing import Any

from icalendar import vDate, vDatetime, vText

from icalkit.models.event import validate_non_negative
from icalkit.models.property import Property
from icalkit.utils.logging_utils import EnhancedLoggerMixin
from icalkit.utils.timezone_utils import TimezoneManager


UTC_SUFFIX = 'Z'

Clock = Callable[[], datetime]

class SuffixPolicy(Enum):
    """When the UTC designator is appended to a date-time value.

    ALWAYS reproduces the legacy output, where ``Z`` follows the clock time
    even when a TZID parameter names another zone. OMIT_WITH_TZID drops the
    suffix whenever TZID is attached, as RFC 5545 requires.
    """
    ALWAYS = 'always'
    OMIT_WITH_TZID = 'omit_with_tzid'

def escape_text(value: str) -> str:
    """Escape a TEXT value (backslash, semicolon, comma, newlines).

    A lone carriage return counts as a line break.
    """
    value = value.replace("\r\n", "\n").replace("\r", "\n")
    return vText(value).to_ical().decode('utf-8')

def format_boolean(flag: bool) -> str:
    return 'TRUE' if flag else 'FALSE'

def format_integer(value: Any, field: str = 'sequence') -> str:
    """Render a non-negative integer as decimal text.

    Raises:
        InvalidFieldError: If value is negative or not an integer
    """
    return str(validate_non_negative(value, field))

def format_date(value: date) -> str:
    """Format as YYYYMMDD."""
    if isinstance(value, datetime):
        value = value.date()
    return vDate(value).to_ical().decode('utf-8')

def format_datetime(value: date, utc_suffix: bool = True) -> str:
    """Format as YYYYMMDDTHHMMSS, optionally followed by the UTC designator.

    The clock time is written as it stands; no zone conversion happens.
    """
    if not isinstance(value, datetime):
        value = datetime.combine(value, time())
    # naive, so vDatetime never adds its own suffix
    text = vDatetime(value.replace(tzinfo=None)).to_ical().decode('utf-8')
    return text + UTC_SUFFIX if utc_suffix else text

class DateTimeFormatter(EnhancedLoggerMixin):
    """Builds date and date-time properties with their implied parameters."""

    def __init__(
        self,
        timezone_manager: TimezoneManager | None = None,
        suffix_policy: SuffixPolicy = SuffixPolicy.ALWAYS,
        clock: Clock | None = None
    ) -> None:
        super().__init__()
        self.timezone_manager = timezone_manager or TimezoneManager()
        self.suffix_policy = suffix_policy
        self._clock = clock or self.timezone_manager.now
        self._warned_tzid_suffix = False
        self.set_log_context(service="datetime_formatter")

    def now(self) -> datetime:
        return self._clock()

    def build_property(
        self,
        name: str,
        value: date | None,
        all_day: bool = False,
        use_timezone: bool = False
    ) -> Property:
        """Create a date or date-time property.

        Args:
            name: Property name, e.g. DTSTART
            value: The instant; None means now
            all_day: Render a DATE value instead of DATE-TIME
            use_timezone: Attach a TZID parameter naming the value's zone
        """
        if value is None:
            value = self.now()
            self.debug("Missing instant replaced with current time", property=name)

        parameters: dict[str, str] = {}
        if use_timezone:
            parameters['TZID'] = self.timezone_manager.zone_name(value)

        if all_day:
            parameters['VALUE'] = 'DATE'
            return Property(name, format_date(value), parameters)

        utc_suffix = self.suffix_policy is SuffixPolicy.ALWAYS or not use_timezone
        if utc_suffix and use_timezone and parameters['TZID'] != 'UTC':
            self._warn_tzid_suffix(name, parameters['TZID'])
        return Property(name, format_datetime(value, utc_suffix), parameters)

    def _warn_tzid_suffix(self, name: str, tzid: str) -> None:
        if self._warned_tzid_suffix:
            return
        self._warned_tzid_suffix = True
        self.warning(
            "TZID-qualified date-time rendered with UTC suffix",
            property=name,
            tzid=tzid,
            policy=self.suffix_policy.value
        )
