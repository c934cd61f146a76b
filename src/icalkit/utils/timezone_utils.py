"""Timezone utilities for the library."""

from datetime import date, datetime, timedelta, timezone
from zoneinfo import ZoneInfo


def format_offset(offset: timedelta) -> str:
    """Format a UTC offset as +HH:MM."""
    minutes = int(offset.total_seconds()) // 60
    sign = "-" if minutes < 0 else "+"
    hours, minutes = divmod(abs(minutes), 60)
    return f"{sign}{hours:02d}:{minutes:02d}"

class TimezoneManager:
    """Resolves zone identifiers and the current time for a default zone."""

    def __init__(self, local_timezone: str = "UTC"):
        """Initialize timezone manager.

        Args:
            local_timezone: The zone applied to naive values. Defaults to UTC.

        Raises:
            ValueError: If the timezone is invalid
        """
        self.set_timezone(local_timezone)

    def set_timezone(self, timezone_name: str) -> None:
        """Set the local timezone.

        Args:
            timezone_name: IANA timezone name

        Raises:
            ValueError: If the timezone is invalid
        """
        try:
            self.local_tz = ZoneInfo(timezone_name)
        except Exception as e:
            raise ValueError(f"Invalid timezone {timezone_name}: {e!s}") from e

    def localize_datetime(self, dt: datetime) -> datetime:
        """Attach the local zone to a naive datetime, convert an aware one."""
        if dt.tzinfo is None:
            return dt.replace(tzinfo=self.local_tz)
        return dt.astimezone(self.local_tz)

    def now(self) -> datetime:
        """Get current time in local timezone."""
        return datetime.now(self.local_tz)

    def zone_name(self, value: date) -> str:
        """Return the zone identifier a TZID parameter should carry for value.

        Naive datetimes and plain dates fall back to the local zone.
        """
        if not isinstance(value, datetime) or value.tzinfo is None:
            return self.timezone_name
        tzinfo = value.tzinfo
        if isinstance(tzinfo, ZoneInfo):
            # zones loaded with ZoneInfo.from_file have no key
            return tzinfo.key or self.timezone_name
        if tzinfo is timezone.utc:
            return "UTC"
        offset = value.utcoffset()
        name = value.tzname()
        if isinstance(tzinfo, timezone) and name == timezone(offset).tzname(None):
            return format_offset(offset)
        return name or self.timezone_name

    @property
    def timezone_name(self) -> str:
        """Get the name of the local timezone."""
        return str(self.local_tz)

    @staticmethod
    def is_valid_timezone(timezone_name: str) -> bool:
        """Check if a timezone name is valid.

        Args:
            timezone_name: IANA timezone name to check

        Returns:
            True if timezone is valid, False otherwise
        """
        try:
            ZoneInfo(timezone_name)
            return True
        except Exception:
            return False
