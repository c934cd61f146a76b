"""
Event field models.
"""

import itertools
import re
import secrets
import time
from collections.abc import Callable
from dataclasses import dataclass, fields, replace
from datetime import date
from typing import Any

from icalkit.exceptions import InvalidFieldError


UidGenerator = Callable[[], str]

OPTIONAL_TEXT_FIELDS = ('url', 'location', 'summary', 'description')

# URL values are written unescaped
CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")

_uid_counter = itertools.count()

def default_uid_generator() -> str:
    """Return an identifier unique within this process.

    Combines the nanosecond clock, a process-wide counter and random bits.
    """
    return f"{time.time_ns():x}{next(_uid_counter):04x}-{secrets.token_hex(4)}"

def validate_non_negative(value: Any, field: str) -> int:
    """Check that value is a non-negative integer and return it."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidFieldError(
            f"{field} must be an integer, got {type(value).__name__}",
            field=field
        )
    if value < 0:
        raise InvalidFieldError(
            f"{field} must not be negative, got {value}",
            field=field,
            details={"value": value}
        )
    return value

@dataclass(frozen=True)
class EventFields:
    """Immutable input for a single VEVENT.

    Absent instants (``None``) are rendered as the current time; absent
    optional text fields are omitted. Empty strings count as absent.
    """
    unique_id: str
    stamp: date | None = None
    start: date | None = None
    end: date | None = None
    all_day: bool = False
    sequence: int = 0
    url: str | None = None
    location: str | None = None
    summary: str | None = None
    description: str | None = None
    use_timezone: bool = False

    def __post_init__(self) -> None:
        validate_non_negative(self.sequence, 'sequence')
        for name in OPTIONAL_TEXT_FIELDS:
            if getattr(self, name) == '':
                object.__setattr__(self, name, None)
        if self.url is not None and CONTROL_CHARS.search(self.url):
            raise InvalidFieldError(
                f"url must not contain control characters: {self.url!r}",
                field='url'
            )

    def with_changes(self, **changes: Any) -> 'EventFields':
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

class EventFieldsBuilder:
    """Collects event values and produces one validated EventFields."""

    def __init__(
        self,
        unique_id: str | None = None,
        uid_generator: UidGenerator = default_uid_generator,
        **values: Any
    ) -> None:
        known = {f.name for f in fields(EventFields)}
        unknown = set(values) - known
        if unknown:
            raise TypeError(f"Unknown event fields: {', '.join(sorted(unknown))}")
        self._uid_generator = uid_generator
        self._values: dict[str, Any] = dict(values)
        if unique_id:
            self._values['unique_id'] = unique_id

    def _set(self, name: str, value: Any) -> 'EventFieldsBuilder':
        self._values[name] = value
        return self

    def unique_id(self, value: str) -> 'EventFieldsBuilder':
        return self._set('unique_id', value)

    def stamp(self, value: date | None) -> 'EventFieldsBuilder':
        return self._set('stamp', value)

    def start(self, value: date | None) -> 'EventFieldsBuilder':
        return self._set('start', value)

    def end(self, value: date | None) -> 'EventFieldsBuilder':
        return self._set('end', value)

    def all_day(self, flag: bool = True) -> 'EventFieldsBuilder':
        return self._set('all_day', flag)

    def sequence(self, value: int) -> 'EventFieldsBuilder':
        return self._set('sequence', value)

    def url(self, value: str | None) -> 'EventFieldsBuilder':
        return self._set('url', value)

    def location(self, value: str | None) -> 'EventFieldsBuilder':
        return self._set('location', value)

    def summary(self, value: str | None) -> 'EventFieldsBuilder':
        return self._set('summary', value)

    def description(self, value: str | None) -> 'EventFieldsBuilder':
        return self._set('description', value)

    def use_timezone(self, flag: bool = True) -> 'EventFieldsBuilder':
        return self._set('use_timezone', flag)

    def build(self) -> EventFields:
        """Validate the collected values and return the event.

        A missing or empty unique id is filled from the uid generator.

        Raises:
            InvalidFieldError: If the sequence is negative or not an integer,
                or the url contains control characters
        """
        values = dict(self._values)
        if not values.get('unique_id'):
            values['unique_id'] = self._uid_generator()
        return EventFields(**values)
