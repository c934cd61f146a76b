"""Tests for the calendar service."""

import logging
from datetime import UTC, datetime
from zoneinfo import ZoneInfo

import pytest

from icalkit.config.types import AppConfig
from icalkit.exceptions import InvalidFieldError
from icalkit.models.event import EventFields
from icalkit.services.calendar_service import CalendarService


START = datetime(2024, 1, 15, 9, tzinfo=UTC)
END = datetime(2024, 1, 15, 10, tzinfo=UTC)

def test_new_event_uses_injected_uid_generator(service):
    assert service.new_event().build().unique_id == 'uid-1'
    assert service.new_event().build().unique_id == 'uid-2'
    assert service.new_event('evt-1').build().unique_id == 'evt-1'

def test_new_event_applies_configured_timezone_default(clock):
    service = CalendarService(AppConfig(use_timezone=True), clock=clock)
    assert service.new_event('evt-1').build().use_timezone is True
    assert service.new_event('evt-1').use_timezone(False).build().use_timezone is False

def test_render_event(service):
    event = EventFields('evt-1', start=START, end=END, sequence=2, summary='Standup')
    assert service.render_event(event) == (
        'BEGIN:VEVENT\r\n'
        'UID:evt-1\r\n'
        'DTSTAMP:20240301T123045Z\r\n'
        'DTSTART:20240115T090000Z\r\n'
        'DTEND:20240115T100000Z\r\n'
        'SEQUENCE:2\r\n'
        'SUMMARY:Standup\r\n'
        'END:VEVENT\r\n'
    )

def test_render_event_with_timezone_and_omit_policy(clock):
    config = AppConfig(suffix_policy='omit_with_tzid')
    service = CalendarService(config, clock=clock)
    oslo = ZoneInfo('Europe/Oslo')
    event = EventFields(
        'evt-1',
        stamp=datetime(2024, 1, 10, 8, tzinfo=oslo),
        start=datetime(2024, 1, 15, 9, tzinfo=oslo),
        end=datetime(2024, 1, 15, 10, tzinfo=oslo),
        use_timezone=True
    )
    text = service.render_event(event)
    assert 'DTSTART;TZID=Europe/Oslo:20240115T090000\r\n' in text
    assert 'DTEND;TZID=Europe/Oslo:20240115T100000\r\n' in text

def test_render_calendar(service):
    events = [
        service.new_event().start(START).end(END).summary('First').build(),
        service.new_event().start(START).end(END).summary('Second').build(),
    ]
    text = service.render_calendar(events)

    lines = text.split('\r\n')
    assert lines[:5] == [
        'BEGIN:VCALENDAR',
        'PRODID:-//icalkit//EN',
        'VERSION:2.0',
        'CALSCALE:GREGORIAN',
        'METHOD:PUBLISH',
    ]
    assert text.count('BEGIN:VEVENT') == 2
    assert 'UID:uid-1\r\n' in text
    assert 'UID:uid-2\r\n' in text
    assert text.endswith('END:VCALENDAR\r\n')

def test_render_calendar_uses_configured_prodid(clock):
    service = CalendarService(AppConfig(prodid='-//Example Corp//Planner//EN'), clock=clock)
    assert 'PRODID:-//Example Corp//Planner//EN\r\n' in service.render_calendar([])

def test_render_calendar_aborts_on_invalid_event(service, caplog):
    good = EventFields('evt-1')
    bad = EventFields('evt-2')
    object.__setattr__(bad, 'sequence', -5)
    with caplog.at_level(logging.ERROR), pytest.raises(InvalidFieldError):
        service.render_calendar([good, bad])
    assert any('render_calendar failed' in r.getMessage() for r in caplog.records)

def test_unfolded_output_when_disabled(clock):
    service = CalendarService(AppConfig(fold_lines=False), clock=clock)
    text = service.render_event(EventFields('evt-1', description='y' * 200))
    assert 'DESCRIPTION:' + 'y' * 200 + '\r\n' in text

@pytest.mark.parametrize('fold_lines', [True, False])
def test_url_line_break_cannot_inject_properties(clock, fold_lines):
    service = CalendarService(AppConfig(fold_lines=fold_lines), clock=clock)
    with pytest.raises(InvalidFieldError):
        service.render_event(EventFields('evt-1', url='http://x\r\nATTENDEE:mailto:evil@x'))

def test_lone_carriage_return_is_escaped(service):
    text = service.render_event(EventFields('evt-1', summary='a\rb', location='c\rd'))
    assert 'SUMMARY:a\\nb\r\n' in text
    assert 'LOCATION:c\\nd\r\n' in text
    assert '\r' not in text.replace('\r\n', '')
