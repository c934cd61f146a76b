"""Tests for the content line writer."""

from icalkit.models.property import Property, PropertySet
from icalkit.services.calendar.writer import CRLF, ContentLineWriter


def test_render_property_without_parameters():
    assert ContentLineWriter.render_property(Property('UID', 'evt-1')) == 'UID:evt-1'

def test_render_property_with_parameters_in_insertion_order():
    prop = Property('DTSTART', '20240115', {'TZID': 'Europe/Oslo', 'VALUE': 'DATE'})
    assert ContentLineWriter.render_property(prop) == 'DTSTART;TZID=Europe/Oslo;VALUE=DATE:20240115'

def test_parameter_values_with_special_characters_are_quoted():
    prop = Property('DTSTART', '20240115T090000', {'TZID': 'Custom;Zone'})
    assert ContentLineWriter.render_property(prop) == 'DTSTART;TZID="Custom;Zone":20240115T090000'

def test_long_lines_are_folded():
    writer = ContentLineWriter()
    line = writer.render_lines([Property('DESCRIPTION', 'x' * 100)])[0]
    parts = line.split('\r\n ')
    assert len(parts) == 2
    assert all(len(part.encode('utf-8')) <= 75 for part in parts)
    assert ''.join(parts) == 'DESCRIPTION:' + 'x' * 100

def test_folding_can_be_disabled():
    writer = ContentLineWriter(fold_lines=False)
    line = writer.render_lines([Property('DESCRIPTION', 'x' * 100)])[0]
    assert line == 'DESCRIPTION:' + 'x' * 100

def test_render_component():
    properties = PropertySet()
    properties.set('UID', 'evt-1')
    properties.set('SEQUENCE', 0)
    text = ContentLineWriter().render_component('VEVENT', properties)
    assert text == 'BEGIN:VEVENT\r\nUID:evt-1\r\nSEQUENCE:0\r\nEND:VEVENT\r\n'

def test_render_component_keeps_duplicates():
    properties = PropertySet()
    properties.set('COMMENT', 'one')
    properties.set('COMMENT', 'two')
    text = ContentLineWriter().render_component('VEVENT', properties)
    assert text.count('COMMENT:') == 2

def test_render_calendar():
    header = PropertySet()
    header.set('VERSION', '2.0')
    event = 'BEGIN:VEVENT' + CRLF + 'UID:evt-1' + CRLF + 'END:VEVENT' + CRLF
    text = ContentLineWriter().render_calendar([event, event], header)
    assert text.startswith('BEGIN:VCALENDAR\r\nVERSION:2.0\r\nBEGIN:VEVENT\r\n')
    assert text.endswith('END:VEVENT\r\nEND:VCALENDAR\r\n')
    assert text.count('BEGIN:VEVENT') == 2
