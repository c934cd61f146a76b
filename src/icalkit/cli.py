"""
Command line interface for icalkit.
"""

import argparse
import sys
from dataclasses import replace
from datetime import date, datetime

from icalkit.config.logging import setup_logging
from icalkit.config.settings import load_config
from icalkit.config.types import AppConfig
from icalkit.exceptions import ConfigError, ICalKitError, InvalidFieldError, handle_errors
from icalkit.models.event import EventFields
from icalkit.services.calendar.formatters import SuffixPolicy
from icalkit.services.calendar_service import CalendarService
from icalkit.utils.logging_utils import get_logger


logger = get_logger(__name__)

def parse_instant(value: str) -> datetime:
    """Parse an ISO 8601 date or date-time argument."""
    try:
        return datetime.fromisoformat(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid ISO date or date-time: {value!r}") from e

def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog='icalkit',
        description='Render iCalendar events'
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    parser.add_argument('--log-file', help='Also write logs to this file')
    parser.add_argument('--config', help='Path to a YAML configuration file')

    subparsers = parser.add_subparsers(dest='command', required=True)

    render = subparsers.add_parser('render', help='Render a single event')
    render.add_argument('--uid', help='Unique identifier (generated when omitted)')
    render.add_argument('--stamp', type=parse_instant, help='DTSTAMP (default: now)')
    render.add_argument('--start', type=parse_instant, help='DTSTART (default: now)')
    render.add_argument('--end', type=parse_instant, help='DTEND (default: now)')
    render.add_argument('--all-day', action='store_true', help='Render start and end as dates')
    render.add_argument('--sequence', type=int, default=0, help='Revision sequence number (default: 0)')
    render.add_argument('--url')
    render.add_argument('--location')
    render.add_argument('--summary')
    render.add_argument('--description')
    render.add_argument(
        '--use-timezone',
        action='store_true',
        default=None,
        help='Attach TZID parameters to date-time values'
    )
    render.add_argument(
        '--suffix-policy',
        choices=[policy.value for policy in SuffixPolicy],
        help='When to append the UTC designator to date-time values'
    )
    render.add_argument(
        '--calendar',
        action='store_true',
        help='Wrap the event in a VCALENDAR document'
    )
    return parser

def _localize(service: CalendarService, value: datetime | None, all_day: bool) -> date | None:
    if value is None:
        return None
    if all_day:
        return value.date()
    return service.timezone_manager.localize_datetime(value) if value.tzinfo is None else value

def build_event(service: CalendarService, args: argparse.Namespace) -> EventFields:
    """Build the event described by the render arguments."""
    builder = service.new_event(args.uid)
    if args.use_timezone is not None:
        builder.use_timezone(args.use_timezone)
    return (
        builder
        .stamp(_localize(service, args.stamp, False))
        .start(_localize(service, args.start, args.all_day))
        .end(_localize(service, args.end, args.all_day))
        .all_day(args.all_day)
        .sequence(args.sequence)
        .url(args.url)
        .location(args.location)
        .summary(args.summary)
        .description(args.description)
        .build()
    )

def render_command(config: AppConfig, args: argparse.Namespace) -> int:
    if args.suffix_policy:
        config = replace(config, suffix_policy=args.suffix_policy)
    service = CalendarService(config)
    with handle_errors(InvalidFieldError, "cli", "render"):
        event = build_event(service, args)
        if args.calendar:
            output = service.render_calendar([event])
        else:
            output = service.render_event(event)
    sys.stdout.write(output)
    return 0

def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigError as e:
        setup_logging(verbose=args.verbose, log_file=args.log_file)
        logger.error(f"Failed to load configuration: {e}")
        return 1

    setup_logging(config, verbose=args.verbose, log_file=args.log_file)

    try:
        if args.command == 'render':
            return render_command(config, args)
    except ICalKitError:
        # already logged by handle_errors
        return 1

    parser.print_help()
    return 1

if __name__ == "__main__":
    sys.exit(main())
