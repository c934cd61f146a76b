"""Pytest configuration and shared fixtures."""

import logging
from datetime import UTC, datetime
from itertools import count

import pytest

from icalkit.config.env import CONFIG_FILE_ENV, EnvConfig
from icalkit.config.types import AppConfig
from icalkit.services.calendar.builders import EventPropertyBuilder
from icalkit.services.calendar.formatters import DateTimeFormatter
from icalkit.services.calendar_service import CalendarService
from icalkit.utils.timezone_utils import TimezoneManager


FIXED_NOW = datetime(2024, 3, 1, 12, 30, 45, tzinfo=UTC)

@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep ICALKIT_* variables from the outer environment out of tests."""
    for env_var in [*EnvConfig.ENV_MAPPING, CONFIG_FILE_ENV]:
        monkeypatch.delenv(env_var, raising=False)

@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo setup_logging changes made by CLI tests."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    for handler in root_logger.handlers:
        if handler not in handlers:
            handler.close()
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)

@pytest.fixture
def fixed_now():
    return FIXED_NOW

@pytest.fixture
def clock():
    """Clock that always returns FIXED_NOW."""
    return lambda: FIXED_NOW

@pytest.fixture
def uid_generator():
    """Deterministic uid generator yielding uid-1, uid-2, ..."""
    counter = count(1)
    return lambda: f"uid-{next(counter)}"

@pytest.fixture
def formatter(clock):
    return DateTimeFormatter(TimezoneManager("UTC"), clock=clock)

@pytest.fixture
def event_builder(formatter):
    return EventPropertyBuilder(formatter)

@pytest.fixture
def service(clock, uid_generator):
    return CalendarService(AppConfig(), clock=clock, uid_generator=uid_generator)
