"""
Pytest configuration and shared fixtures for logstop tests.

Provides an in-memory logging setup so filter chains can be exercised
end to end without touching real streams.
"""

import io
import logging
import os
import re
import sys

import pytest

# Add parent directory to path for package imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from logstop import Scrubber  # noqa: E402

LOGSTOP_ENV_VARS = (
    "LOGSTOP_IP",
    "LOGSTOP_MAC",
    "LOGSTOP_URL_PASSWORD",
    "LOGSTOP_EMAIL",
    "LOGSTOP_CREDIT_CARD",
    "LOGSTOP_PHONE",
    "LOGSTOP_SSN",
    "LOGSTOP_MAX_DEPTH",
)


class PlaceholderFilter(logging.Filter):
    """
    Interpolate {key} placeholders in the message from the record's context.

    Stands in for another step of the host pipeline that may run before or
    after scrubbing.
    """

    _PLACEHOLDER = re.compile(r"\{(\w+)\}")

    def filter(self, record):
        context = getattr(record, "context", {})

        def replace(match):
            key = match.group(1)
            return str(context[key]) if key in context else match.group(0)

        record.msg = self._PLACEHOLDER.sub(replace, record.msg)
        return True


class CapturedLogger:
    """A logger writing to a StringIO through a single handler."""

    def __init__(self, name, fmt):
        self.stream = io.StringIO()
        self.handler = logging.StreamHandler(self.stream)
        self.handler.setFormatter(logging.Formatter(fmt))
        self.logger = logging.getLogger(name)
        self.logger.handlers = [self.handler]
        self.logger.setLevel(logging.INFO)
        self.logger.propagate = False

    def add_filter(self, log_filter):
        self.handler.addFilter(log_filter)

    def output(self):
        return self.stream.getvalue()

    def clear(self):
        self.stream.seek(0)
        self.stream.truncate(0)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Make sure no LOGSTOP_* variable leaks in from the outer environment."""
    for name in LOGSTOP_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield
    # .env files loaded during a test write straight to os.environ
    for name in LOGSTOP_ENV_VARS:
        os.environ.pop(name, None)


@pytest.fixture
def scrubber():
    """Return a Scrubber with default settings."""
    return Scrubber()


@pytest.fixture
def message_logger(request):
    """Logger whose output is only the formatted message."""
    return CapturedLogger(f"logstop.tests.{request.node.name}.message", "%(message)s")


@pytest.fixture
def context_logger(request):
    """Logger whose output is the message followed by the context."""
    return CapturedLogger(f"logstop.tests.{request.node.name}.context", "%(message)s %(context)s")


@pytest.fixture
def placeholder_filter():
    return PlaceholderFilter()
