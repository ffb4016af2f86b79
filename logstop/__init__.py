"""
logstop - Sensitive data scrubbing for log records

This package redacts PII and credentials (emails, credit cards, phone numbers,
SSNs, URL passwords and, on request, IP and MAC addresses) from a log record's
message and its nested context before the record reaches any handler output.

Architecture:
    - Scrubber: Applies the pattern pipeline to messages and walks contexts
    - ScrubberConfig: Frozen per-category flags and the context depth limit
    - patterns: The ordered catalog of PatternRules
    - ScrubbingFilter: logging.Filter that scrubs stdlib log records

Example:
    from logstop import Scrubber

    scrubber = Scrubber()
    message, context = scrubber.scrub_record(
        "Payment from test@example.org",
        {"card": "4242-4242-4242-4242"},
    )
    # message: "Payment from [FILTERED]"
    # context: {"card": "[FILTERED]"}
"""

from .config import ConfigurationError, ScrubberConfig
from .engine import Scrubber, get_default_scrubber, scrub_context, scrub_leaf
from .filters import ScrubbingFilter
from .patterns import DEFAULT_RULES, FILTERED, MAX_DEPTH_EXCEEDED, PatternRule

__version__ = "0.1.0"

__all__ = [
    "Scrubber",
    "ScrubberConfig",
    "ConfigurationError",
    "ScrubbingFilter",
    "PatternRule",
    "DEFAULT_RULES",
    "FILTERED",
    "MAX_DEPTH_EXCEEDED",
    "get_default_scrubber",
    "scrub_context",
    "scrub_leaf",
]
