"""
Logging integration - scrub stdlib logging records before they are emitted.

Attach ScrubbingFilter to a handler (or logger) and every record passing
through it has its message, its %-style args and its context scrubbed:

    import logging
    from logstop import ScrubbingFilter

    handler = logging.StreamHandler()
    handler.addFilter(ScrubbingFilter())

    logger = logging.getLogger("app")
    logger.addHandler(handler)
    logger.info("Signup", extra={"context": {"email": "test@example.org"}})

The message is rendered (template merged with its args) before it is
scrubbed, so PII split across several args is still caught; the record
leaves the filter with the scrubbed text as msg and no args.

The filter does not care where it sits in the filter chain; placeholders
interpolated from the context by a later filter are already scrubbed, and
anything interpolated by an earlier one is scrubbed as part of the message.
"""

import logging
from typing import Optional

from .engine import Scrubber, get_default_scrubber

logger = logging.getLogger(__name__)

DEFAULT_CONTEXT_ATTR = "context"


class ScrubbingFilter(logging.Filter):
    """
    Logging filter that redacts sensitive data from every record.

    The record's attributes are replaced with newly built values; dicts and
    lists passed by the caller (as args or context) are never modified.
    Records are never dropped.
    """

    def __init__(
        self,
        scrubber: Optional[Scrubber] = None,
        context_attr: str = DEFAULT_CONTEXT_ATTR,
        name: str = "",
    ):
        """
        Args:
            scrubber: Scrubber to apply. Defaults to the shared default instance.
            context_attr: Record attribute holding the context, as set
                          with ``extra={context_attr: {...}}``.
            name: Passed to logging.Filter.
        """
        super().__init__(name)
        self.scrubber = scrubber or get_default_scrubber()
        self.context_attr = context_attr

    def filter(self, record: logging.LogRecord) -> bool:
        # Scrub the rendered message; PII can span the template and several args
        try:
            message = record.getMessage()
        except (TypeError, ValueError, KeyError) as e:
            # Leave the broken format for the handler to report, scrubbed
            logger.warning(f"Could not render log message for scrubbing: {e}")
            record.msg = self.scrubber.scrub(str(record.msg))
            if record.args:
                record.args = self.scrubber.scrub_context(record.args)
        else:
            record.msg = self.scrubber.scrub(message)
            record.args = None

        context = getattr(record, self.context_attr, None)
        if context is not None:
            setattr(record, self.context_attr, self.scrubber.scrub_context(context))

        return True
