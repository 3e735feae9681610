"""Logging filters that keep environment secrets out of log output.

Applications commonly log configuration snapshots such as
`DATABASE_URL=postgres://app:hunter2@db/app` or `API_TOKEN=...`. The filter
here rewrites such records before any handler formats them.
"""

from __future__ import annotations

import logging

from envaccess.redaction import redact_assignments


class RedactEnvValuesFilter(logging.Filter):
    """Mask `NAME=value` pairs of secret-looking variables in log records.

    The record is rendered once, redacted, and its args are cleared so
    handlers format the already-redacted message.
    """

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003 (filter)
        try:
            message = record.getMessage()
        except (TypeError, ValueError):
            # Malformed %-args; leave the record for the handler to report.
            return True

        redacted = redact_assignments(message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True


def install_redaction_filter(logger_name: str | None = None) -> None:
    """Install the redaction filter on a logger (root logger by default).

    Safe to call multiple times.
    """

    target = logging.getLogger(logger_name)

    # Avoid duplicating the filter if called repeatedly.
    for existing in target.filters:
        if isinstance(existing, RedactEnvValuesFilter):
            return

    target.addFilter(RedactEnvValuesFilter())
