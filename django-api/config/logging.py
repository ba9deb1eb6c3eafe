"""Structured logging for production.

JSONFormatter renders one JSON object per record: timestamp, level, logger
and message, plus the `extra` fields the platform attaches (elevation
reason, acting user, payment reference, error code).
"""

import json
import logging
from datetime import datetime, timezone

EXTRA_FIELDS = (
    "elevation_reason",
    "actor",
    "user",
    "user_id",
    "payment_reference",
    "error_code",
    "status",
    "matches",
)


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)
