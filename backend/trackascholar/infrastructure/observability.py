"""Structured Logging — JSON lines or plain text for the registry shell.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Timestamp is the record's creation time in UTC, not the time it was formatted
    - Registry extras (applicant_name, error_code, field, file_path, count, sort_key)
      surfaced when present and not None
    - setup_logging installs exactly one TrackAScholar handler on the root logger;
      calling it again replaces that handler instead of stacking a second one

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - Driven by Settings.log_level / Settings.log_format, applied once in trackascholar.main
"""

import logging
import json
from datetime import datetime, timezone

REGISTRY_EXTRA_KEYS: tuple[str, ...] = (
    "applicant_name", "error_code", "field", "file_path", "count", "sort_key",
)

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"

_HANDLER_NAME = "trackascholar"


class JSONFormatter(logging.Formatter):
    """Format logs as JSON lines."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in REGISTRY_EXTRA_KEYS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the TrackAScholar handler on the root logger and return it."""
    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == _HANDLER_NAME]:
        root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(JSONFormatter() if fmt == "json" else logging.Formatter(TEXT_FORMAT))
    root.addHandler(handler)
    root.setLevel(logging.getLevelName(level.upper()))
    return handler
