"""Logging setup: human-readable text in development, JSON in production."""

import json
import logging
from datetime import datetime, timezone

EXTRA_FIELDS = ("model_name", "operation", "record_id", "path", "method", "status_code")


class JSONFormatter(logging.Formatter):
    """Format log records as single-line JSON objects."""

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


def setup_logging(level: str = "INFO", fmt: str = "text") -> None:
    """
    Configure the root logger.

    Safe to call more than once: a handler installed by an earlier call is
    replaced rather than duplicated.

    Args:
        level: Log level name (e.g. "INFO", "debug")
        fmt: "json" for structured output, anything else for plain text
    """
    root = logging.getLogger()
    for existing in list(root.handlers):
        if getattr(existing, "_ats_handler", False):
            root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler._ats_handler = True  # type: ignore[attr-defined]
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s - %(message)s")
        )
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
