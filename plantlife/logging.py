"""Logging configuration for the Easy Plant Life site backend."""

import json
import logging
import sys
from datetime import UTC, datetime

from plantlife.config import get_settings

# Context keys callers may attach with ``extra=`` that are copied into JSON output
CONTEXT_FIELDS = ("feed_url", "status_code", "handler", "post_count")


class JsonFormatter(logging.Formatter):
    """One JSON object per line, used when running in production."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for field in CONTEXT_FIELDS:
            if hasattr(record, field):
                entry[field] = getattr(record, field)
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False)


def setup_logging(level: int = logging.INFO) -> None:
    """Install a stdout handler on the root logger.

    Production gets JSON lines, development a readable single-line format.
    httpx request logging is raised to WARNING so outbound calls do not flood
    the output.
    """
    settings = get_settings()
    handler = logging.StreamHandler(sys.stdout)

    if settings.env == "prod":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)-8s %(name)s: %(message)s")
        )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    logging.getLogger("httpx").setLevel(logging.WARNING)
