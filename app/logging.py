"""Logging configuration for the LearnStream API."""

import json
import logging
import sys

from app.config import get_settings

# Structured fields routes may attach through ``extra=``
CONTEXT_FIELDS = ("path", "client_ip", "requester_id", "limit", "context")


class JsonFormatter(logging.Formatter):
    """JSON formatter for production logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON, carrying request context when present."""
        base = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        for field in CONTEXT_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                base[field] = value
        if record.exc_info:
            base["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(base, ensure_ascii=False, default=str)


def request_context(request, **fields) -> dict:
    """Build the ``extra=`` mapping for a log call made inside a route."""
    context = {
        "path": request.url.path,
        "client_ip": request.client.host if request.client else "unknown",
    }
    context.update(fields)
    return context


def setup_logging(level: int = logging.INFO) -> None:
    """Configure root logging based on environment."""
    settings = get_settings()
    handler = logging.StreamHandler(sys.stdout)

    if settings.env == "prod":
        handler.setFormatter(JsonFormatter())
    else:
        # Pretty format for development
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)
