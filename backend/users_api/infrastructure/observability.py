"""Request Logging — one JSON object per line for the users service.

Invariants:
    - Every line carries timestamp (UTC), level, logger and message
    - Request context (method, path, status_code, error_code) and the listen
      address (host, port) appear only when the call site passed them in `extra`
    - setup_logging owns one root handler, named "users_api"; calling it again
      swaps that handler instead of adding a second one
"""

import json
import logging
from datetime import datetime, timezone


EXTRA_FIELDS = (
    "method", "path", "status_code", "error_code", "host", "port",
)

_HANDLER_NAME = "users_api"


class JSONFormatter(logging.Formatter):
    """Render a record plus its request/listen-address extras as JSON."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log.update({
            key: record.__dict__[key]
            for key in EXTRA_FIELDS
            if record.__dict__.get(key) is not None
        })
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the service's root handler; `fmt` is "json" or "text"."""
    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    for existing in list(logging.root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logging.root.removeHandler(existing)
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
