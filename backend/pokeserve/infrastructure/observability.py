"""Structured Logging — one root handler for the server process.

Invariants:
    - Each JSON line carries timestamp, level, logger name, and message
    - PokeAPI context (pokemon_id, attempt, status_code, api_error_type) and
      error-handler context (error_code, path) appear only when a caller passed them
    - setup_logging is idempotent: a second lifespan start replaces the handler
      it installed before instead of stacking another one

Design Decisions:
    - log_format="json" for uvicorn behind a log collector, "text" for a terminal
"""

import json
import logging
from datetime import datetime, timezone

_EXTRA_FIELDS = (
    "pokemon_id", "attempt", "error_code", "path",
    "status_code", "api_error_type",
)

# Marks handlers installed by setup_logging
_HANDLER_FLAG = "_pokeserve_handler"


class JSONFormatter(logging.Formatter):
    """Render a LogRecord as a single JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update({
            key: record.__dict__[key]
            for key in _EXTRA_FIELDS
            if record.__dict__.get(key) is not None
        })
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the PokeServe root handler, replacing a previous one. Returns it."""
    for old in [h for h in logging.root.handlers if getattr(h, _HANDLER_FLAG, False)]:
        logging.root.removeHandler(old)

    handler = logging.StreamHandler()
    setattr(handler, _HANDLER_FLAG, True)
    handler.setFormatter(
        JSONFormatter() if fmt == "json"
        else logging.Formatter("%(asctime)s %(levelname)s %(name)s - %(message)s")
    )
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
