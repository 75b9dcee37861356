"""Structured Logging — one JSON object per line, with the forum's correlation fields.

Invariants:
    - Every line carries time, level, logger and message
    - question_id / user_id / operation / error_code / path appear only when set
    - setup_logging() is idempotent: calling it twice never duplicates output

Design Decisions:
    - stdlib logging + a small Formatter; call sites pass correlation data via extra=
    - fmt="text" for local development, "json" for anything shipped to a collector
"""

import json
import logging
import sys
from datetime import datetime, timezone

CORRELATION_FIELDS = ("question_id", "user_id", "operation", "error_code", "path")

TEXT_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "time": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(
            (name, getattr(record, name))
            for name in CORRELATION_FIELDS
            if getattr(record, name, None) is not None
        )
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, "_forum_handler", False):
            root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler._forum_handler = True
    handler.setFormatter(
        JSONFormatter() if fmt == "json" else logging.Formatter(TEXT_FORMAT),
    )
    root.addHandler(handler)
    root.setLevel(level.upper())
    # SQL echo is controlled by the engine, not by the root level
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
