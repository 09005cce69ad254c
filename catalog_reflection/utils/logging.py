"""Log output for catalog builds: NOTICE level, JSON records, build context."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

# Reported but harmless, e.g. a foreign key dropped by the selection.
NOTICE = 25
logging.addLevelName(NOTICE, "NOTICE")

TEXT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class StructuredFormatter(logging.Formatter):
    """Render each record as one JSON object, build context merged in."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(getattr(record, "build_context", {}))
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def setup_logging(
    level: str = "INFO",
    structured: bool = False,
    log_file: Optional[str] = None,
) -> None:
    """Route log records to stderr and, optionally, to a file.

    Args:
        level: Level name, NOTICE included; unknown names fall back to INFO
        structured: Emit JSON lines instead of text
        log_file: Also append records to this file
    """
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO

    formatter = StructuredFormatter() if structured else logging.Formatter(TEXT_FORMAT)
    # stdout carries the catalog itself
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    for handler in handlers:
        handler.setFormatter(formatter)

    logging.basicConfig(level=log_level, handlers=handlers, force=True)
    logging.getLogger("psycopg2").setLevel(logging.WARNING)


class BuildContextAdapter(logging.LoggerAdapter):
    """Attach the build context (database name, source variant) to every record."""

    def process(self, msg: str, kwargs: Dict[str, Any]) -> tuple:
        kwargs.setdefault("extra", {})["build_context"] = self.extra
        return msg, kwargs


def get_contextual_logger(name: str, context: Dict[str, Any]) -> BuildContextAdapter:
    """Return a logger adapter stamping ``context`` onto each record."""
    return BuildContextAdapter(logging.getLogger(name), context)
