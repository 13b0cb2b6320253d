"""Logging configuration for bank-ledger sessions."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

STANDARD_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers that are noisy below WARNING
QUIET_LOGGERS = ("faker",)


def setup_logging(
    level: str = "INFO",
    format_type: str = "standard",
) -> None:
    """Route all log records to a single stdout handler.

    Parameters
    ----------
    level : str
        Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL). Unknown
        names fall back to INFO.
    format_type : str
        "standard" for human-readable lines, "json" for one JSON object
        per line.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(_build_formatter(format_type))

    root_logger = logging.getLogger()
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level)

    logging.getLogger("bank_ledger").setLevel(log_level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def _build_formatter(format_type: str) -> logging.Formatter:
    if format_type == "json":
        return JsonFormatter()
    return logging.Formatter(fmt=STANDARD_FORMAT, datefmt=DATE_FORMAT)


class JsonFormatter(logging.Formatter):
    """Format each record as a JSON object.

    Values passed as ``extra={"extra": {...}}`` are merged into the
    object; decimals and other non-JSON types are written with ``str``.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        if hasattr(record, "extra"):
            log_data.update(record.extra)
        return json.dumps(log_data, default=str)
