"""Log record formatters.

``JSONFormatter`` writes one object per line for CloudWatch Logs Insights;
``HumanFormatter`` is for reading handler output in a terminal.
"""

import json
import logging
from datetime import UTC, datetime
from typing import Any

from src.constants import SERVICE_NAME
from src.logging.context import bound_log_fields

# Anything else on a record arrived through ``extra=``.
_RECORD_ATTRIBUTES = frozenset(logging.makeLogRecord({}).__dict__) | {"message", "asctime"}


def record_fields(record: logging.LogRecord) -> dict[str, Any]:
    """Bound invocation fields overlaid with the record's own ``extra=`` fields."""
    fields = bound_log_fields()
    for key, value in record.__dict__.items():
        if key not in _RECORD_ATTRIBUTES and not key.startswith("_"):
            fields[key] = value
    return fields


class JSONFormatter(logging.Formatter):
    """Render a record as a single JSON object."""

    def __init__(self, service_name: str = SERVICE_NAME) -> None:
        super().__init__()
        self.service_name = service_name

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "service": self.service_name,
            "location": f"{record.module}:{record.funcName}:{record.lineno}",
        }
        entry.update(record_fields(record))
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


class HumanFormatter(logging.Formatter):
    """Render a record as ``time level logger: message key=value ...``."""

    def __init__(self) -> None:
        super().__init__(fmt="%(asctime)s %(levelname)-8s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        fields = record_fields(record)
        if not fields:
            return line
        # Tracebacks are appended by the base class; keep fields on the first line.
        first, newline, rest = line.partition("\n")
        pairs = " ".join(f"{key}={value}" for key, value in fields.items())
        return f"{first} | {pairs}{newline}{rest}"
