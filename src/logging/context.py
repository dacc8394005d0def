"""Fields attached to every log record of the current invocation."""

from contextvars import ContextVar
from typing import Any

_log_fields: ContextVar[dict[str, Any]] = ContextVar("log_fields")


def bind_log_fields(**fields: Any) -> None:
    """Attach fields such as ``flight_plan_id`` to subsequent log records."""
    _log_fields.set({**bound_log_fields(), **fields})


def bound_log_fields() -> dict[str, Any]:
    """Return a copy of the fields bound so far."""
    return dict(_log_fields.get({}))


def clear_log_fields() -> None:
    _log_fields.set({})
