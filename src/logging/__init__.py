"""Structured logging for the cargo ATC handlers.

Usage:
    from src.logging import bind_lambda_invocation, configure_logging

    configure_logging()
    bind_lambda_invocation(event, context)
    logger.info("Plan compiled", extra={"item_count": 9})
"""

from src.logging.context import bind_log_fields, bound_log_fields, clear_log_fields
from src.logging.formatters import HumanFormatter, JSONFormatter
from src.logging.lambda_invocation import bind_lambda_invocation
from src.logging.configure import configure_logging, reset_logging

__all__ = [
    "HumanFormatter",
    "JSONFormatter",
    "bind_lambda_invocation",
    "bind_log_fields",
    "bound_log_fields",
    "clear_log_fields",
    "configure_logging",
    "reset_logging",
]
