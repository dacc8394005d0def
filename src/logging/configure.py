"""Root logger configuration for the Lambda handlers."""

import logging
import sys
from typing import TextIO

from src.config import LogFormat, Settings, get_settings
from src.logging.formatters import HumanFormatter, JSONFormatter

_HANDLER_NAME = "cargo-atc"
_QUIET_LOGGERS = ("boto3", "botocore", "urllib3")


def configure_logging(
    settings: Settings | None = None,
    stream: TextIO | None = None,
    *,
    force: bool = False,
) -> None:
    """Route all records through a single handler on the root logger.

    Handlers installed by the Lambda runtime are replaced so each record
    is written once. Repeat calls on a warm container are no-ops unless
    ``force`` is set.

    Args:
        settings: Settings supplying level, format and service name.
            Loaded from the environment if omitted.
        stream: Destination stream, stdout by default.
        force: Reinstall the handler even if one is already in place.
    """
    root = logging.getLogger()
    if not force and any(handler.get_name() == _HANDLER_NAME for handler in root.handlers):
        return

    settings = settings or get_settings()

    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.set_name(_HANDLER_NAME)
    if settings.log_format == LogFormat.HUMAN:
        handler.setFormatter(HumanFormatter())
    else:
        handler.setFormatter(JSONFormatter(settings.service_name))
    root.addHandler(handler)
    root.setLevel(settings.log_level)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def reset_logging() -> None:
    """Remove the service handler so the next call configures afresh."""
    root = logging.getLogger()
    for handler in list(root.handlers):
        if handler.get_name() == _HANDLER_NAME:
            root.removeHandler(handler)
