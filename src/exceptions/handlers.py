"""Exception to API Gateway response mapping following RFC 7807."""

import json
import logging
from collections.abc import Callable
from functools import wraps
from http import HTTPStatus
from typing import Any, ParamSpec, TypeGuard, TypeVar

from src.exceptions.base import CargoAtcError
from src.types import LambdaResponse

logger = logging.getLogger(__name__)

_PROBLEM_TYPE_BASE = "https://cargo-atc.io/errors/"

P = ParamSpec("P")
T = TypeVar("T")


def create_error_response(
    exception: CargoAtcError,
    *,
    include_context: bool = True,
    request_id: str | None = None,
) -> LambdaResponse:
    """Create an API Gateway problem response from an exception.

    Args:
        exception: The CargoAtcError to convert.
        include_context: Whether to include context in response.
        request_id: Optional request ID for tracing.

    Returns:
        Lambda-compatible response dictionary.
    """
    body: dict[str, Any] = {
        "type": f"{_PROBLEM_TYPE_BASE}{exception.error_code}",
        "title": _format_error_title(exception.error_code),
        "status": int(exception.http_status),
        "detail": exception.message,
    }

    if request_id:
        body["instance"] = f"/requests/{request_id}"

    if include_context and exception.context:
        body["context"] = exception.context

    return {
        "statusCode": int(exception.http_status),
        "headers": {
            "Content-Type": "application/problem+json",
        },
        "body": json.dumps(body, default=str),
    }


def create_success_response(
    status_code: int,
    body: dict[str, Any] | list[Any],
) -> LambdaResponse:
    """Create an API Gateway success response.

    Args:
        status_code: HTTP status code (2xx).
        body: JSON-serializable response body.

    Returns:
        Lambda-compatible response dictionary.
    """
    return {
        "statusCode": status_code,
        "headers": {
            "Content-Type": "application/json",
        },
        "body": json.dumps(body),
    }


def create_exception_handler(
    func: Callable[P, T],
) -> Callable[P, T | LambdaResponse]:
    """Decorator that catches CargoAtcError and returns error responses.

    Args:
        func: The handler function to wrap.

    Returns:
        Wrapped function that handles exceptions.
    """

    @wraps(func)
    def handle_call(*args: P.args, **kwargs: P.kwargs) -> T | LambdaResponse:
        try:
            return func(*args, **kwargs)
        except CargoAtcError as error:
            log_level = logging.ERROR if error.http_status >= HTTPStatus.INTERNAL_SERVER_ERROR else logging.WARNING
            logger.log(
                log_level,
                "Request failed: %s",
                error.message,
                extra={"error": error.to_dict()},
            )
            request_id = _extract_request_id(args)
            return create_error_response(error, request_id=request_id)

    return handle_call


def _format_error_title(error_code: str) -> str:
    """Format error code as human-readable title."""
    return error_code.replace("_", " ").title()


def _is_string_dict(value: object) -> TypeGuard[dict[str, Any]]:
    return isinstance(value, dict)


def _extract_request_id(args: tuple[object, ...]) -> str | None:
    """Extract the API Gateway request ID from the Lambda event if present."""
    if not args:
        return None

    event = args[0]
    if not _is_string_dict(event):
        return None

    request_context = event.get("requestContext")
    if not _is_string_dict(request_context):
        return None

    request_id = request_context.get("requestId")
    if isinstance(request_id, str):
        return request_id

    return None

