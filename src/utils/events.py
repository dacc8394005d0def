"""Helpers for reading API Gateway proxy events."""

import json
from typing import Any

from src.exceptions.client_errors import BadRequestError


def parse_json_body(event: dict[str, Any]) -> dict[str, Any]:
    """Parse the request body from an API Gateway event.

    Args:
        event: API Gateway proxy event.

    Returns:
        Parsed body dictionary.

    Raises:
        BadRequestError: If body is missing, not UTF-8 JSON, or not a JSON object.
    """
    body = event.get("body")
    if not body:
        raise BadRequestError(message="Request body is required")
    try:
        parsed = json.loads(body) if isinstance(body, (str, bytes)) else body
    except ValueError as error:
        raise BadRequestError(message=f"Invalid JSON: {error}") from error
    if not isinstance(parsed, dict):
        raise BadRequestError(message="Request body must be a JSON object")
    return parsed


def extract_path_parameter(event: dict[str, Any], parameter: str) -> str:
    """Extract a path parameter from an API Gateway event.

    Raises:
        BadRequestError: If the parameter is missing.
    """
    path_params: dict[str, str] = event.get("pathParameters") or {}
    value: str | None = path_params.get(parameter)
    if not value:
        raise BadRequestError(message=f"Missing path parameter: {parameter}")
    return value
