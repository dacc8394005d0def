"""Type definitions shared by the Lambda handlers."""

from typing import Any, Protocol


class LambdaContext(Protocol):
    """AWS Lambda context object interface."""

    function_name: str
    function_version: str
    aws_request_id: str


# API Gateway proxy event and response payloads
LambdaEvent = dict[str, Any]
LambdaResponse = dict[str, Any]
