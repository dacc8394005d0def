"""Bind log fields identifying a Lambda invocation."""

from typing import Any

from src.logging.context import bind_log_fields, clear_log_fields
from src.types import LambdaContext


def bind_lambda_invocation(event: dict[str, Any], context: LambdaContext) -> None:
    """Start a fresh set of log fields for this invocation.

    The Lambda request ID becomes ``correlation_id``. The API Gateway
    request ID and the ``flight_plan_id`` path parameter are added when
    the event carries them.
    """
    clear_log_fields()

    fields: dict[str, Any] = {
        "correlation_id": context.aws_request_id,
        "function_name": context.function_name,
        "function_version": context.function_version,
    }

    request_context = event.get("requestContext")
    if isinstance(request_context, dict) and "requestId" in request_context:
        fields["api_request_id"] = str(request_context["requestId"])

    path_parameters = event.get("pathParameters")
    if isinstance(path_parameters, dict) and "flight_plan_id" in path_parameters:
        fields["flight_plan_id"] = str(path_parameters["flight_plan_id"])

    bind_log_fields(**fields)
