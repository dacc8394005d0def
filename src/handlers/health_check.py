"""Health check Lambda handler."""

from typing import Any

from src.config import get_settings
from src.constants import SERVICE_VERSION
from src.exceptions.handlers import create_exception_handler, create_success_response
from src.logging import bind_lambda_invocation, configure_logging
from src.types import LambdaContext
from src.utils.dynamodb import DynamoDBClient


@create_exception_handler
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """Report healthy when the flight plan table is reachable.

    Args:
        event: API Gateway proxy event for GET /health.
        context: Lambda context.

    Returns:
        200 when healthy; a 503 problem response otherwise.
    """
    configure_logging()
    bind_lambda_invocation(event, context)

    settings = get_settings()
    DynamoDBClient.from_settings(settings).ping()

    return create_success_response(
        200,
        {
            "status": "healthy",
            "service": settings.service_name,
            "version": SERVICE_VERSION,
        },
    )
