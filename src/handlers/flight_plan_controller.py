"""Flight plan controller Lambda handler."""

from typing import Any

from pydantic import ValidationError as PydanticValidationError

from src.config import get_settings
from src.exceptions.client_errors import BadRequestError, ValidationError
from src.exceptions.handlers import create_exception_handler, create_success_response
from src.flight_plan.acknowledger import acknowledge_flight_plan
from src.flight_plan.models import AckRequest, FlightPlanStatus
from src.flight_plan.repository import FlightPlanRepository
from src.logging import bind_lambda_invocation, configure_logging
from src.types import LambdaContext
from src.utils.dynamodb import DynamoDBClient
from src.utils.events import extract_path_parameter, parse_json_body

_DEFAULT_PAGE_SIZE = 50


def _get_repository() -> FlightPlanRepository:
    """Get a flight plan repository instance."""
    return FlightPlanRepository(DynamoDBClient.from_settings(get_settings()))


def _acknowledge(event: dict[str, Any], repository: FlightPlanRepository) -> dict[str, Any]:
    """POST /ack/flight."""
    body = parse_json_body(event)
    try:
        request = AckRequest(**body)
    except PydanticValidationError as error:
        raise ValidationError(
            f"Invalid acknowledgement: {error.error_count()} validation error(s)",
            field="body",
            context={"errors": error.errors(include_url=False, include_input=False)},
        ) from error

    record = acknowledge_flight_plan(request, repository)
    return create_success_response(200, record.model_dump(mode="json"))


def _list_flight_plans(event: dict[str, Any], repository: FlightPlanRepository) -> dict[str, Any]:
    """GET /api/v1/flight-plans?status=...&limit=..."""
    query_params: dict[str, str] = event.get("queryStringParameters") or {}

    raw_status = query_params.get("status", FlightPlanStatus.PENDING)
    try:
        status = FlightPlanStatus(raw_status)
    except ValueError as error:
        raise BadRequestError(message=f"Unknown flight plan status: {raw_status}") from error

    raw_limit = query_params.get("limit", str(_DEFAULT_PAGE_SIZE))
    try:
        limit = int(raw_limit)
    except ValueError:
        limit = 0
    if limit < 1:
        raise BadRequestError(message=f"limit must be a positive integer, got '{raw_limit}'")

    records = repository.search(status, limit=limit)
    return create_success_response(
        200,
        {"flight_plans": [record.model_dump(mode="json") for record in records]},
    )


def _get_flight_plan(event: dict[str, Any], repository: FlightPlanRepository) -> dict[str, Any]:
    """GET /api/v1/flight-plans/{flight_plan_id}."""
    flight_plan_id = extract_path_parameter(event, "flight_plan_id")
    record = repository.get_by_id(flight_plan_id)
    return create_success_response(200, record.model_dump(mode="json"))


_ROUTES = {
    ("/ack/flight", "POST"): _acknowledge,
    ("/api/v1/flight-plans", "GET"): _list_flight_plans,
    ("/api/v1/flight-plans/{flight_plan_id}", "GET"): _get_flight_plan,
}


@create_exception_handler
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """Route flight plan lookups and carrier acknowledgements.

    Args:
        event: API Gateway proxy event.
        context: Lambda context.

    Returns:
        API Gateway proxy response.
    """
    configure_logging()
    bind_lambda_invocation(event, context)

    resource = event.get("resource", "")
    http_method = event.get("httpMethod", "")
    route = _ROUTES.get((resource, http_method))
    if route is None:
        raise BadRequestError(message=f"Unsupported route: {http_method} {resource}")

    return route(event, _get_repository())
