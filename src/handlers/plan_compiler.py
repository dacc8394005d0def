"""Mission plan compiler Lambda handler."""

import logging
from typing import Any

from src.config import get_settings
from src.exceptions.handlers import create_exception_handler, create_success_response
from src.logging import bind_lambda_invocation, bind_log_fields, configure_logging
from src.plan.compiler import compile_itinerary
from src.plan.document import plan_to_dict
from src.plan.itinerary import parse_itinerary
from src.types import LambdaContext
from src.utils.events import parse_json_body

logger = logging.getLogger(__name__)


@create_exception_handler
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """Compile the itinerary in the request body into a mission plan.

    Handles POST /api/v1/plans/compile. The body is an itinerary tagged by
    ``kind`` (hop, continuous or winch).

    Args:
        event: API Gateway proxy event.
        context: Lambda context.

    Returns:
        200 with the plan document; 400 for invalid itineraries or empty
        waypoint legs; 501 for itinerary kinds without a compiler.
    """
    configure_logging()
    bind_lambda_invocation(event, context)

    itinerary = parse_itinerary(parse_json_body(event))
    bind_log_fields(itinerary_kind=str(itinerary.kind))

    document = compile_itinerary(
        itinerary,
        ground_station=get_settings().ground_station_name,
    )

    logger.info("Plan compiled", extra={"item_count": len(document.mission.items)})
    return create_success_response(200, plan_to_dict(document))
