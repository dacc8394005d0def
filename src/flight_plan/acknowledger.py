"""Carrier acknowledgement of flight plans."""

import logging
from datetime import UTC, datetime

from src.flight_plan.models import ACK_RESULTS, AckRequest, FlightPlanRecord
from src.flight_plan.repository import FlightPlanRepository

logger = logging.getLogger(__name__)


def acknowledge_flight_plan(
    request: AckRequest,
    repository: FlightPlanRepository,
) -> FlightPlanRecord:
    """Record a carrier's confirmation or denial of a flight plan.

    The update is attempted once; failures propagate to the caller.

    Args:
        request: Acknowledgement from the carrier.
        repository: Flight plan repository.

    Returns:
        The updated flight plan.

    Raises:
        NotFoundError: If the flight plan does not exist.
        DatabaseError: If the store rejects the update.
    """
    new_status = ACK_RESULTS[request.status]
    record = repository.update(
        request.fp_id,
        {
            "carrier_ack": datetime.now(UTC).isoformat(),
            "status": new_status.value,
        },
    )

    logger.info(
        "Flight plan acknowledged",
        extra={"flight_plan_id": request.fp_id, "ack_status": str(request.status)},
    )
    return record
