"""Flight plan data access layer."""

from datetime import UTC, datetime
from typing import Any

from src.constants import (
    MAX_FLIGHT_PLAN_PAGE_SIZE,
    PARTITION_KEY_FLIGHT_PLAN,
    SORT_KEY_METADATA,
    STATUS_INDEX_NAME,
)
from src.exceptions.client_errors import NotFoundError
from src.flight_plan.models import FlightPlanRecord, FlightPlanStatus
from src.utils.dynamodb import DynamoDBClient


class FlightPlanRepository:
    """Repository for flight plan records."""

    def __init__(self, dynamodb_client: DynamoDBClient) -> None:
        """Initialize the flight plan repository.

        Args:
            dynamodb_client: DynamoDB client instance.
        """
        self._db = dynamodb_client

    def create(self, record: FlightPlanRecord) -> FlightPlanRecord:
        """Store a new flight plan record."""
        self._db.put_item(record.to_dynamodb_item())
        return record

    def get_by_id(self, flight_plan_id: str) -> FlightPlanRecord:
        """Get a flight plan by ID.

        Args:
            flight_plan_id: Flight plan identifier.

        Returns:
            The stored record.

        Raises:
            NotFoundError: If the flight plan does not exist.
        """
        try:
            item = self._db.get_item(
                pk=f"{PARTITION_KEY_FLIGHT_PLAN}{flight_plan_id}",
                sk=SORT_KEY_METADATA,
            )
        except NotFoundError as error:
            raise NotFoundError(
                f"Flight plan {flight_plan_id} not found",
                resource_type="FlightPlan",
                resource_id=flight_plan_id,
            ) from error
        return FlightPlanRecord.from_dynamodb_item(item)

    def update(self, flight_plan_id: str, fields: dict[str, Any]) -> FlightPlanRecord:
        """Update selected fields of an existing flight plan.

        ``updated_at`` is always refreshed and the status index key follows
        ``status`` when it changes.

        Args:
            flight_plan_id: Flight plan identifier.
            fields: Attribute names mapped to their new values.

        Returns:
            The updated record.

        Raises:
            NotFoundError: If the flight plan does not exist.
            DatabaseError: If the store rejects the update.
        """
        updates = {**fields, "updated_at": datetime.now(UTC).isoformat()}
        if "status" in fields:
            updates["gsi1pk"] = fields["status"]

        try:
            item = self._db.update_existing_item(
                pk=f"{PARTITION_KEY_FLIGHT_PLAN}{flight_plan_id}",
                sk=SORT_KEY_METADATA,
                updates=updates,
            )
        except NotFoundError as error:
            raise NotFoundError(
                f"Flight plan {flight_plan_id} not found",
                resource_type="FlightPlan",
                resource_id=flight_plan_id,
            ) from error
        return FlightPlanRecord.from_dynamodb_item(item)

    def search(
        self,
        status: FlightPlanStatus,
        *,
        limit: int = 50,
    ) -> list[FlightPlanRecord]:
        """List flight plans in a given status, newest first.

        Args:
            status: Status to filter by.
            limit: Maximum number of records, capped at the page size.

        Returns:
            Matching records.
        """
        items = self._db.query_index(
            STATUS_INDEX_NAME,
            status.value,
            limit=min(limit, MAX_FLIGHT_PLAN_PAGE_SIZE),
            scan_forward=False,
        )
        return [FlightPlanRecord.from_dynamodb_item(item) for item in items]
