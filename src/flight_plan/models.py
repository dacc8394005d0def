"""Flight plan record models."""

from datetime import UTC, datetime
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field

from src.constants import PARTITION_KEY_FLIGHT_PLAN, SORT_KEY_METADATA


class FlightPlanStatus(StrEnum):
    """Carrier acknowledgement state of a flight plan."""

    PENDING = "pending"
    CONFIRMED = "confirmed"
    DENIED = "denied"


class AckStatus(StrEnum):
    """Acknowledgement sent by the carrier."""

    CONFIRM = "Confirm"
    DENY = "Deny"


ACK_RESULTS: dict[AckStatus, FlightPlanStatus] = {
    AckStatus.CONFIRM: FlightPlanStatus.CONFIRMED,
    AckStatus.DENY: FlightPlanStatus.DENIED,
}


class AckRequest(BaseModel):
    """Body of a flight plan acknowledgement."""

    fp_id: str = Field(min_length=1)
    status: AckStatus


def _now() -> str:
    return datetime.now(UTC).isoformat()


class FlightPlanRecord(BaseModel):
    """Stored flight plan with its compiled mission plan document."""

    flight_plan_id: str = Field(min_length=1)
    vehicle_id: str = Field(default="")
    status: FlightPlanStatus = Field(default=FlightPlanStatus.PENDING)
    carrier_ack: str | None = None
    plan: dict[str, Any] | None = None
    created_at: str = Field(default_factory=_now)
    updated_at: str = Field(default_factory=_now)

    def to_dynamodb_item(self) -> dict[str, Any]:
        """Convert to DynamoDB item format."""
        item: dict[str, Any] = {
            "pk": f"{PARTITION_KEY_FLIGHT_PLAN}{self.flight_plan_id}",
            "sk": SORT_KEY_METADATA,
            "flight_plan_id": self.flight_plan_id,
            "vehicle_id": self.vehicle_id,
            "status": self.status.value,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
            "gsi1pk": self.status.value,
            "gsi1sk": self.created_at,
        }
        if self.carrier_ack:
            item["carrier_ack"] = self.carrier_ack
        if self.plan:
            item["plan"] = self.plan
        return item

    @classmethod
    def from_dynamodb_item(cls, item: dict[str, Any]) -> "FlightPlanRecord":
        """Create from DynamoDB item format."""
        return cls(
            flight_plan_id=item["flight_plan_id"],
            vehicle_id=item.get("vehicle_id", ""),
            status=FlightPlanStatus(item["status"]),
            carrier_ack=item.get("carrier_ack"),
            plan=item.get("plan"),
            created_at=item["created_at"],
            updated_at=item["updated_at"],
        )
