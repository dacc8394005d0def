"""Cargo itinerary inputs accepted by the compiler.

An itinerary is a tagged union on ``kind``:

- ``hop``: one flight from takeoff to landing. Cargo is loaded and unloaded
  on the ground while the aircraft is disarmed.
- ``continuous``: one flight that picks cargo up and drops it off in the air
  (a "swoop") without landing in between.
- ``winch``: like ``continuous`` but cargo is lowered on a winch line.

Waypoint lists are not required to be non-empty here; the compiler reports
an empty leg at the point it needs an element from it.
"""

from datetime import datetime
from enum import StrEnum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from src.constants import DEFAULT_GENTLE_DROPOFF_DESCENT_METERS
from src.exceptions.client_errors import ValidationError
from src.plan.geometry import Pose


class ItineraryKind(StrEnum):
    """Closed set of itinerary variants."""

    HOP = "hop"
    CONTINUOUS = "continuous"
    WINCH = "winch"


class _FlightParameters(BaseModel):
    """Fields shared by every itinerary kind."""

    takeoff_location: Pose
    takeoff_time: datetime
    landing_location: Pose
    landing_time: datetime
    cruise_speed: int = Field(ge=0)
    hover_speed: int = Field(ge=0)
    autopilot_type: int = Field(ge=0, le=255)
    vehicle_type: int = Field(ge=0, le=255)
    gimbal_camera_id: int = Field(default=0, ge=0, le=255)


class HopItinerary(_FlightParameters):
    """Single takeoff-to-landing flight with no airborne cargo exchange."""

    kind: Literal["hop"] = "hop"
    waypoints: list[Pose] = Field(default_factory=list)


class ContinuousItinerary(_FlightParameters):
    """Airborne pickup and dropoff flown as one flight."""

    kind: Literal["continuous"] = "continuous"
    pickup_location: Pose
    pickup_time: datetime
    dropoff_location: Pose
    dropoff_time: datetime
    waypoints_deadhead_a: list[Pose] = Field(default_factory=list)
    waypoints_main: list[Pose] = Field(default_factory=list)
    waypoints_deadhead_b: list[Pose] = Field(default_factory=list)
    gentle_dropoff: bool = Field(default=False)
    gentle_dropoff_max_descent_meters: float = Field(
        default=DEFAULT_GENTLE_DROPOFF_DESCENT_METERS,
        gt=0,
    )


class WinchItinerary(_FlightParameters):
    """Airborne delivery on a winch line. Not compiled yet."""

    kind: Literal["winch"] = "winch"
    pickup_location: Pose
    pickup_time: datetime
    dropoff_location: Pose
    dropoff_time: datetime
    waypoints_deadhead_a: list[Pose] = Field(default_factory=list)
    waypoints_main: list[Pose] = Field(default_factory=list)
    waypoints_deadhead_b: list[Pose] = Field(default_factory=list)
    winch_height_meters: float = Field(default=0.0, ge=0)


Itinerary = Annotated[
    HopItinerary | ContinuousItinerary | WinchItinerary,
    Field(discriminator="kind"),
]

_itinerary_adapter: TypeAdapter[HopItinerary | ContinuousItinerary | WinchItinerary] = TypeAdapter(
    Itinerary
)


def parse_itinerary(data: dict[str, Any]) -> HopItinerary | ContinuousItinerary | WinchItinerary:
    """Validate a mapping into the itinerary variant named by its ``kind``.

    Args:
        data: Decoded request body.

    Returns:
        The validated itinerary.

    Raises:
        ValidationError: If ``kind`` is unknown or any field is invalid.
    """
    try:
        return _itinerary_adapter.validate_python(data)
    except PydanticValidationError as error:
        raise ValidationError(
            f"Invalid itinerary: {error.error_count()} validation error(s)",
            field="itinerary",
            context={"errors": error.errors(include_url=False, include_input=False)},
        ) from error
