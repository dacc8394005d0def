"""Mission plan document and its JSON wire format.

The document is the ``.plan`` format read by ground control software. Key
names, casing and key order are fixed by consumers, so every model here
declares its fields in wire order with explicit aliases.
"""

from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from src.constants import (
    DEFAULT_GROUND_STATION,
    GEOFENCE_VERSION,
    GLOBAL_PLAN_ALTITUDE_MODE,
    MISSION_VERSION,
    PLAN_FILE_TYPE,
    PLAN_VERSION,
    RALLY_POINTS_VERSION,
)
from src.exceptions.client_errors import ValidationError
from src.plan.geometry import Pose
from src.plan.items import MissionItem


class _WireModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class Circle(_WireModel):
    """Circle given as [latitude, longitude] centre and radius in meters."""

    center: tuple[float, float]
    radius: float


class GeoFenceCircle(_WireModel):
    """Circular inclusion or exclusion zone."""

    circle: Circle
    inclusion: bool
    version: int


class GeoFencePolygon(_WireModel):
    """Polygonal inclusion or exclusion zone of [latitude, longitude] vertices."""

    polygon: list[tuple[float, float]]
    inclusion: bool
    version: int


class GeoFence(_WireModel):
    """Flight boundary block. Always empty in compiled plans."""

    circles: list[GeoFenceCircle] = Field(default_factory=list)
    polygons: list[GeoFencePolygon] = Field(default_factory=list)
    version: int = Field(default=GEOFENCE_VERSION)


class RallyPoints(_WireModel):
    """Emergency return points as [latitude, longitude, altitude]. Always empty in compiled plans."""

    points: list[tuple[float, float, float]] = Field(default_factory=list)
    version: int = Field(default=RALLY_POINTS_VERSION)


class Mission(_WireModel):
    """Mission block: the item list plus vehicle and speed metadata."""

    cruise_speed: int = Field(alias="cruiseSpeed")
    firmware_type: int = Field(alias="firmwareType")
    global_plan_altitude_mode: int = Field(
        default=GLOBAL_PLAN_ALTITUDE_MODE,
        alias="globalPlanAltitudeMode",
    )
    hover_speed: int = Field(alias="hoverSpeed")
    items: list[MissionItem]
    planned_home_position: tuple[float, float, float] = Field(alias="plannedHomePosition")
    vehicle_type: int = Field(alias="vehicleType")
    version: int = Field(default=MISSION_VERSION)


class MissionPlanDocument(_WireModel):
    """Top-level plan file."""

    file_type: str = Field(default=PLAN_FILE_TYPE, alias="fileType")
    geo_fence: GeoFence = Field(default_factory=GeoFence, alias="geoFence")
    ground_station: str = Field(default=DEFAULT_GROUND_STATION, alias="groundStation")
    mission: Mission
    rally_points: RallyPoints = Field(default_factory=RallyPoints, alias="rallyPoints")
    version: int = Field(default=PLAN_VERSION)


def assemble_plan(
    items: Sequence[MissionItem],
    *,
    cruise_speed: int,
    hover_speed: int,
    firmware_type: int,
    vehicle_type: int,
    home: Pose,
    ground_station: str = DEFAULT_GROUND_STATION,
) -> MissionPlanDocument:
    """Wrap compiled items into a plan document.

    Args:
        items: Numbered mission items.
        cruise_speed: Cruise speed in m/s.
        hover_speed: Hover speed in m/s.
        firmware_type: MAV_AUTOPILOT code.
        vehicle_type: MAV_TYPE code.
        home: Planned home position, normally the takeoff location.
        ground_station: Name recorded as the plan's author.

    Returns:
        The plan document with empty geofence and rally points.
    """
    return MissionPlanDocument(
        ground_station=ground_station,
        mission=Mission(
            cruise_speed=cruise_speed,
            firmware_type=firmware_type,
            hover_speed=hover_speed,
            items=list(items),
            planned_home_position=(home.latitude, home.longitude, home.altitude_meters),
            vehicle_type=vehicle_type,
        ),
    )


def render_plan(document: MissionPlanDocument) -> str:
    """Render a plan as compact JSON in wire key order."""
    return document.model_dump_json(by_alias=True)


def plan_to_dict(document: MissionPlanDocument) -> dict[str, Any]:
    """Render a plan as JSON-compatible Python data with wire keys."""
    return document.model_dump(mode="json", by_alias=True)


def parse_plan(text: str | bytes) -> MissionPlanDocument:
    """Read a plan back from its JSON form.

    Args:
        text: JSON document as produced by ``render_plan``.

    Returns:
        The plan document.

    Raises:
        ValidationError: If the document does not match the plan schema.
    """
    try:
        return MissionPlanDocument.model_validate_json(text)
    except PydanticValidationError as error:
        raise ValidationError(
            f"Invalid plan document: {error.error_count()} validation error(s)",
            field="plan",
            context={"errors": error.errors(include_url=False, include_input=False)},
        ) from error
