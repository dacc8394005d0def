"""Itinerary compiler: turns a cargo itinerary into ordered mission items.

Each itinerary kind has its own straight-line sequencing function. The
only branching is on whether the airframe needs hover/cruise transitions.
Items are built first and numbered afterwards by ``assign_jump_ids``.
"""

import logging
from collections.abc import Callable, Sequence
from datetime import datetime
from typing import Any

from src.constants import DEFAULT_GROUND_STATION, MAX_MISSION_ITEMS
from src.exceptions.client_errors import EmptyWaypointLegError, ValidationError
from src.exceptions.server_errors import UnsupportedItineraryVariantError
from src.plan import items as factory
from src.plan.document import MissionPlanDocument, assemble_plan
from src.plan.geometry import Pose, VehicleCapability
from src.plan.itinerary import (
    ContinuousItinerary,
    HopItinerary,
    ItineraryKind,
    WinchItinerary,
)
from src.plan.items import FlightMode, GripperAction, MissionItem, VtolState

logger = logging.getLogger(__name__)

# TODO: derive takeoff/landing yaw and pitch from the adjacent waypoints.
_YAW_DEGREES: float = 0.0
_PITCH_DEGREES: float = 0.0


def _first(leg: Sequence[Pose], name: str) -> Pose:
    if not leg:
        raise EmptyWaypointLegError(name)
    return leg[0]


def _last(leg: Sequence[Pose], name: str) -> Pose:
    if not leg:
        raise EmptyWaypointLegError(name)
    return leg[-1]


def _to_multirotor(capability: VehicleCapability) -> list[MissionItem]:
    if not capability.requires_cruise_transition:
        return []
    return [factory.transition(VtolState.MC)]


def _to_cruise(capability: VehicleCapability) -> list[MissionItem]:
    if not capability.requires_cruise_transition:
        return []
    return [factory.transition(VtolState.FW)]


def mission_start_items(takeoff_time: datetime, home: Pose) -> list[MissionItem]:
    """Items every mission starts with: set home, wait for the slot, arm."""
    return [
        factory.set_home(home),
        factory.delay_until(takeoff_time),
        factory.set_flight_mode(FlightMode.AUTO_ARMED),
    ]


def mission_end_items() -> list[MissionItem]:
    """Items every mission ends with: disarm."""
    return [factory.set_flight_mode(FlightMode.AUTO_DISARMED)]


def assign_jump_ids(items: Sequence[MissionItem]) -> tuple[MissionItem, ...]:
    """Number items 1..N in order.

    Args:
        items: Fully built item list.

    Returns:
        New items carrying their jump IDs.

    Raises:
        ValidationError: If there are more items than jump IDs.
    """
    if len(items) > MAX_MISSION_ITEMS:
        raise ValidationError(
            f"Mission has {len(items)} items, at most {MAX_MISSION_ITEMS} can be numbered",
            field="items",
            value=len(items),
        )
    return tuple(
        item.model_copy(update={"do_jump_id": index})
        for index, item in enumerate(items, start=1)
    )


def compile_hop(itinerary: HopItinerary) -> tuple[MissionItem, ...]:
    """Sequence a single takeoff-to-landing flight.

    Args:
        itinerary: Hop itinerary.

    Returns:
        Numbered mission items.

    Raises:
        EmptyWaypointLegError: If there are no waypoints.
    """
    capability = VehicleCapability.from_vehicle_type(itinerary.vehicle_type)

    items = mission_start_items(itinerary.takeoff_time, itinerary.takeoff_location)

    # Takeoff happens in multirotor mode
    items.extend(_to_multirotor(capability))
    items.append(
        factory.takeoff(_first(itinerary.waypoints, "waypoints"), _YAW_DEGREES, _PITCH_DEGREES)
    )
    items.extend(_to_cruise(capability))

    items.extend(factory.waypoint(pose) for pose in itinerary.waypoints)
    items.extend(_to_multirotor(capability))

    items.append(factory.point_camera_at(itinerary.landing_location, itinerary.gimbal_camera_id))
    items.append(factory.delay_until(itinerary.landing_time))
    items.append(
        factory.land(_last(itinerary.waypoints, "waypoints"), _YAW_DEGREES, _PITCH_DEGREES)
    )

    items.extend(mission_end_items())

    return assign_jump_ids(items)


def _fly_leg(
    leg: Sequence[Pose],
    name: str,
    capability: VehicleCapability,
) -> list[MissionItem]:
    """Climb to a leg's first waypoint in hover, cruise the rest, hover again.

    Raises:
        EmptyWaypointLegError: If the leg is empty.
    """
    items = [factory.waypoint(_first(leg, name))]
    items.extend(_to_cruise(capability))
    items.extend(factory.waypoint(pose) for pose in leg[1:])
    items.extend(_to_multirotor(capability))
    return items


def compile_continuous(itinerary: ContinuousItinerary) -> tuple[MissionItem, ...]:
    """Sequence a swoop flight: airborne pickup and dropoff, no landing in between.

    The gripper is opened before the approach to the pickup point and closed
    only once the aircraft is there.

    Args:
        itinerary: Continuous itinerary.

    Returns:
        Numbered mission items.

    Raises:
        EmptyWaypointLegError: If any of the three waypoint legs is empty.
    """
    capability = VehicleCapability.from_vehicle_type(itinerary.vehicle_type)

    items = mission_start_items(itinerary.takeoff_time, itinerary.takeoff_location)

    items.extend(_to_multirotor(capability))
    items.append(
        factory.takeoff(
            _first(itinerary.waypoints_deadhead_a, "waypoints_deadhead_a"),
            _YAW_DEGREES,
            _PITCH_DEGREES,
        )
    )
    items.extend(_to_cruise(capability))

    # Deadhead to the pickup site
    items.extend(factory.waypoint(pose) for pose in itinerary.waypoints_deadhead_a)
    items.extend(_to_multirotor(capability))

    # Pickup
    items.append(factory.point_camera_at(itinerary.pickup_location, itinerary.gimbal_camera_id))
    items.append(factory.delay_until(itinerary.pickup_time))
    items.append(factory.gripper(GripperAction.RELEASE))
    items.append(factory.waypoint(itinerary.pickup_location))
    items.append(factory.gripper(GripperAction.GRAB))

    # Main leg
    items.extend(_fly_leg(itinerary.waypoints_main, "waypoints_main", capability))

    # Dropoff
    items.append(factory.point_camera_at(itinerary.dropoff_location, itinerary.gimbal_camera_id))
    items.append(factory.delay_until(itinerary.dropoff_time))
    if itinerary.gentle_dropoff:
        items.append(
            factory.payload_place(
                itinerary.dropoff_location,
                itinerary.gentle_dropoff_max_descent_meters,
            )
        )
    else:
        items.append(factory.waypoint(itinerary.dropoff_location))
        items.append(factory.gripper(GripperAction.RELEASE))

    # Deadhead to the landing site
    items.extend(_fly_leg(itinerary.waypoints_deadhead_b, "waypoints_deadhead_b", capability))

    items.append(factory.point_camera_at(itinerary.landing_location, itinerary.gimbal_camera_id))
    items.append(factory.delay_until(itinerary.landing_time))
    items.append(factory.land(itinerary.landing_location, _YAW_DEGREES, _PITCH_DEGREES))

    items.extend(mission_end_items())

    return assign_jump_ids(items)


def compile_winch(itinerary: WinchItinerary) -> tuple[MissionItem, ...]:
    """Winch deliveries depend on the release mechanism and are not compiled yet.

    Raises:
        UnsupportedItineraryVariantError: Always.
    """
    raise UnsupportedItineraryVariantError(itinerary.kind)


_COMPILERS: dict[ItineraryKind, Callable[[Any], tuple[MissionItem, ...]]] = {
    ItineraryKind.HOP: compile_hop,
    ItineraryKind.CONTINUOUS: compile_continuous,
    ItineraryKind.WINCH: compile_winch,
}


def compile_itinerary(
    itinerary: HopItinerary | ContinuousItinerary | WinchItinerary,
    *,
    ground_station: str = DEFAULT_GROUND_STATION,
) -> MissionPlanDocument:
    """Compile an itinerary into a complete mission plan document.

    Args:
        itinerary: Any itinerary variant.
        ground_station: Name written to the plan's groundStation field.

    Returns:
        The assembled plan.

    Raises:
        EmptyWaypointLegError: If a required waypoint leg is empty.
        UnsupportedItineraryVariantError: For winch itineraries.
    """
    items = _COMPILERS[itinerary.kind](itinerary)

    logger.debug(
        "Compiled itinerary",
        extra={"itinerary_kind": str(itinerary.kind), "item_count": len(items)},
    )

    return assemble_plan(
        items,
        cruise_speed=itinerary.cruise_speed,
        hover_speed=itinerary.hover_speed,
        firmware_type=itinerary.autopilot_type,
        vehicle_type=itinerary.vehicle_type,
        home=itinerary.takeoff_location,
        ground_station=ground_station,
    )
