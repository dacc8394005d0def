"""Mission items and one constructor per autopilot action.

Each constructor returns a single ``MissionItem`` with ``do_jump_id`` left
at 0; jump IDs are assigned once the whole item list exists (see
``src.plan.compiler.assign_jump_ids``).

Parameter slots follow the MAVLink command definitions. ``None`` marks an
unused slot and renders as JSON ``null``, which is also how ground control
stations store the NaN "keep current value" sentinel.
"""

from datetime import UTC, datetime
from enum import IntEnum

from pydantic import BaseModel, ConfigDict, Field
from pymavlink import mavutil

from src.constants import (
    DEFAULT_ALTITUDE_MODE,
    GRIPPER_INSTANCE,
    MISSION_ITEM_PARAM_COUNT,
    SIMPLE_ITEM_TYPE,
    WINCH_INSTANCE,
)
from src.exceptions.server_errors import InvalidTransitionTargetError
from src.plan.geometry import Pose

FRAME_GLOBAL: int = mavutil.mavlink.MAV_FRAME_GLOBAL
FRAME_GLOBAL_RELATIVE_ALT: int = mavutil.mavlink.MAV_FRAME_GLOBAL_RELATIVE_ALT

# NAV_DELAY param1 of -1 switches the delay to absolute time of day.
_DELAY_TIME_OF_DAY: float = -1.0
_NORMAL_TRANSITION: float = 0.0
_USE_CURRENT_POSITION: float = 1.0
_USE_SPECIFIED_POSITION: float = 0.0

ParamSlot = float | None


class VtolState(IntEnum):
    """VTOL states a transition command may target."""

    MC = mavutil.mavlink.MAV_VTOL_STATE_MC
    FW = mavutil.mavlink.MAV_VTOL_STATE_FW


class FlightMode(IntEnum):
    """Base flight modes used at mission start and end."""

    AUTO_ARMED = mavutil.mavlink.MAV_MODE_AUTO_ARMED
    AUTO_DISARMED = mavutil.mavlink.MAV_MODE_AUTO_DISARMED


class GripperAction(IntEnum):
    """Gripper open/close actions."""

    RELEASE = mavutil.mavlink.GRIPPER_ACTION_RELEASE
    GRAB = mavutil.mavlink.GRIPPER_ACTION_GRAB


class WinchAction(IntEnum):
    """Winch actions."""

    RELAXED = mavutil.mavlink.WINCH_RELAXED
    RELATIVE_LENGTH_CONTROL = mavutil.mavlink.WINCH_RELATIVE_LENGTH_CONTROL
    RATE_CONTROL = mavutil.mavlink.WINCH_RATE_CONTROL
    LOCK = mavutil.mavlink.WINCH_LOCK
    DELIVER = mavutil.mavlink.WINCH_DELIVER
    HOLD = mavutil.mavlink.WINCH_HOLD
    RETRACT = mavutil.mavlink.WINCH_RETRACT
    LOAD_LINE = mavutil.mavlink.WINCH_LOAD_LINE
    ABANDON_LINE = mavutil.mavlink.WINCH_ABANDON_LINE
    LOAD_PAYLOAD = mavutil.mavlink.WINCH_LOAD_PAYLOAD


class MissionItem(BaseModel):
    """A single mission command as stored in a ground control plan file.

    Field order and aliases are the wire format; do not reorder.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    item_type: str = Field(default=SIMPLE_ITEM_TYPE, alias="type")
    auto_continue: bool = Field(default=True, alias="autoContinue")
    command: int
    do_jump_id: int = Field(default=0, ge=0, le=65535, alias="doJumpId")
    frame: int = Field(default=FRAME_GLOBAL)
    params: tuple[ParamSlot, ...] = Field(
        min_length=MISSION_ITEM_PARAM_COUNT,
        max_length=MISSION_ITEM_PARAM_COUNT,
    )
    altitude: float = Field(default=0.0, alias="Altitude")
    altitude_mode: int = Field(default=DEFAULT_ALTITUDE_MODE, alias="AltitudeMode")
    amsl_alt_above_terrain: float = Field(default=0.0, alias="AMSLAltAboveTerrain")


def _position(pose: Pose) -> tuple[float, float, float]:
    return (pose.latitude, pose.longitude, pose.altitude_meters)


def takeoff(pose: Pose, yaw_degrees: float, pitch_degrees: float) -> MissionItem:
    """Take off and climb towards ``pose``."""
    return MissionItem(
        command=mavutil.mavlink.MAV_CMD_NAV_TAKEOFF,
        frame=FRAME_GLOBAL,
        params=(pitch_degrees, None, None, yaw_degrees, *_position(pose)),
    )


def land(pose: Pose, yaw_degrees: float, pitch_degrees: float) -> MissionItem:
    """Land at ``pose``."""
    return MissionItem(
        command=mavutil.mavlink.MAV_CMD_NAV_LAND,
        params=(pitch_degrees, None, None, yaw_degrees, *_position(pose)),
    )


def waypoint(pose: Pose) -> MissionItem:
    """Fly to ``pose`` without holding, keeping the current yaw behaviour."""
    return MissionItem(
        command=mavutil.mavlink.MAV_CMD_NAV_WAYPOINT,
        params=(0.0, 0.0, 0.0, None, *_position(pose)),
    )


def delay_until(timestamp: datetime) -> MissionItem:
    """Hold position until a UTC time of day.

    Naive timestamps are taken to be UTC already.
    """
    if timestamp.tzinfo is not None:
        timestamp = timestamp.astimezone(UTC)

    return MissionItem(
        command=mavutil.mavlink.MAV_CMD_NAV_DELAY,
        frame=FRAME_GLOBAL_RELATIVE_ALT,
        altitude=0.0,
        params=(
            _DELAY_TIME_OF_DAY,
            float(timestamp.minute),
            float(timestamp.second),
            float(timestamp.hour),
            None,
            None,
            None,
        ),
    )


def transition(target_state: int) -> MissionItem:
    """Switch a VTOL airframe to multirotor or fixed-wing flight.

    Args:
        target_state: MAV_VTOL_STATE value, MC or FW.

    Returns:
        The transition item.

    Raises:
        InvalidTransitionTargetError: If the target is any other state.
    """
    if target_state not in (VtolState.MC, VtolState.FW):
        raise InvalidTransitionTargetError(target_state)

    return MissionItem(
        command=mavutil.mavlink.MAV_CMD_DO_VTOL_TRANSITION,
        frame=FRAME_GLOBAL_RELATIVE_ALT,
        altitude=0.0,
        params=(float(target_state), _NORMAL_TRANSITION, None, None, None, None, None),
    )


def set_flight_mode(mode: FlightMode) -> MissionItem:
    """Change the base flight mode."""
    return MissionItem(
        command=mavutil.mavlink.MAV_CMD_DO_SET_MODE,
        frame=FRAME_GLOBAL_RELATIVE_ALT,
        altitude=0.0,
        params=(float(mode), None, None, None, None, None, None),
    )


def set_home(pose: Pose | None = None) -> MissionItem:
    """Set the home position to ``pose``, or to the current position if omitted."""
    if pose is None:
        use_current = _USE_CURRENT_POSITION
        pose = Pose(latitude=0.0, longitude=0.0, altitude_meters=0.0, heading_degrees=0.0)
    else:
        use_current = _USE_SPECIFIED_POSITION

    return MissionItem(
        command=mavutil.mavlink.MAV_CMD_DO_SET_HOME,
        params=(use_current, None, None, None, *_position(pose)),
    )


def gripper(action: GripperAction) -> MissionItem:
    """Open or close the cargo gripper."""
    return MissionItem(
        command=mavutil.mavlink.MAV_CMD_DO_GRIPPER,
        frame=FRAME_GLOBAL_RELATIVE_ALT,
        altitude=0.0,
        params=(float(GRIPPER_INSTANCE), float(action), None, None, None, None, None),
    )


def winch(action: WinchAction, length_meters: float, rate_meters_per_second: float) -> MissionItem:
    """Drive the cargo winch."""
    return MissionItem(
        command=mavutil.mavlink.MAV_CMD_DO_WINCH,
        frame=FRAME_GLOBAL_RELATIVE_ALT,
        altitude=0.0,
        params=(
            float(WINCH_INSTANCE),
            float(action),
            length_meters,
            rate_meters_per_second,
            None,
            None,
            None,
        ),
    )


def payload_place(pose: Pose, max_descent_meters: float) -> MissionItem:
    """Descend at ``pose`` until the payload touches down, then release it."""
    return MissionItem(
        command=mavutil.mavlink.MAV_CMD_NAV_PAYLOAD_PLACE,
        params=(max_descent_meters, None, None, None, *_position(pose)),
    )


def point_camera_at(pose: Pose, gimbal_id: int) -> MissionItem:
    """Aim the gimbal camera at ``pose``."""
    return MissionItem(
        command=mavutil.mavlink.MAV_CMD_DO_SET_ROI_LOCATION,
        params=(float(gimbal_id), None, None, None, *_position(pose)),
    )
