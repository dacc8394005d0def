"""Poses and airframe capability classification."""

from pydantic import BaseModel, ConfigDict, Field
from pymavlink import mavutil

# VTOL MAV_TYPE codes are contiguous from the duorotor tailsitter to the tiltwing.
_MAV_TYPE_FLAPPING_WING: int = mavutil.mavlink.MAV_TYPE_FLAPPING_WING
_MAV_TYPE_VTOL_FIRST: int = mavutil.mavlink.MAV_TYPE_VTOL_DUOROTOR
_MAV_TYPE_VTOL_LAST: int = mavutil.mavlink.MAV_TYPE_VTOL_TILTWING


class Pose(BaseModel):
    """WGS-84 position with altitude and heading."""

    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float
    altitude_meters: float
    heading_degrees: float = Field(default=0.0)


def requires_cruise_transition(vehicle_type: int) -> bool:
    """Check whether an airframe must switch between hover and cruise flight.

    Args:
        vehicle_type: MAV_TYPE code of the airframe.

    Returns:
        True for VTOL tailsitter/tiltrotor/tiltwing airframes and flapping
        wings, False for multirotors and any code outside those classes.
    """
    if vehicle_type == _MAV_TYPE_FLAPPING_WING:
        return True
    return _MAV_TYPE_VTOL_FIRST <= vehicle_type <= _MAV_TYPE_VTOL_LAST


class VehicleCapability(BaseModel):
    """Flight capability derived from a vehicle type code."""

    model_config = ConfigDict(frozen=True)

    vehicle_type: int
    requires_cruise_transition: bool

    @classmethod
    def from_vehicle_type(cls, vehicle_type: int) -> "VehicleCapability":
        """Classify a MAV_TYPE code."""
        return cls(
            vehicle_type=vehicle_type,
            requires_cruise_transition=requires_cruise_transition(vehicle_type),
        )
