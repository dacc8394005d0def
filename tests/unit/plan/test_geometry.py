"""Tests for poses and vehicle capability classification."""

import pytest
from pydantic import ValidationError
from pymavlink import mavutil

from src.plan.geometry import Pose, VehicleCapability, requires_cruise_transition

MAV_TYPE_QUADROTOR = 2
MAV_TYPE_HEXAROTOR = 13
MAV_TYPE_FLAPPING_WING = 16
MAV_TYPE_KITE = 17
MAV_TYPE_ONBOARD_CONTROLLER = 18
MAV_TYPE_VTOL_TILTWING = 24
MAV_TYPE_VTOL_RESERVED5 = 25


class TestPose:
    def test_fields(self) -> None:
        pose = Pose(latitude=52.37, longitude=4.89, altitude_meters=120.0, heading_degrees=90.0)
        assert pose.latitude == 52.37
        assert pose.longitude == 4.89
        assert pose.altitude_meters == 120.0
        assert pose.heading_degrees == 90.0

    def test_heading_defaults_to_zero(self) -> None:
        pose = Pose(latitude=0.0, longitude=0.0, altitude_meters=0.0)
        assert pose.heading_degrees == 0.0

    def test_is_immutable(self) -> None:
        pose = Pose(latitude=0.0, longitude=0.0, altitude_meters=0.0)
        with pytest.raises(ValidationError):
            pose.latitude = 1.0

    def test_equal_by_value(self) -> None:
        first = Pose(latitude=1.0, longitude=2.0, altitude_meters=3.0)
        second = Pose(latitude=1.0, longitude=2.0, altitude_meters=3.0)
        assert first == second


class TestRequiresCruiseTransition:
    @pytest.mark.parametrize("vehicle_type", [19, 20, 21, 22, 23, 24])
    def test_vtol_range(self, vehicle_type: int) -> None:
        assert requires_cruise_transition(vehicle_type) is True

    def test_named_vtol_airframes(self) -> None:
        assert requires_cruise_transition(mavutil.mavlink.MAV_TYPE_VTOL_TAILSITTER_DUOROTOR) is True
        assert requires_cruise_transition(mavutil.mavlink.MAV_TYPE_VTOL_TILTROTOR) is True
        assert requires_cruise_transition(mavutil.mavlink.MAV_TYPE_VTOL_TILTWING) is True

    def test_flapping_wing(self) -> None:
        assert requires_cruise_transition(MAV_TYPE_FLAPPING_WING) is True

    def test_multirotor(self) -> None:
        assert requires_cruise_transition(MAV_TYPE_QUADROTOR) is False
        assert requires_cruise_transition(MAV_TYPE_HEXAROTOR) is False

    def test_codes_just_outside_range(self) -> None:
        assert requires_cruise_transition(MAV_TYPE_ONBOARD_CONTROLLER) is False
        assert requires_cruise_transition(MAV_TYPE_VTOL_RESERVED5) is False

    def test_code_after_flapping_wing(self) -> None:
        assert requires_cruise_transition(MAV_TYPE_KITE) is False

    @pytest.mark.parametrize("vehicle_type", [-1, 255, 10_000])
    def test_unknown_codes(self, vehicle_type: int) -> None:
        assert requires_cruise_transition(vehicle_type) is False


class TestVehicleCapability:
    def test_from_vtol(self) -> None:
        capability = VehicleCapability.from_vehicle_type(MAV_TYPE_VTOL_TILTWING)
        assert capability.vehicle_type == MAV_TYPE_VTOL_TILTWING
        assert capability.requires_cruise_transition is True

    def test_from_multirotor(self) -> None:
        capability = VehicleCapability.from_vehicle_type(MAV_TYPE_QUADROTOR)
        assert capability.requires_cruise_transition is False
