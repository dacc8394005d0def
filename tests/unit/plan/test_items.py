"""Tests for the mission item constructors."""

from datetime import UTC, datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from src.exceptions.server_errors import InvalidTransitionTargetError
from src.plan import items
from src.plan.geometry import Pose
from src.plan.items import FlightMode, GripperAction, MissionItem, VtolState, WinchAction

MAV_CMD_NAV_WAYPOINT = 16
MAV_CMD_NAV_LAND = 21
MAV_CMD_NAV_TAKEOFF = 22
MAV_CMD_NAV_DELAY = 93
MAV_CMD_NAV_PAYLOAD_PLACE = 94
MAV_CMD_DO_SET_MODE = 176
MAV_CMD_DO_SET_HOME = 179
MAV_CMD_DO_SET_ROI_LOCATION = 195
MAV_CMD_DO_GRIPPER = 211
MAV_CMD_DO_VTOL_TRANSITION = 3000
MAV_CMD_DO_WINCH = 42600

FRAME_GLOBAL = 0
FRAME_GLOBAL_RELATIVE_ALT = 3

POSE = Pose(latitude=52.5, longitude=13.4, altitude_meters=80.0, heading_degrees=45.0)


class TestMissionItem:
    def test_defaults(self) -> None:
        item = MissionItem(command=MAV_CMD_NAV_WAYPOINT, params=(0.0,) * 7)
        assert item.item_type == "SimpleItem"
        assert item.auto_continue is True
        assert item.do_jump_id == 0
        assert item.frame == FRAME_GLOBAL
        assert item.altitude == 0.0
        assert item.altitude_mode == 1
        assert item.amsl_alt_above_terrain == 0.0

    def test_requires_seven_params(self) -> None:
        with pytest.raises(ValidationError):
            MissionItem(command=MAV_CMD_NAV_WAYPOINT, params=(0.0,) * 6)

    def test_populates_from_aliases(self) -> None:
        item = MissionItem.model_validate(
            {"command": MAV_CMD_NAV_LAND, "doJumpId": 4, "autoContinue": False, "params": [None] * 7},
        )
        assert item.do_jump_id == 4
        assert item.auto_continue is False

    def test_is_immutable(self) -> None:
        item = items.waypoint(POSE)
        with pytest.raises(ValidationError):
            item.do_jump_id = 3


class TestNavigationItems:
    def test_takeoff(self) -> None:
        item = items.takeoff(POSE, yaw_degrees=10.0, pitch_degrees=5.0)
        assert item.command == MAV_CMD_NAV_TAKEOFF
        assert item.frame == FRAME_GLOBAL
        assert item.params == (5.0, None, None, 10.0, 52.5, 13.4, 80.0)

    def test_land(self) -> None:
        item = items.land(POSE, yaw_degrees=0.0, pitch_degrees=0.0)
        assert item.command == MAV_CMD_NAV_LAND
        assert item.params == (0.0, None, None, 0.0, 52.5, 13.4, 80.0)

    def test_waypoint(self) -> None:
        item = items.waypoint(POSE)
        assert item.command == MAV_CMD_NAV_WAYPOINT
        assert item.params == (0.0, 0.0, 0.0, None, 52.5, 13.4, 80.0)

    def test_constructors_leave_jump_id_unset(self) -> None:
        assert items.waypoint(POSE).do_jump_id == 0
        assert items.takeoff(POSE, 0.0, 0.0).do_jump_id == 0


class TestDelayUntil:
    def test_time_of_day_slots(self) -> None:
        item = items.delay_until(datetime(2025, 6, 1, 14, 30, 15, tzinfo=UTC))
        assert item.command == MAV_CMD_NAV_DELAY
        assert item.frame == FRAME_GLOBAL_RELATIVE_ALT
        assert item.altitude == 0.0
        assert item.params == (-1.0, 30.0, 15.0, 14.0, None, None, None)

    def test_converts_to_utc(self) -> None:
        plus_two = timezone(timedelta(hours=2))
        item = items.delay_until(datetime(2025, 6, 1, 16, 5, 0, tzinfo=plus_two))
        assert item.params[1:4] == (5.0, 0.0, 14.0)

    def test_naive_treated_as_utc(self) -> None:
        item = items.delay_until(datetime(2025, 6, 1, 8, 0, 59))
        assert item.params[1:4] == (0.0, 59.0, 8.0)


class TestTransition:
    @pytest.mark.parametrize("target", [VtolState.MC, VtolState.FW])
    def test_valid_targets(self, target: VtolState) -> None:
        item = items.transition(target)
        assert item.command == MAV_CMD_DO_VTOL_TRANSITION
        assert item.frame == FRAME_GLOBAL_RELATIVE_ALT
        assert item.params == (float(target), 0.0, None, None, None, None, None)

    def test_state_codes(self) -> None:
        assert VtolState.MC == 3
        assert VtolState.FW == 4

    @pytest.mark.parametrize("target", [0, 1, 2, 5])
    def test_invalid_target_raises(self, target: int) -> None:
        with pytest.raises(InvalidTransitionTargetError) as excinfo:
            items.transition(target)
        assert excinfo.value.context["target_state"] == target


class TestCommandItems:
    def test_set_flight_mode(self) -> None:
        item = items.set_flight_mode(FlightMode.AUTO_ARMED)
        assert item.command == MAV_CMD_DO_SET_MODE
        assert item.params == (220.0, None, None, None, None, None, None)

    def test_disarmed_mode_code(self) -> None:
        assert FlightMode.AUTO_DISARMED == 92

    def test_set_home_with_pose(self) -> None:
        item = items.set_home(POSE)
        assert item.command == MAV_CMD_DO_SET_HOME
        assert item.params == (0.0, None, None, None, 52.5, 13.4, 80.0)

    def test_set_home_current_position(self) -> None:
        item = items.set_home()
        assert item.params == (1.0, None, None, None, 0.0, 0.0, 0.0)

    def test_gripper(self) -> None:
        release = items.gripper(GripperAction.RELEASE)
        grab = items.gripper(GripperAction.GRAB)
        assert release.command == MAV_CMD_DO_GRIPPER
        assert release.params == (1.0, 0.0, None, None, None, None, None)
        assert grab.params == (1.0, 1.0, None, None, None, None, None)

    def test_winch(self) -> None:
        item = items.winch(WinchAction.DELIVER, length_meters=12.5, rate_meters_per_second=0.5)
        assert item.command == MAV_CMD_DO_WINCH
        assert item.frame == FRAME_GLOBAL_RELATIVE_ALT
        assert item.params == (1.0, 4.0, 12.5, 0.5, None, None, None)

    def test_payload_place(self) -> None:
        item = items.payload_place(POSE, max_descent_meters=8.0)
        assert item.command == MAV_CMD_NAV_PAYLOAD_PLACE
        assert item.params == (8.0, None, None, None, 52.5, 13.4, 80.0)

    def test_point_camera_at(self) -> None:
        item = items.point_camera_at(POSE, gimbal_id=2)
        assert item.command == MAV_CMD_DO_SET_ROI_LOCATION
        assert item.params == (2.0, None, None, None, 52.5, 13.4, 80.0)
