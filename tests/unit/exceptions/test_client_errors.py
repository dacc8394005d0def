"""Tests for client error exceptions."""

from http import HTTPStatus

from src.exceptions.client_errors import (
    BadRequestError,
    ClientError,
    EmptyWaypointLegError,
    NotFoundError,
    ValidationError,
)


class TestClientError:
    def test_error_code(self):
        error = ClientError("bad request")
        assert error.error_code == "CLIENT_ERROR"

    def test_http_status(self):
        error = ClientError("bad request")
        assert error.http_status == HTTPStatus.BAD_REQUEST


class TestValidationError:
    def test_error_code(self):
        error = ValidationError("invalid input")
        assert error.error_code == "VALIDATION_ERROR"

    def test_http_status(self):
        error = ValidationError("invalid input")
        assert error.http_status == HTTPStatus.BAD_REQUEST

    def test_field_in_context(self):
        error = ValidationError("bad speed", field="cruise_speed")
        assert error.context["field"] == "cruise_speed"

    def test_value_in_context(self):
        error = ValidationError("bad speed", field="cruise_speed", value=-1)
        assert error.context["value"] == -1

    def test_custom_context_merged(self):
        error = ValidationError("bad", field="kind", context={"extra": "info"})
        assert error.context["field"] == "kind"
        assert error.context["extra"] == "info"


class TestEmptyWaypointLegError:
    def test_error_code(self):
        assert EmptyWaypointLegError("waypoints").error_code == "EMPTY_WAYPOINT_LEG"

    def test_http_status(self):
        assert EmptyWaypointLegError("waypoints").http_status == HTTPStatus.BAD_REQUEST

    def test_names_leg(self):
        error = EmptyWaypointLegError("waypoints_main")
        assert error.leg == "waypoints_main"
        assert error.context["field"] == "waypoints_main"
        assert "waypoints_main" in error.message

    def test_is_validation_error(self):
        assert isinstance(EmptyWaypointLegError("waypoints"), ValidationError)


class TestNotFoundError:
    def test_error_code(self):
        error = NotFoundError("not found")
        assert error.error_code == "NOT_FOUND"

    def test_http_status(self):
        error = NotFoundError("not found")
        assert error.http_status == HTTPStatus.NOT_FOUND

    def test_resource_type_in_context(self):
        error = NotFoundError("flight plan not found", resource_type="FlightPlan")
        assert error.context["resource_type"] == "FlightPlan"

    def test_resource_id_in_context(self):
        error = NotFoundError("not found", resource_id="fp-123")
        assert error.context["resource_id"] == "fp-123"


class TestBadRequestError:
    def test_error_code(self):
        assert BadRequestError("bad").error_code == "BAD_REQUEST"

    def test_http_status(self):
        assert BadRequestError("bad").http_status == HTTPStatus.BAD_REQUEST
