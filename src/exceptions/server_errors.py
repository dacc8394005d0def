"""Server error exceptions (HTTP 5xx)."""

from http import HTTPStatus
from typing import ClassVar

from src.exceptions.base import CargoAtcError


class ServerError(CargoAtcError):
    """Base class for all server errors (5xx)."""

    error_code: ClassVar[str] = "SERVER_ERROR"
    http_status: ClassVar[int] = HTTPStatus.INTERNAL_SERVER_ERROR


class ProcessingError(ServerError):
    """Business logic processing failed."""

    error_code: ClassVar[str] = "PROCESSING_ERROR"
    http_status: ClassVar[int] = HTTPStatus.INTERNAL_SERVER_ERROR


class InvalidTransitionTargetError(ProcessingError):
    """A VTOL transition was requested to a state other than MC or FW."""

    error_code: ClassVar[str] = "INVALID_TRANSITION_TARGET"
    http_status: ClassVar[int] = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, target_state: int) -> None:
        """Initialize with the rejected target state.

        Args:
            target_state: MAV_VTOL_STATE value that was requested.
        """
        super().__init__(
            f"Invalid VTOL transition target state: {target_state}",
            context={"target_state": target_state},
        )
        self.target_state = target_state


class UnsupportedItineraryVariantError(ServerError):
    """The requested itinerary kind has no compiler yet."""

    error_code: ClassVar[str] = "UNSUPPORTED_ITINERARY_VARIANT"
    http_status: ClassVar[int] = HTTPStatus.NOT_IMPLEMENTED

    def __init__(self, kind: str) -> None:
        """Initialize with the unsupported itinerary kind.

        Args:
            kind: Itinerary kind that was requested.
        """
        super().__init__(
            f"Itinerary kind '{kind}' is not supported",
            context={"kind": kind},
        )
        self.kind = kind


class DatabaseError(ServerError):
    """Database operation failed."""

    error_code: ClassVar[str] = "DATABASE_ERROR"
    http_status: ClassVar[int] = HTTPStatus.INTERNAL_SERVER_ERROR


class ServiceUnavailableError(ServerError):
    """A dependency is temporarily unavailable."""

    error_code: ClassVar[str] = "SERVICE_UNAVAILABLE"
    http_status: ClassVar[int] = HTTPStatus.SERVICE_UNAVAILABLE
