"""Cargo ATC exception hierarchy.

Architecture:
    CargoAtcError (base)
    ├── ClientError (4xx)
    │   ├── ValidationError (400)
    │   │   └── EmptyWaypointLegError (400)
    │   ├── BadRequestError (400)
    │   └── NotFoundError (404)
    └── ServerError (5xx)
        ├── ProcessingError (500)
        │   └── InvalidTransitionTargetError (500)
        ├── UnsupportedItineraryVariantError (501)
        ├── DatabaseError (500)
        └── ServiceUnavailableError (503)

Usage:
    from src.exceptions import EmptyWaypointLegError

    def first_waypoint(waypoints: list[Pose]) -> Pose:
        if not waypoints:
            raise EmptyWaypointLegError("waypoints")
        return waypoints[0]
"""

from src.exceptions.base import CargoAtcError
from src.exceptions.client_errors import (
    BadRequestError,
    ClientError,
    EmptyWaypointLegError,
    NotFoundError,
    ValidationError,
)
from src.exceptions.handlers import (
    create_error_response,
    create_exception_handler,
    create_success_response,
)
from src.exceptions.server_errors import (
    DatabaseError,
    InvalidTransitionTargetError,
    ProcessingError,
    ServerError,
    ServiceUnavailableError,
    UnsupportedItineraryVariantError,
)

__all__ = [
    "BadRequestError",
    "CargoAtcError",
    "ClientError",
    "DatabaseError",
    "EmptyWaypointLegError",
    "InvalidTransitionTargetError",
    "NotFoundError",
    "ProcessingError",
    "ServerError",
    "ServiceUnavailableError",
    "UnsupportedItineraryVariantError",
    "ValidationError",
    "create_error_response",
    "create_exception_handler",
    "create_success_response",
]
