"""Base exception for the cargo ATC service.

Every error carries a machine-readable code and an HTTP status so the
Lambda layer can map it to a response without knowing the concrete type.
"""

from http import HTTPStatus
from typing import Any, ClassVar


class CargoAtcError(Exception):
    """Base exception for all cargo ATC errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        http_status: HTTP status code for API responses.
        context: Fields that identify what failed, e.g. the empty leg.
    """

    error_code: ClassVar[str] = "INTERNAL_ERROR"
    http_status: ClassVar[int] = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(
        self,
        message: str,
        *,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def to_dict(self) -> dict[str, Any]:
        """Summarize the error for structured log records."""
        return {
            "error_code": self.error_code,
            "http_status": int(self.http_status),
            "context": self.context,
        }

    def __str__(self) -> str:
        if self.context:
            return f"{self.message} (context: {self.context})"
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, context={self.context!r})"
