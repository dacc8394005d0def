"""Service settings read from the Lambda environment.

Usage:
    from src.config import get_settings

    settings = get_settings()
    repository = FlightPlanRepository(DynamoDBClient.from_settings(settings))
"""

from enum import StrEnum
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.constants import DEFAULT_GROUND_STATION, SERVICE_NAME

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class LogFormat(StrEnum):
    """Log line rendering: json in deployed Lambdas, human for local runs."""

    JSON = "json"
    HUMAN = "human"


class Settings(BaseSettings):
    """Settings for the compiler and flight plan handlers.

    Attributes:
        service_name: Reported by the health check and on every log line.
        aws_region: Region of the flight plan table.
        table_name: DynamoDB table holding flight plan records.
        api_timeout_seconds: Connect and read timeout for table calls.
        ground_station_name: Value written to the plan's groundStation field.
        log_level: Root logger level.
        log_format: Log line rendering.
    """

    model_config = SettingsConfigDict(
        case_sensitive=False,
        extra="ignore",
        str_strip_whitespace=True,
    )

    service_name: str = Field(default=SERVICE_NAME, min_length=1)

    aws_region: str = Field(default="us-east-1", min_length=1)
    table_name: str = Field(default="cargo-atc-development", min_length=1)
    api_timeout_seconds: int = Field(default=30, ge=1, le=300)

    ground_station_name: str = Field(default=DEFAULT_GROUND_STATION, min_length=1)

    log_level: str = Field(default="INFO")
    log_format: LogFormat = Field(default=LogFormat.JSON)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Accept standard level names in any case."""
        level = value.upper()
        if level not in _LOG_LEVELS:
            error_message = f"log_level must be one of {sorted(_LOG_LEVELS)}, got '{value}'"
            raise ValueError(error_message)
        return level


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
