"""Tests for carrier acknowledgement."""

import io
import json

import pytest

from src.exceptions.client_errors import NotFoundError
from src.flight_plan.acknowledger import acknowledge_flight_plan
from src.flight_plan.models import AckRequest, AckStatus, FlightPlanRecord, FlightPlanStatus
from src.flight_plan.repository import FlightPlanRepository
from src.logging import configure_logging
from src.utils.dynamodb import DynamoDBClient


@pytest.fixture()
def flight_plan_repo(flight_plan_table) -> FlightPlanRepository:
    """Repository seeded with one pending flight plan."""
    repository = FlightPlanRepository(DynamoDBClient(flight_plan_table.name))
    repository.create(FlightPlanRecord(flight_plan_id="fp-001"))
    return repository


class TestAcknowledgeFlightPlan:
    def test_confirm(self, flight_plan_repo: FlightPlanRepository) -> None:
        record = acknowledge_flight_plan(
            AckRequest(fp_id="fp-001", status=AckStatus.CONFIRM),
            flight_plan_repo,
        )
        assert record.status == FlightPlanStatus.CONFIRMED
        assert record.carrier_ack is not None
        assert flight_plan_repo.get_by_id("fp-001").status == FlightPlanStatus.CONFIRMED

    def test_deny(self, flight_plan_repo: FlightPlanRepository) -> None:
        record = acknowledge_flight_plan(
            AckRequest(fp_id="fp-001", status=AckStatus.DENY),
            flight_plan_repo,
        )
        assert record.status == FlightPlanStatus.DENIED

    def test_moves_between_status_listings(self, flight_plan_repo: FlightPlanRepository) -> None:
        acknowledge_flight_plan(AckRequest(fp_id="fp-001", status=AckStatus.DENY), flight_plan_repo)

        assert flight_plan_repo.search(FlightPlanStatus.PENDING) == []
        assert [r.flight_plan_id for r in flight_plan_repo.search(FlightPlanStatus.DENIED)] == ["fp-001"]

    def test_unknown_flight_plan(self, flight_plan_repo: FlightPlanRepository) -> None:
        with pytest.raises(NotFoundError):
            acknowledge_flight_plan(
                AckRequest(fp_id="fp-404", status=AckStatus.CONFIRM),
                flight_plan_repo,
            )


class TestAcknowledgementLogging:
    def test_record_names_plan_and_status(self, flight_plan_repo: FlightPlanRepository) -> None:
        stream = io.StringIO()
        configure_logging(stream=stream)

        acknowledge_flight_plan(AckRequest(fp_id="fp-001", status=AckStatus.DENY), flight_plan_repo)

        record = json.loads(stream.getvalue().splitlines()[-1])
        assert record["message"] == "Flight plan acknowledged"
        assert record["level"] == "INFO"
        assert record["logger"] == "src.flight_plan.acknowledger"
        assert record["flight_plan_id"] == "fp-001"
        assert record["ack_status"] == "Deny"

    def test_failed_update_is_not_logged(self, flight_plan_repo: FlightPlanRepository) -> None:
        stream = io.StringIO()
        configure_logging(stream=stream)

        with pytest.raises(NotFoundError):
            acknowledge_flight_plan(AckRequest(fp_id="fp-404", status=AckStatus.CONFIRM), flight_plan_repo)

        assert "Flight plan acknowledged" not in stream.getvalue()
