"""Unit tests for FlightRegistrationService.

The service is a pass-through, so each test checks that a call reaches
the repository unchanged and that the repository's answer comes back
unchanged.
"""

from unittest.mock import MagicMock

import pytest

from flight_registration_api.app.repositories.flight_registration_repository import (
    FlightRegistrationRepository,
)
from flight_registration_api.app.schemas.flight_registration import (
    FlightRegistrationCreate,
    FlightRegistrationRead,
)
from flight_registration_api.app.services.flight_registration_service import (
    FlightRegistrationService,
)


@pytest.fixture
def repository() -> MagicMock:
    return MagicMock(spec=FlightRegistrationRepository)


@pytest.fixture
def service(repository) -> FlightRegistrationService:
    return FlightRegistrationService(repository)


@pytest.fixture
def record(apollo_payload) -> FlightRegistrationCreate:
    return FlightRegistrationCreate.model_validate(apollo_payload)


@pytest.fixture
def stored(apollo_payload) -> FlightRegistrationRead:
    return FlightRegistrationRead.model_validate({**apollo_payload, "id": 7})


@pytest.mark.asyncio
class TestFlightRegistrationService:
    async def test_register_flight_saves_without_id(self, service, repository, record, stored):
        repository.save.return_value = stored

        result = await service.register_flight(record)

        repository.save.assert_called_once_with(record)
        assert result is stored

    async def test_get_all_returns_store_result(self, service, repository, stored):
        repository.find_all.return_value = [stored]

        assert await service.get_all_flight_registrations() == [stored]

    async def test_get_one_returns_store_result(self, service, repository):
        repository.find_by_id.return_value = None

        assert await service.get_flight_registration(3) is None
        repository.find_by_id.assert_called_once_with(3)

    async def test_update_saves_with_path_id(self, service, repository, record, stored):
        repository.save.return_value = stored

        result = await service.update_flight_registration(7, record)

        repository.save.assert_called_once_with(record, 7)
        assert result is stored

    async def test_delete_forwards_id(self, service, repository):
        repository.delete_by_id.return_value = False

        assert await service.delete_flight_registration(9) is None
        repository.delete_by_id.assert_called_once_with(9)
