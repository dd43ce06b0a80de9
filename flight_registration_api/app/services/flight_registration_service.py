"""
Service layer for flight registrations.

The service forwards each call to the record store and returns what
the store returns.  It performs no validation and translates no
errors; it exists so the HTTP layer does not talk to storage directly.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from flight_registration_api.app.repositories.flight_registration_repository import (
    FlightRegistrationRepository,
)
from flight_registration_api.app.schemas.flight_registration import (
    FlightRegistrationCreate,
    FlightRegistrationRead,
)

logger = logging.getLogger(__name__)


class FlightRegistrationService:
    """Pass-through service over a ``FlightRegistrationRepository``."""

    def __init__(self, repository: FlightRegistrationRepository) -> None:
        self.repository = repository

    async def register_flight(self, record: FlightRegistrationCreate) -> FlightRegistrationRead:
        logger.debug("Registering flight %s", record.flight_name)
        return self.repository.save(record)

    async def get_all_flight_registrations(self) -> List[FlightRegistrationRead]:
        return self.repository.find_all()

    async def get_flight_registration(self, record_id: int) -> Optional[FlightRegistrationRead]:
        return self.repository.find_by_id(record_id)

    async def update_flight_registration(
        self, record_id: int, record: FlightRegistrationCreate
    ) -> FlightRegistrationRead:
        """Replace the registration ``record_id`` with ``record``.

        Behaves like :meth:`register_flight` except that the identity
        comes from the caller.  An unknown id results in a new row.
        """
        logger.debug("Updating flight registration %s", record_id)
        return self.repository.save(record, record_id)

    async def delete_flight_registration(self, record_id: int) -> None:
        logger.debug("Deleting flight registration %s", record_id)
        self.repository.delete_by_id(record_id)
