"""
Flight registration endpoints.

CRUD routes for spaceflight registrations under ``/register-flight``.
Request and response bodies use the camelCase JSON shape of
``FlightRegistrationRead``.  Handlers delegate to
``FlightRegistrationService`` and only fix the status codes.
"""

from typing import Annotated, List

from fastapi import APIRouter, Depends, HTTPException, Path, status

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

router = APIRouter()

# Path ids must fit a SQLite INTEGER; larger values are rejected with 422.
FlightId = Annotated[int, Path(ge=-(2**63), le=2**63 - 1)]


def get_flight_registration_service() -> FlightRegistrationService:
    """Build the service over the default SQLite-backed store."""
    return FlightRegistrationService(FlightRegistrationRepository())


@router.post(
    "/register-flight",
    response_model=FlightRegistrationRead,
    status_code=status.HTTP_201_CREATED,
)
async def register_flight(
    flight_registration: FlightRegistrationCreate,
    service: FlightRegistrationService = Depends(get_flight_registration_service),
) -> FlightRegistrationRead:
    """Register a new flight.  Any ``id`` in the body is ignored."""
    return await service.register_flight(flight_registration)


@router.get("/register-flight", response_model=List[FlightRegistrationRead])
async def get_all_flight_registrations(
    service: FlightRegistrationService = Depends(get_flight_registration_service),
) -> List[FlightRegistrationRead]:
    return await service.get_all_flight_registrations()


@router.get("/register-flight/{flight_id}", response_model=FlightRegistrationRead)
async def get_flight_registration(
    flight_id: FlightId,
    service: FlightRegistrationService = Depends(get_flight_registration_service),
) -> FlightRegistrationRead:
    """Retrieve a single registration.  Raises 404 if it does not exist."""
    registration = await service.get_flight_registration(flight_id)
    if registration is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Flight registration not found",
        )
    return registration


@router.put("/register-flight/{flight_id}", response_model=FlightRegistrationRead)
async def update_flight_registration(
    flight_id: FlightId,
    flight_registration: FlightRegistrationCreate,
    service: FlightRegistrationService = Depends(get_flight_registration_service),
) -> FlightRegistrationRead:
    """Replace every field of registration ``flight_id``.

    The id in the path wins over any id in the body.  If no
    registration with that id exists a new one is created and returned
    under its own, newly assigned id.
    """
    return await service.update_flight_registration(flight_id, flight_registration)


@router.delete("/register-flight/{flight_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_flight_registration(
    flight_id: FlightId,
    service: FlightRegistrationService = Depends(get_flight_registration_service),
) -> None:
    """Delete a registration.  Unknown ids also return 204."""
    await service.delete_flight_registration(flight_id)
    return None
