"""
Pydantic models for flight registrations.

The JSON representation uses camelCase names (``flightName``,
``maxAltitude``...) while the Python attributes and table columns use
snake_case.  Both spellings are accepted on input.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class FlightRegistrationBase(BaseModel):
    flight_name: str = Field(..., alias="flightName", examples=["Apollo-X"])
    starting_latitude: float = Field(..., alias="startingLatitude", examples=[28.5])
    starting_longitude: float = Field(..., alias="startingLongitude", examples=[-80.6])
    ending_latitude: float = Field(..., alias="endingLatitude", examples=[28.5])
    ending_longitude: float = Field(..., alias="endingLongitude", examples=[-80.6])
    launch_date_and_time: datetime = Field(
        ..., alias="launchDateAndTime", examples=["2025-01-01T00:00:00"]
    )
    landing_date_and_time: datetime = Field(
        ..., alias="landingDateAndTime", examples=["2025-01-01T00:10:00"]
    )
    max_altitude: float = Field(..., alias="maxAltitude", examples=[400000.0])
    model_of_space_craft: str = Field(..., alias="modelOfSpaceCraft", examples=["Falcon"])

    # NaN and Infinity are valid JSON to the parser but cannot be stored
    # or serialized back, so they are rejected as validation errors.
    model_config = {
        "populate_by_name": True,
        "allow_inf_nan": False,
    }


class FlightRegistrationCreate(FlightRegistrationBase):
    """Request body for registering or replacing a flight.

    Any ``id`` sent by the client is ignored; identities come from the
    database on create and from the URL path on update.
    """
    pass


class FlightRegistrationRead(FlightRegistrationBase):
    """A stored flight registration as returned by the API."""

    id: int

    model_config = {
        "populate_by_name": True,
        "allow_inf_nan": False,
        "from_attributes": True,
    }
