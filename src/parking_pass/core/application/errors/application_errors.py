"""
Application Errors for People Operations
=======================================

This module defines application-level error classes returned inside `Result`
values by the parking pass use cases. Unlike domain exceptions, these are
never raised: callers inspect them through `ResultHandler`.
"""

from abc import ABC
from typing import Any, Dict, Generic, TypeVar

from parking_pass.common.results import BaseError, PeopleErrorCodes

PeopleErrorCode = TypeVar("PeopleErrorCode", bound=PeopleErrorCodes)


class ApplicationPeopleErrors:
    class PersonError(Generic[PeopleErrorCode], BaseError[str, PeopleErrorCode], ABC):
        """Base class for errors related to people operations."""

    class InvalidPersonDataError(PersonError[PeopleErrorCodes.INVALID_PERSON_DATA]):
        """Error returned when a person cannot be built from the provided data."""

        code = PeopleErrorCodes.INVALID_PERSON_DATA
        details: str
        field: str

        def __init__(self, field: str, message: str) -> None:
            self.field = field
            self.details = message

    class ParkingPassAlreadyPurchasedError(
        PersonError[PeopleErrorCodes.PARKING_PASS_ALREADY_PURCHASED]
    ):
        """Error returned when a person tries to buy a second parking pass."""

        code = PeopleErrorCodes.PARKING_PASS_ALREADY_PURCHASED
        details: str

        def __init__(self, email_address: str) -> None:
            self.details = (
                f"Person with email {email_address} already has a parking pass."
            )

    class InvalidPersonRawEntityError(
        PersonError[PeopleErrorCodes.INVALID_PERSON_RAW_ENTITY]
    ):
        """Error returned when raw person input is missing keys or has malformed values."""

        code = PeopleErrorCodes.INVALID_PERSON_RAW_ENTITY
        details: str

        def __init__(self, entity: Dict[str, Any]) -> None:
            self.details = f"Invalid person raw entity format: {entity}"
