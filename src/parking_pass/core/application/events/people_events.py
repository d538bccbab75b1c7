"""
Events related to person registration and parking pass purchases.
"""

from dataclasses import dataclass

from parking_pass.core.application.errors.application_errors import (
    ApplicationPeopleErrors,
)
from parking_pass.core.application.events.base_event import BaseEvent
from parking_pass.core.domain.entities.person_entity import PersonEntity


@dataclass(init=True, kw_only=True, frozen=True)
class PersonRegisteredEvent(BaseEvent):
    """
    Event triggered when a person is successfully created.

    Attributes:
        person (PersonEntity): The new person entity.
    """

    person: PersonEntity


@dataclass(init=True, kw_only=True, frozen=True)
class PersonRegistrationFailedEvent(BaseEvent):
    """
    Event triggered when person data fails validation.

    Attributes:
        error (ApplicationPeopleErrors.InvalidPersonDataError): The validation error.
    """

    error: ApplicationPeopleErrors.InvalidPersonDataError


@dataclass(init=True, kw_only=True, frozen=True)
class ParkingPassPurchasedEvent(BaseEvent):
    """
    Event triggered when a person buys their parking pass.

    Attributes:
        person (PersonEntity): The person who now holds a pass.
    """

    person: PersonEntity


@dataclass(init=True, kw_only=True, frozen=True)
class ParkingPassPurchaseRejectedEvent(BaseEvent):
    """
    Event triggered when a purchase is rejected because a pass is already owned.

    Attributes:
        person (PersonEntity): The person who attempted the purchase.
        error (ApplicationPeopleErrors.ParkingPassAlreadyPurchasedError): The rejection reason.
    """

    person: PersonEntity
    error: ApplicationPeopleErrors.ParkingPassAlreadyPurchasedError
