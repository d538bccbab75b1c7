"""
Use cases for person registration and parking pass purchases.

Each use case class follows the Command pattern: dependencies (event bus and
logger) are injected on construction and the work happens in `execute`, which
returns a `Result` and publishes an event describing the outcome.
"""

import logging
from typing import Any

from parking_pass.common.results import Result, ResultHandler
from parking_pass.common.utility import LoggerMixin
from parking_pass.core.application.errors.application_errors import (
    ApplicationPeopleErrors,
)
from parking_pass.core.application.events.event_bus import EventBus
from parking_pass.core.application.events.people_events import (
    ParkingPassPurchasedEvent,
    ParkingPassPurchaseRejectedEvent,
    PersonRegisteredEvent,
    PersonRegistrationFailedEvent,
)
from parking_pass.core.domain.entities.person_entity import PersonEntity
from parking_pass.core.domain.errors import InvalidPersonArgumentError


class RegisterPerson(LoggerMixin):
    """
    Use case for creating a validated person.

    Args:
        event_bus (EventBus): Event bus for publishing domain events.
        logger (logging.Logger): Logger instance for logging operations.
    """

    _event_bus: EventBus

    def __init__(
        self,
        *,
        event_bus: EventBus,
        logger: logging.Logger,
    ) -> None:
        self._event_bus = event_bus
        self._build_logger(logger=logger)

    def execute(
        self, name: Any, date_of_birth: Any, email_address: Any
    ) -> Result[PersonEntity, ApplicationPeopleErrors.InvalidPersonDataError]:
        """
        Execute the use case to create a person.

        Args:
            name (str): The person's name.
            date_of_birth (date): The person's date of birth.
            email_address (str): The person's email address.

        Returns:
            Result[PersonEntity, ApplicationPeopleErrors.InvalidPersonDataError]:
                Result containing the new person or the validation error.
        """
        self._logger.debug(f"Executing RegisterPerson with email: {email_address}")

        try:
            person = PersonEntity(name, date_of_birth, email_address)
        except InvalidPersonArgumentError as e:
            error = ApplicationPeopleErrors.InvalidPersonDataError(e.field, e.message)
            self._logger.warning(
                "Person registration rejected.\n\tField: %s\n\tReason: %s",
                e.field,
                e.message,
            )
            self._event_bus.publish(PersonRegistrationFailedEvent(error=error))
            return ResultHandler.fail(error)

        self._logger.info(f"Person registered: {person}")
        self._event_bus.publish(PersonRegisteredEvent(person=person))

        return ResultHandler.ok(person)


class PurchaseParkingPass(LoggerMixin):
    """
    Use case for buying the single parking pass a person is entitled to.

    Args:
        event_bus (EventBus): Event bus for publishing domain events.
        logger (logging.Logger): Logger instance for logging operations.
    """

    _event_bus: EventBus

    def __init__(
        self,
        *,
        event_bus: EventBus,
        logger: logging.Logger,
    ) -> None:
        self._event_bus = event_bus
        self._build_logger(logger=logger)

    def execute(
        self, person: PersonEntity
    ) -> Result[PersonEntity, ApplicationPeopleErrors.ParkingPassAlreadyPurchasedError]:
        """
        Execute the use case to purchase a parking pass.

        Args:
            person (PersonEntity): The buyer.

        Returns:
            Result[PersonEntity, ApplicationPeopleErrors.ParkingPassAlreadyPurchasedError]:
                The same person, now holding a pass, or the rejection error.
        """
        self._logger.debug(
            f"Executing PurchaseParkingPass for email: {person.email_address}"
        )

        if not person.purchase_parking_pass():
            error = ApplicationPeopleErrors.ParkingPassAlreadyPurchasedError(
                person.email_address
            )
            self._logger.warning(error.details)
            self._event_bus.publish(
                ParkingPassPurchaseRejectedEvent(person=person, error=error)
            )
            return ResultHandler.fail(error)

        self._logger.info(f"Parking pass purchased for {person.email_address}")
        self._event_bus.publish(ParkingPassPurchasedEvent(person=person))

        return ResultHandler.ok(person)
