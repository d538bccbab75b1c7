"""
Parking Pass Library
====================

This module provides the main entry point of the library: a service that
registers people and sells them their single parking pass, publishing an event
for every outcome.

Classes:
--------
- ParkingPassService: Facade over the registration and purchase use cases.

Usage:
------
- Instantiate `ParkingPassService` with `create` (builds the library logger)
  or directly with an existing logger.
- Register callbacks with `on_person_registered`, `on_parking_pass_purchased`
  and `on_parking_pass_rejected`.
- Call `register` / `register_from_raw` and `purchase`; all of them return a
  `Result` instead of raising.
"""

import logging
from datetime import date
from typing import Any, Callable, Dict, Union

from parking_pass.common.results import Result
from parking_pass.common.utility import LOGGER_NAME, LoggerMixin, build_logger
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
from parking_pass.core.application.serializers.person_serializer import (
    PersonSerializer,
)
from parking_pass.core.application.use_cases.people_use_cases import (
    PurchaseParkingPass,
    RegisterPerson,
)
from parking_pass.core.domain.entities.person_entity import PersonEntity


class ParkingPassService(LoggerMixin):
    """
    Service for registering people and selling parking passes.

    Not thread safe: callers sharing a person between threads must guard
    `purchase` themselves.

    Args:
        logger (logging.Logger): Logger instance for logging.
    """

    _event_bus: EventBus
    _register_person: RegisterPerson
    _purchase_parking_pass: PurchaseParkingPass

    def __init__(self, *, logger: logging.Logger) -> None:
        self._build_logger(logger=logger)
        self._event_bus = EventBus(logger=logger)
        self._register_person = RegisterPerson(event_bus=self._event_bus, logger=logger)
        self._purchase_parking_pass = PurchaseParkingPass(
            event_bus=self._event_bus, logger=logger
        )

    @classmethod
    def create(cls, *, log_level: int = logging.INFO) -> "ParkingPassService":
        """
        Create a service using the library's colored stream logger.

        Args:
            log_level (int, optional): Logging level. Defaults to logging.INFO.

        Returns:
            ParkingPassService: Initialized service instance.
        """
        return cls(logger=cls.build_logger(log_level=log_level))

    @staticmethod
    def build_logger(log_level: int = logging.INFO) -> logging.Logger:
        """
        Build and configure the "ParkingPass" logger used by `create`.

        Args:
            log_level (int, optional): Logging level. Defaults to logging.INFO.

        Returns:
            logging.Logger: Configured logger instance.
        """
        return build_logger(log_level=log_level, name=LOGGER_NAME)

    def get_logger(self) -> logging.Logger:
        """Get the logger instance used by the service."""
        return self._logger

    def register(
        self, name: str, date_of_birth: date, email_address: str
    ) -> Result[PersonEntity, ApplicationPeopleErrors.InvalidPersonDataError]:
        """
        Create a validated person.

        Returns:
            Result[PersonEntity, InvalidPersonDataError]: The person or the validation error.
        """
        return self._register_person.execute(name, date_of_birth, email_address)

    def register_from_raw(
        self, raw_person: Dict[str, Any]
    ) -> Result[
        PersonEntity,
        Union[
            ApplicationPeopleErrors.InvalidPersonRawEntityError,
            ApplicationPeopleErrors.InvalidPersonDataError,
        ],
    ]:
        """
        Create a person from raw input such as submitted form data.

        Malformed input (missing keys, unparseable date) is rejected before any
        use case runs and publishes no event. Well formed input goes through
        `register`, so validation and events are handled by RegisterPerson.

        Args:
            raw_person (Dict[str, Any]): Mapping with name, date_of_birth and email_address.
        """
        fields = PersonSerializer.fields_from_raw(raw_person)

        if fields.success == False:
            self._log(logging.WARNING, "Rejected raw person: %s", fields.error.details)
            return fields

        return self.register(*fields.value)

    def purchase(
        self, person: PersonEntity
    ) -> Result[PersonEntity, ApplicationPeopleErrors.ParkingPassAlreadyPurchasedError]:
        """
        Purchase the parking pass for a person.

        Returns:
            Result[PersonEntity, ParkingPassAlreadyPurchasedError]:
                The person on success, or the error if they already hold a pass.
        """
        return self._purchase_parking_pass.execute(person)

    def on_person_registered(
        self, callback: Callable[[PersonRegisteredEvent], None]
    ) -> None:
        """Register a callback for successful person registrations."""
        self._event_bus.subscribe(PersonRegisteredEvent, callback)

    def on_person_registration_failed(
        self, callback: Callable[[PersonRegistrationFailedEvent], None]
    ) -> None:
        """Register a callback for person data that fails validation."""
        self._event_bus.subscribe(PersonRegistrationFailedEvent, callback)

    def on_parking_pass_purchased(
        self, callback: Callable[[ParkingPassPurchasedEvent], None]
    ) -> None:
        """Register a callback for successful parking pass purchases."""
        self._event_bus.subscribe(ParkingPassPurchasedEvent, callback)

    def on_parking_pass_rejected(
        self, callback: Callable[[ParkingPassPurchaseRejectedEvent], None]
    ) -> None:
        """Register a callback for purchases rejected because a pass is already owned."""
        self._event_bus.subscribe(ParkingPassPurchaseRejectedEvent, callback)
