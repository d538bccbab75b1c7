import logging
from datetime import date, timedelta

import pytest

from parking_pass.common.results import PeopleErrorCodes, ResultHandler
from parking_pass.core.application.errors.application_errors import (
    ApplicationPeopleErrors,
)
from parking_pass.core.application.events.people_events import (
    ParkingPassPurchasedEvent,
    ParkingPassPurchaseRejectedEvent,
    PersonRegisteredEvent,
    PersonRegistrationFailedEvent,
)
from parking_pass.core.application.use_cases.people_use_cases import (
    PurchaseParkingPass,
    RegisterPerson,
)
from parking_pass.core.domain.entities.person_entity import PersonEntity


@pytest.fixture
def register_person(event_bus, logger):
    return RegisterPerson(event_bus=event_bus, logger=logger)


@pytest.fixture
def purchase_parking_pass(event_bus, logger):
    return PurchaseParkingPass(event_bus=event_bus, logger=logger)


class TestRegisterPerson:
    def test_success_publishes_registered_event(
        self, register_person, event_bus, alice_data, mocker
    ):
        handler = mocker.Mock()
        event_bus.subscribe(PersonRegisteredEvent, handler)

        result = register_person.execute(**alice_data)

        assert ResultHandler.is_success(result)
        assert isinstance(result.value, PersonEntity)
        assert result.value.name == "Alice Smith"
        handler.assert_called_once()
        assert handler.call_args.args[0].person is result.value

    def test_invalid_data_returns_error(
        self, register_person, event_bus, mocker
    ):
        handler = mocker.Mock()
        event_bus.subscribe(PersonRegistrationFailedEvent, handler)

        result = register_person.execute("Alice", date(2000, 1, 1), "no-at-symbol")

        assert ResultHandler.is_error(result)
        assert isinstance(result.error, ApplicationPeopleErrors.InvalidPersonDataError)
        assert result.error.code == PeopleErrorCodes.INVALID_PERSON_DATA
        assert result.error.field == "email_address"
        assert result.error.details == "Email address must contain @ symbol"
        handler.assert_called_once()
        assert handler.call_args.args[0].error is result.error

    def test_future_birth_date_is_logged(self, register_person, caplog):
        with caplog.at_level(logging.WARNING, logger="tests.parking_pass"):
            result = register_person.execute(
                "Alice", date.today() + timedelta(days=2), "a@b"
            )

        assert result.success is False
        assert result.error.field == "date_of_birth"
        assert "Person registration rejected" in caplog.text


class TestPurchaseParkingPass:
    def test_first_purchase(self, purchase_parking_pass, event_bus, alice_data, mocker):
        handler = mocker.Mock()
        event_bus.subscribe(ParkingPassPurchasedEvent, handler)
        person = PersonEntity(**alice_data)

        result = purchase_parking_pass.execute(person)

        assert ResultHandler.is_success(result)
        assert result.value is person
        assert person.has_parking_pass is True
        handler.assert_called_once()
        assert isinstance(handler.call_args.args[0], ParkingPassPurchasedEvent)

    def test_second_purchase_rejected(
        self, purchase_parking_pass, event_bus, alice_data, mocker
    ):
        purchased = mocker.Mock()
        rejected = mocker.Mock()
        event_bus.subscribe(ParkingPassPurchasedEvent, purchased)
        event_bus.subscribe(ParkingPassPurchaseRejectedEvent, rejected)
        person = PersonEntity(**alice_data)

        purchase_parking_pass.execute(person)
        result = purchase_parking_pass.execute(person)

        assert ResultHandler.is_error(result)
        assert isinstance(
            result.error, ApplicationPeopleErrors.ParkingPassAlreadyPurchasedError
        )
        assert result.error.code == PeopleErrorCodes.PARKING_PASS_ALREADY_PURCHASED
        assert "alice@example.com" in result.error.details
        assert person.has_parking_pass is True
        assert purchased.call_count == 1
        rejected.assert_called_once()
        event = rejected.call_args.args[0]
        assert event.person is person
        assert event.error is result.error
