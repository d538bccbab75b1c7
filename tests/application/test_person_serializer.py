from datetime import date

from parking_pass.common.results import PeopleErrorCodes, ResultHandler
from parking_pass.core.application.errors.application_errors import (
    ApplicationPeopleErrors,
)
from parking_pass.core.application.serializers.person_serializer import (
    PersonSerializer,
)
from parking_pass.core.domain.entities.person_entity import PersonEntity


class TestFromRaw:
    def test_iso_date_string(self):
        result = PersonSerializer.from_raw(
            {
                "name": "Alice Smith",
                "date_of_birth": "2000-01-01",
                "email_address": "alice@example.com",
            }
        )

        assert ResultHandler.is_success(result)
        assert result.value.date_of_birth == date(2000, 1, 1)

    def test_date_object(self, alice_data):
        result = PersonSerializer.from_raw(alice_data)

        assert ResultHandler.is_success(result)
        assert result.value.email_address == "alice@example.com"

    def test_pass_flag_in_input_is_ignored(self, alice_data):
        result = PersonSerializer.from_raw({**alice_data, "has_parking_pass": True})

        assert result.value.has_parking_pass is False

    def test_missing_key(self):
        result = PersonSerializer.from_raw({"name": "Alice"})

        assert ResultHandler.is_error(result)
        assert isinstance(
            result.error, ApplicationPeopleErrors.InvalidPersonRawEntityError
        )
        assert result.error.code == PeopleErrorCodes.INVALID_PERSON_RAW_ENTITY

    def test_unparseable_date(self, alice_data):
        result = PersonSerializer.from_raw({**alice_data, "date_of_birth": "01/01/2000"})

        assert isinstance(
            result.error, ApplicationPeopleErrors.InvalidPersonRawEntityError
        )

    def test_invalid_person_data(self, alice_data):
        result = PersonSerializer.from_raw({**alice_data, "name": "  "})

        assert isinstance(result.error, ApplicationPeopleErrors.InvalidPersonDataError)
        assert result.error.field == "name"


def test_to_raw(alice_data):
    person = PersonEntity(**alice_data)
    person.purchase_parking_pass()

    assert PersonSerializer.to_raw(person) == {
        "name": "Alice Smith",
        "date_of_birth": "2000-01-01",
        "email_address": "alice@example.com",
        "has_parking_pass": True,
    }


class TestFieldsFromRaw:
    def test_returns_constructor_arguments_without_validating_values(self):
        result = PersonSerializer.fields_from_raw(
            {"name": "  ", "date_of_birth": "2000-01-01", "email_address": "nope"}
        )

        assert ResultHandler.is_success(result)
        assert result.value == ("  ", date(2000, 1, 1), "nope")

    def test_missing_key(self):
        result = PersonSerializer.fields_from_raw(
            {"name": "Alice", "date_of_birth": "2000-01-01"}
        )

        assert isinstance(
            result.error, ApplicationPeopleErrors.InvalidPersonRawEntityError
        )
