"""
Serializers for converting raw person input (for example submitted form data)
into domain entities and back into plain dictionaries.

Conversion failures are reported through `Result` values instead of exceptions.
"""

from datetime import date
from typing import Any, Dict, Tuple, Union

from parking_pass.common.results import Result, ResultHandler
from parking_pass.core.application.errors.application_errors import (
    ApplicationPeopleErrors,
)
from parking_pass.core.domain.entities.person_entity import PersonEntity
from parking_pass.core.domain.errors import InvalidPersonArgumentError

REQUIRED_FIELDS = ("name", "date_of_birth", "email_address")


class PersonSerializer:
    """
    Serializer class for converting raw person dictionaries to PersonEntity objects and back.
    """

    @staticmethod
    def to_raw(person: PersonEntity) -> Dict[str, Any]:
        """
        Converts a PersonEntity object to a raw dictionary with an ISO formatted date of birth.

        Args:
            person (PersonEntity): The person entity to convert.

        Returns:
            Dict[str, Any]: A dictionary representation of the person entity.
        """
        return {
            "name": person.name,
            "date_of_birth": person.date_of_birth.isoformat(),
            "email_address": person.email_address,
            "has_parking_pass": person.has_parking_pass,
        }

    @staticmethod
    def fields_from_raw(
        raw_person: Dict[str, Any],
    ) -> Result[
        Tuple[Any, Any, Any], ApplicationPeopleErrors.InvalidPersonRawEntityError
    ]:
        """
        Extracts the constructor arguments of a person from a raw dictionary.

        Only the shape of the input is checked here: the keys must be present and
        a string `date_of_birth` must be ISO formatted (YYYY-MM-DD). The values
        themselves are validated by PersonEntity.

        Args:
            raw_person (Dict[str, Any]): The raw person data.
        Returns:
            Result[Tuple[Any, Any, Any], InvalidPersonRawEntityError]:
                Success with (name, date_of_birth, email_address) or failure with
                InvalidPersonRawEntityError.
        """
        for field in REQUIRED_FIELDS:
            if field not in raw_person:
                return ResultHandler.fail(
                    ApplicationPeopleErrors.InvalidPersonRawEntityError(raw_person)
                )

        date_of_birth = raw_person["date_of_birth"]

        if isinstance(date_of_birth, str):
            try:
                date_of_birth = date.fromisoformat(date_of_birth)
            except ValueError:
                return ResultHandler.fail(
                    ApplicationPeopleErrors.InvalidPersonRawEntityError(raw_person)
                )

        return ResultHandler.ok(
            (raw_person["name"], date_of_birth, raw_person["email_address"])
        )

    @staticmethod
    def from_raw(
        raw_person: Dict[str, Any],
    ) -> Result[
        PersonEntity,
        Union[
            ApplicationPeopleErrors.InvalidPersonRawEntityError,
            ApplicationPeopleErrors.InvalidPersonDataError,
        ],
    ]:
        """
        Converts a raw person dictionary to a PersonEntity object.

        Any `has_parking_pass` key is ignored: a new person never holds a pass.

        Args:
            raw_person (Dict[str, Any]): The raw person data.
        Returns:
            Result[PersonEntity, InvalidPersonRawEntityError | InvalidPersonDataError]:
                Success with PersonEntity, InvalidPersonRawEntityError when keys are
                missing or the date cannot be parsed, or InvalidPersonDataError when
                the values break a person invariant.
        """
        fields = PersonSerializer.fields_from_raw(raw_person)

        if fields.success == False:
            return fields

        try:
            person = PersonEntity(*fields.value)
        except InvalidPersonArgumentError as e:
            return ResultHandler.fail(
                ApplicationPeopleErrors.InvalidPersonDataError(e.field, e.message)
            )

        return ResultHandler.ok(person)
