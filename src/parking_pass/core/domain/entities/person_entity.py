"""
Defines the PersonEntity class, a person with immutable identity fields and a
one-time parking pass purchase flag.
"""

from dataclasses import FrozenInstanceError, dataclass, field
from datetime import date, datetime
from typing import Any

from parking_pass.core.domain.errors import InvalidPersonArgumentError

_IDENTITY_FIELDS = frozenset({"name", "date_of_birth", "email_address"})


def _today() -> date:
    return date.today()


def _validate_name(name: Any) -> None:
    if name is None:
        raise InvalidPersonArgumentError("name", "Name cannot be None")
    if not isinstance(name, str):
        raise InvalidPersonArgumentError("name", "Name must be a string")
    if not name.strip():
        raise InvalidPersonArgumentError(
            "name", "Name cannot be empty or contain only whitespace"
        )


def _validate_date_of_birth(date_of_birth: Any) -> None:
    if date_of_birth is None:
        raise InvalidPersonArgumentError("date_of_birth", "Date of birth cannot be None")
    # datetime subclasses date but does not compare with it
    if not isinstance(date_of_birth, date) or isinstance(date_of_birth, datetime):
        raise InvalidPersonArgumentError(
            "date_of_birth", "Date of birth must be a calendar date"
        )
    if date_of_birth > _today():
        raise InvalidPersonArgumentError(
            "date_of_birth", "Date of birth cannot be in the future"
        )


def _validate_email_address(email_address: Any) -> None:
    if email_address is None:
        raise InvalidPersonArgumentError(
            "email_address", "Email address cannot be None"
        )
    if not isinstance(email_address, str):
        raise InvalidPersonArgumentError(
            "email_address", "Email address must be a string"
        )
    if not email_address.strip():
        raise InvalidPersonArgumentError(
            "email_address",
            "Email address cannot be empty or contain only whitespace",
        )
    if "@" not in email_address:
        raise InvalidPersonArgumentError(
            "email_address", "Email address must contain @ symbol"
        )


@dataclass(eq=False, repr=False)
class PersonEntity:
    """
    Represents a person who may buy a single parking pass.

    The identity fields are validated once, when the entity is created, and
    cannot be reassigned afterwards. Values are stored exactly as given.

    Attributes:
        name (str): Full name. Must not be blank.
        date_of_birth (date): Date of birth. Must not be after today.
        email_address (str): Email address. Must not be blank and must contain "@".
        has_parking_pass (bool): Whether a pass was purchased. Starts as False.

    Raises:
        InvalidPersonArgumentError: If any identity field is invalid.
    """

    name: str
    date_of_birth: date
    email_address: str
    _has_parking_pass: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        _validate_name(self.name)
        _validate_date_of_birth(self.date_of_birth)
        _validate_email_address(self.email_address)

    def __setattr__(self, key: str, value: Any) -> None:
        if key in _IDENTITY_FIELDS and key in self.__dict__:
            raise FrozenInstanceError(f"cannot assign to field '{key}'")
        super().__setattr__(key, value)

    def __delattr__(self, key: str) -> None:
        if key in _IDENTITY_FIELDS:
            raise FrozenInstanceError(f"cannot delete field '{key}'")
        super().__delattr__(key)

    @property
    def has_parking_pass(self) -> bool:
        return self._has_parking_pass

    def purchase_parking_pass(self) -> bool:
        """
        Purchase a parking pass for this person.

        Returns:
            bool: True if the pass was purchased, False if the person already had one.
        """
        if self._has_parking_pass:
            return False
        self._has_parking_pass = True
        return True

    # get_* style accessor aliases.

    def get_name(self) -> str:
        return self.name

    def get_dob(self) -> date:
        return self.date_of_birth

    def get_email_address(self) -> str:
        return self.email_address

    def is_purchased_parking_pass(self) -> bool:
        return self._has_parking_pass

    def __str__(self) -> str:
        return (
            f"Person{{name='{self.name}', "
            f"dateOfBirth={self.date_of_birth.isoformat()}, "
            f"emailAddress='{self.email_address}', "
            f"hasParkingPass={str(self._has_parking_pass).lower()}}}"
        )

    __repr__ = __str__
