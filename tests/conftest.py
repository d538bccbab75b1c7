import logging
from datetime import date

import pytest

from parking_pass.core.application.events.event_bus import EventBus


@pytest.fixture
def logger():
    return logging.getLogger("tests.parking_pass")


@pytest.fixture
def event_bus(logger):
    return EventBus(logger=logger)


@pytest.fixture
def alice_data():
    return {
        "name": "Alice Smith",
        "date_of_birth": date(2000, 1, 1),
        "email_address": "alice@example.com",
    }
