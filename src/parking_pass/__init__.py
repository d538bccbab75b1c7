"""
parking_pass
============

This package provides the main entry point for the Parking Pass library: a
person entity that may buy exactly one parking pass, and a service that wraps
registration and purchase with logging and events.

Re-exports:
------------
- All public classes and functions from `parking_pass.lib.service`.
- `InvalidPersonArgumentError`, raised when a person is built from invalid data.

Usage:
------
Import from this package to access the Parking Pass API:

    from parking_pass import ParkingPassService, PersonEntity

See the documentation in `parking_pass.lib.service` for details on available classes and methods.
"""

from parking_pass.core.domain.errors import InvalidPersonArgumentError
from parking_pass.lib.service import *
