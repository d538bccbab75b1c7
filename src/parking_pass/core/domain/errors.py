"""
Domain-level exceptions raised by entities when an invariant is violated.
"""


class InvalidPersonArgumentError(ValueError):
    """
    Raised when a person cannot be constructed from the given arguments.

    Attributes:
        field (str): Name of the offending field.
        message (str): Human-readable reason.
    """

    field: str
    message: str

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message
