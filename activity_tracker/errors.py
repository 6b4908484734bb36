"""Domain errors raised by the service handlers.

The HTTP layer maps them to status codes in ``main.py``; malformed input
never reaches a handler because the pydantic schemas reject it first.
"""


class TrackerError(Exception):
    """Base class for errors a caller can act on."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(TrackerError):
    """A referenced id does not resolve to a row."""

    status_code = 404

    @classmethod
    def for_entity(cls, entity: str, entity_id: int) -> "NotFoundError":
        return cls(f"{entity} with id {entity_id} not found")


class InvalidArgumentError(TrackerError):
    """Input is well-formed but not acceptable (self-dependency, taken email)."""

    status_code = 400
