"""Application error types mapped to HTTP responses in main."""

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class FieldError:
    """A single rejected field."""
    field: str
    message: str

    def as_dict(self) -> dict:
        return {"field": self.field, "message": self.message}


class ValidationError(Exception):
    """The payload broke one or more field rules. Nothing was stored."""

    def __init__(self, errors: List[FieldError]) -> None:
        super().__init__(f"{len(errors)} field(s) failed validation")
        self.errors = errors


class StorageError(Exception):
    """The store could not be reached or rejected the read/write.

    ``public_message`` is what the client sees; the cause stays in the logs.
    """

    def __init__(self, public_message: str) -> None:
        super().__init__(public_message)
        self.public_message = public_message
