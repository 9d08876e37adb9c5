from typing import Iterable, Optional

from .types import EntryId
from .validation import FieldError


class ValidationError(Exception):
    def __init__(self, errors: Iterable[FieldError], message: Optional[str] = None):
        self.errors = list(errors)
        if message is None:
            details = ", ".join([f"{e.field.value} {e.message}" for e in self.errors])
            message = f"Invalid timesheet entry: {details}"
        self.message = message

    def __str__(self) -> str:
        return self.message

    @property
    def fields(self) -> list[str]:
        return [e.field.value for e in self.errors]


class NotFound(Exception):
    def __init__(self, entry_id: EntryId, message: Optional[str] = None):
        self.entry_id = entry_id
        if message is None:
            message = f"No timesheet entry found with id {self.entry_id}"
        self.message = message

    def __str__(self) -> str:
        return self.message


class StorageFailure(Exception):
    def __init__(
        self,
        operation: str,
        cause: Optional[Exception] = None,
        message: Optional[str] = None,
    ):
        self.operation = operation
        self.cause = cause
        if message is None:
            message = f"Storage failure during {self.operation}"
            if cause is not None:
                message += f": {cause}"
        self.message = message

    def __str__(self) -> str:
        return self.message
