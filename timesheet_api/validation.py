from typing import NamedTuple

from .constants import MAX_HOURS, MIN_HOURS, NOTES_MAX_LENGTH
from .enums import EntryField
from .models import TimesheetEntry


class FieldError(NamedTuple):
    field: EntryField
    message: str


def is_blank(value) -> bool:
    return value is None or not str(value).strip()


def validate_entry(entry: TimesheetEntry) -> list[FieldError]:
    """
    Check a candidate entry against the field constraints.

    Returns one FieldError per violated field, an empty list means the entry is valid.
    """
    errors: list[FieldError] = []
    if is_blank(entry.employee_name):
        errors.append(FieldError(EntryField.employee_name, "must not be blank"))
    if is_blank(entry.project):
        errors.append(FieldError(EntryField.project, "must not be blank"))
    if entry.work_date is None:
        errors.append(FieldError(EntryField.work_date, "must not be null"))
    if entry.hours is None or not MIN_HOURS <= entry.hours <= MAX_HOURS:
        errors.append(
            FieldError(EntryField.hours, f"must be between {MIN_HOURS} and {MAX_HOURS}")
        )
    # absent notes are fine, only the length is constrained
    if entry.notes is not None and len(entry.notes) > NOTES_MAX_LENGTH:
        errors.append(
            FieldError(EntryField.notes, f"size must be between 0 and {NOTES_MAX_LENGTH}")
        )
    return errors
