import dataclasses
import logging
from functools import wraps
from typing import Callable

from .config import Config
from .constants import ROW_HEADER
from .db import DB
from .exceptions import NotFound, ValidationError
from .models import TimesheetEntry
from .repository import TimesheetEntryRepository
from .types import EntryId
from .validation import validate_entry

# exported objects
db: DB = DB()
config: Config = Config()


def ensure_db(db: DB) -> Callable:
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def inner(*args, **kwargs):
            db._validate_conn()
            db._ensure_db()
            return func(*args, **kwargs)

        return inner

    return decorator


def check_entry(candidate: TimesheetEntry) -> None:
    errors = validate_entry(candidate)
    if errors:
        raise ValidationError(errors)


# operations


def list_entries(repo: TimesheetEntryRepository) -> list[TimesheetEntry]:
    entries = repo.find_all()
    logging.debug(f"found {len(entries)} timesheet entries")
    return entries


def create_entry(repo: TimesheetEntryRepository, candidate: TimesheetEntry) -> TimesheetEntry:
    check_entry(candidate)
    # ids are always assigned by storage
    new_entry = repo.save(dataclasses.replace(candidate, id=None))
    logging.info(f"Created timesheet entry {new_entry.id} for {new_entry.employee_name}")
    return new_entry


def update_entry(
    repo: TimesheetEntryRepository, entry_id: EntryId, candidate: TimesheetEntry
) -> TimesheetEntry:
    """
    Replace every field of an existing entry except its id.

    Fields missing from the candidate are not merged from the stored entry, they overwrite
    it with whatever the candidate holds.
    """
    existing = repo.find_by_id(entry_id)
    if existing is None:
        raise NotFound(entry_id)
    check_entry(candidate)
    updated = repo.save(dataclasses.replace(candidate, id=existing.id))
    logging.info(f"Updated timesheet entry {updated.id}")
    return updated


def delete_entry(repo: TimesheetEntryRepository, entry_id: EntryId) -> None:
    if not repo.exists_by_id(entry_id):
        raise NotFound(entry_id)
    repo.delete_by_id(entry_id)
    logging.info(f"Deleted timesheet entry {entry_id}")


# cli helpers, bound to the exported db


def get_repository() -> TimesheetEntryRepository:
    return TimesheetEntryRepository(db)


@ensure_db(db)
def init_db() -> None:
    logging.info(f"Database ready at {db.engine_url}")


@ensure_db(db)
def print_entries() -> int:
    entries = list_entries(get_repository())
    print(ROW_HEADER)
    for entry in entries:
        print(entry)
    return len(entries)


@ensure_db(db)
def add_entry(candidate: TimesheetEntry) -> TimesheetEntry:
    return create_entry(get_repository(), candidate)


@ensure_db(db)
def edit_entry(entry_id: EntryId, candidate: TimesheetEntry) -> TimesheetEntry:
    return update_entry(get_repository(), entry_id, candidate)


@ensure_db(db)
def remove_entry(entry_id: EntryId) -> None:
    delete_entry(get_repository(), entry_id)
