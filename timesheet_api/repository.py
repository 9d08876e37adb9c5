import logging
from functools import wraps
from typing import Callable, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from .db import DB
from .exceptions import StorageFailure
from .models import TimesheetEntry, TimesheetEntryRow, from_row, to_row
from .types import EntryId


def storage_call(func: Callable) -> Callable:
    """roll back and re-raise any database error as StorageFailure"""

    @wraps(func)
    def inner(self: "TimesheetEntryRepository", *args, **kwargs):
        try:
            return func(self, *args, **kwargs)
        except StorageFailure:
            raise
        except SQLAlchemyError as e:
            self.db.session.rollback()
            raise StorageFailure(func.__name__, e) from e

    return inner


class TimesheetEntryRepository:
    """identifier-keyed CRUD over the timesheet_entry table"""

    def __init__(self, db: DB) -> None:
        self.db = db

    @storage_call
    def find_all(self) -> list[TimesheetEntry]:
        rows = self.db.session.execute(select(TimesheetEntryRow)).scalars().all()
        return [from_row(r) for r in rows]

    @storage_call
    def find_by_id(self, entry_id: EntryId) -> Optional[TimesheetEntry]:
        row: Optional[TimesheetEntryRow] = self.db.session.get(TimesheetEntryRow, entry_id)
        if row is None:
            return None
        return from_row(row)

    @storage_call
    def exists_by_id(self, entry_id: EntryId) -> bool:
        return self.db.session.get(TimesheetEntryRow, entry_id) is not None

    @storage_call
    def save(self, entry: TimesheetEntry) -> TimesheetEntry:
        if entry.id is None:
            row = to_row(entry)
            self.db.session.add(row)
        else:
            row = self.db.session.merge(to_row(entry))
        self.db.try_commit()
        logging.debug(f"saved {row!r}")
        return from_row(row)

    @storage_call
    def delete_by_id(self, entry_id: EntryId) -> None:
        row = self.db.session.get(TimesheetEntryRow, entry_id)
        if row is None:
            return
        self.db.session.delete(row)
        self.db.try_commit()
