from dataclasses import dataclass
from typing import Optional

from sqlalchemy import Column, Date, Integer, MetaData, String
from sqlalchemy.orm import declarative_base

from .constants import NAME_MAX_LENGTH, NOTES_MAX_LENGTH
from .types import EntryId, OptionalDate, OptionalStr

md: MetaData = MetaData()
Base = declarative_base(metadata=md)


class TimesheetEntryRow(Base):
    __tablename__ = "timesheet_entry"

    id = Column(Integer, primary_key=True, autoincrement=True)
    employee_name = Column(String(NAME_MAX_LENGTH), nullable=False)
    project = Column(String(NAME_MAX_LENGTH), nullable=False)
    work_date = Column(Date, nullable=False, index=True)
    hours = Column(Integer, nullable=False, default=0)
    notes = Column(String(NOTES_MAX_LENGTH), nullable=True)

    def __repr__(self) -> str:
        return (
            f"<TimesheetEntryRow id={self.id} employee_name={self.employee_name} "
            f"project={self.project} work_date={self.work_date} hours={self.hours}>"
        )


@dataclass
class TimesheetEntry:
    """
    one work-log record

    employee_name, project and work_date are Optional so incomplete candidates can be
    represented and rejected by validation, stored entries always have them
    """

    employee_name: OptionalStr
    project: OptionalStr
    work_date: OptionalDate
    hours: int = 0
    notes: OptionalStr = None
    id: Optional[EntryId] = None

    def __str__(self) -> str:
        notes = self.notes or ""
        return (
            f"{str(self.id): <6}\t{str(self.work_date): <10}\t{self.hours: <5}\t"
            f"{self.employee_name: <20}\t{self.project: <20}\t{notes}"
        )


def to_row(entry: TimesheetEntry, row: Optional[TimesheetEntryRow] = None) -> TimesheetEntryRow:
    """copy entry fields onto row, creating a new row if none is given"""
    if row is None:
        row = TimesheetEntryRow()
    if entry.id is not None:
        row.id = entry.id
    row.employee_name = entry.employee_name
    row.project = entry.project
    row.work_date = entry.work_date
    row.hours = entry.hours
    row.notes = entry.notes
    return row


def from_row(row: TimesheetEntryRow) -> TimesheetEntry:
    return TimesheetEntry(
        id=row.id,
        employee_name=row.employee_name,
        project=row.project,
        work_date=row.work_date,
        hours=row.hours,
        notes=row.notes,
    )
