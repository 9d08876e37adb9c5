from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .models import TimesheetEntry


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class EntryPayload(CamelModel):
    """request body for create and update, constraints are checked by validate_entry"""

    id: Optional[int] = None
    employee_name: Optional[str] = None
    project: Optional[str] = None
    work_date: Optional[date] = None
    # null hours means 0, bools and fractions are rejected
    hours: Optional[int] = Field(default=0, strict=True)
    notes: Optional[str] = None

    def to_entry(self) -> TimesheetEntry:
        return TimesheetEntry(
            id=self.id,
            employee_name=self.employee_name,
            project=self.project,
            work_date=self.work_date,
            hours=self.hours if self.hours is not None else 0,
            notes=self.notes,
        )


class EntryResponse(CamelModel):
    id: int
    employee_name: str
    project: str
    work_date: date
    hours: int
    notes: Optional[str] = None

    @classmethod
    def from_entry(cls, entry: TimesheetEntry) -> "EntryResponse":
        return cls(
            id=entry.id,
            employee_name=entry.employee_name,
            project=entry.project,
            work_date=entry.work_date,
            hours=entry.hours,
            notes=entry.notes,
        )


class FieldErrorResponse(BaseModel):
    field: str
    message: str


class ErrorResponse(BaseModel):
    detail: str
    errors: list[FieldErrorResponse] = []
