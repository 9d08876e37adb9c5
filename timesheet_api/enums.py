from enum import Enum, auto
from typing import Any

# enums for nicer type checking of parameters and such


class NamedEnum(str, Enum):
    @staticmethod
    def _generate_next_value_(name: str, start: int, count: int, last_values: list[Any]) -> str:
        return name


class ConfigFormat(NamedEnum):
    json = auto()
    yaml = auto()
    yml = "yaml"
    toml = auto()


class HttpMethod(NamedEnum):
    GET = auto()
    POST = auto()
    PUT = auto()
    DELETE = auto()


class EntryField(NamedEnum):
    employee_name = auto()
    project = auto()
    work_date = auto()
    hours = auto()
    notes = auto()
