"""Field validators that accumulate failures instead of raising."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Protocol, Tuple

from .types import EntryType, SortDirection

ISO_LOCAL_DATE_TIME = re.compile(
    r"^(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})(?:\.(\d{1,9}))?$",
    re.ASCII,
)

EMPLOYEE_NOT_INFORMED = "Employee not informed."
EMPLOYEE_NOT_FOUND = "Employee not found."
INVALID_TIMESTAMP = "Entry date is not in ISO_LOCAL_DATE_TIME format"


class EmployeeLookup(Protocol):  # pragma: no cover - interface only
    def find_by_id(self, employee_id: str): ...


@dataclass
class ValidationErrors:
    """Ordered list of (field, message) pairs shared across validators."""

    items: List[Tuple[str, str]] = field(default_factory=list)

    def add(self, field_name: str, message: str) -> None:
        self.items.append((field_name, message))

    @property
    def has_errors(self) -> bool:
        return bool(self.items)

    @property
    def messages(self) -> List[str]:
        return [message for _, message in self.items]


def parse_local_datetime(value: Optional[str]) -> datetime:
    """Parse ``YYYY-MM-DDTHH:MM:SS[.fraction]`` into a naive datetime.

    Fractions longer than microsecond precision are truncated. Raises
    ``ValueError`` for anything else, including strings with offsets.
    """

    if not isinstance(value, str):
        raise ValueError("timestamp must be a string")
    match = ISO_LOCAL_DATE_TIME.fullmatch(value)
    if match is None:
        raise ValueError(f"'{value}' is not an ISO local date-time")
    year, month, day, hour, minute, second, fraction = match.groups()
    microsecond = int((fraction or "0")[:6].ljust(6, "0"))
    return datetime(
        int(year),
        int(month),
        int(day),
        int(hour),
        int(minute),
        int(second),
        microsecond,
    )


def validate_employee(
    employee_id: Optional[str],
    employees: EmployeeLookup,
    errors: ValidationErrors,
) -> None:
    if employee_id is None or not employee_id.strip():
        errors.add("funcionario", EMPLOYEE_NOT_INFORMED)
        return
    if employees.find_by_id(employee_id) is None:
        errors.add("funcionario", EMPLOYEE_NOT_FOUND)


def validate_entry_type(value: Optional[str], errors: ValidationErrors) -> None:
    if value not in EntryType.names():
        errors.add(
            "lancamento",
            "Entry type does not exist. Supported types: "
            + ", ".join(EntryType.names()),
        )


def validate_timestamp(value: Optional[str], errors: ValidationErrors) -> None:
    try:
        parse_local_datetime(value)
    except ValueError:
        errors.add("lancamento", INVALID_TIMESTAMP)


def validate_sort_direction(value: str) -> Optional[str]:
    """Return an error message when ``value`` is not a sort direction."""

    if value in SortDirection.names():
        return None
    return "Unsupported direction type. Supported types: " + ", ".join(
        SortDirection.names()
    )
