"""Employee lookups consumed by entry validation."""

from __future__ import annotations

from typing import Optional

from .repository import EmployeeRepository, InMemoryEmployeeRepository
from .types import Employee


class EmployeeService:
    def __init__(self, *, repository: EmployeeRepository | None = None) -> None:
        self._repository = repository or InMemoryEmployeeRepository()

    def find_by_id(self, employee_id: str) -> Optional[Employee]:
        return self._repository.get(employee_id)
