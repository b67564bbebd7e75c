"""Employee domain package."""

from .repository import (
    EmployeeRepository,
    InMemoryEmployeeRepository,
    PostgresEmployeeRepository,
    build_employee_repository,
)
from .service import EmployeeService
from .types import Employee, Profile

__all__ = [
    "Employee",
    "EmployeeRepository",
    "EmployeeService",
    "InMemoryEmployeeRepository",
    "PostgresEmployeeRepository",
    "Profile",
    "build_employee_repository",
]
