"""Read-only persistence adapters for employees."""

from __future__ import annotations

from threading import RLock
from typing import Any, Dict, Iterable, Mapping, Optional, Protocol

from sqlalchemy import MetaData, Table, select
from sqlalchemy.engine import Engine

from ...infra.db import get_engine
from ...infra.logging import get_logger
from .types import Employee, Profile

logger = get_logger(__name__)


class EmployeeRepository(Protocol):  # pragma: no cover - interface only
    def get(self, employee_id: str) -> Optional[Employee]: ...


class InMemoryEmployeeRepository(EmployeeRepository):
    def __init__(self, employees: Iterable[Employee] = ()) -> None:
        self._lock = RLock()
        self._store: Dict[str, Employee] = {
            employee.id: employee for employee in employees
        }

    def get(self, employee_id: str) -> Optional[Employee]:
        with self._lock:
            return self._store.get(employee_id)


class PostgresEmployeeRepository(EmployeeRepository):
    """SQLAlchemy-backed adapter over the ``funcionarios`` table."""

    def __init__(
        self,
        engine: Engine | None = None,
        *,
        table: Table | None = None,
    ) -> None:
        self._engine = engine or get_engine()
        if table is not None:
            self._employees = table
        else:
            self._employees = Table(
                "funcionarios", MetaData(), autoload_with=self._engine
            )

    def get(self, employee_id: str) -> Optional[Employee]:
        stmt = select(self._employees).where(self._employees.c.id == employee_id)
        with self._engine.begin() as conn:
            row = conn.execute(stmt).mappings().first()
        return self._row_to_employee(row) if row is not None else None

    @staticmethod
    def _row_to_employee(row: Mapping[str, Any]) -> Employee:
        return Employee(
            id=row["id"],
            name=row["nome"],
            email=row["email"],
            cpf=row["cpf"],
            profile=Profile(row["perfil"]),
            company_id=row.get("empresa_id"),
        )


def build_employee_repository(
    backend: str = "postgres",
    *,
    seed_employees: Iterable[Mapping[str, Any]] = (),
) -> EmployeeRepository:
    """Return the configured adapter.

    ``seed_employees`` populates the ``memory`` backend; the PostgreSQL
    adapter reads the ``funcionarios`` table and ignores it.
    """

    if backend == "postgres":
        return PostgresEmployeeRepository()
    employees = [Employee.from_mapping(item) for item in seed_employees]
    logger.info("memory_employee_repository_seeded", extra={"count": len(employees)})
    return InMemoryEmployeeRepository(employees)
