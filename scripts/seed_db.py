"""Seed script for the funcionarios and lancamentos tables.

Creates an admin, a regular employee and a day of punches so local API
calls have data to read.
"""

from __future__ import annotations

from datetime import date, datetime, time
from typing import List

from sqlalchemy import MetaData, Table, create_engine
from sqlalchemy.dialects.postgresql import insert as pg_insert

from backend.ponto.config import load_settings
from backend.ponto.domain.employees import Profile
from backend.ponto.domain.timeclock import EntryType

ADMIN_ID = "00000000-0000-0000-0000-0000000000a1"
EMPLOYEE_ID = "00000000-0000-0000-0000-0000000000e1"


def build_seed_employees() -> List[dict[str, object]]:
    return [
        {
            "id": ADMIN_ID,
            "nome": "Administrador",
            "email": "admin@ponto.local",
            "cpf": "00000000191",
            "perfil": Profile.ADMIN.value,
            "empresa_id": "empresa-demo",
        },
        {
            "id": EMPLOYEE_ID,
            "nome": "Funcionario Demo",
            "email": "funcionario@ponto.local",
            "cpf": "00000000272",
            "perfil": Profile.USER.value,
            "empresa_id": "empresa-demo",
        },
    ]


def build_seed_entries(day: date) -> List[dict[str, object]]:
    """Return one workday of punches for the demo employee."""

    schedule = (
        (EntryType.WORK_START, time(8, 0)),
        (EntryType.LUNCH_START, time(12, 0)),
        (EntryType.LUNCH_END, time(13, 0)),
        (EntryType.WORK_END, time(17, 0)),
    )
    return [
        {
            "id": f"00000000-0000-0000-0000-00000000010{index}",
            "data": datetime.combine(day, moment),
            "tipo": entry_type.value,
            "funcionario_id": EMPLOYEE_ID,
            "descricao": "Seeded via scripts/seed_db.py",
            "localizacao": "Sede",
        }
        for index, (entry_type, moment) in enumerate(schedule, start=1)
    ]


def _upsert(conn, table: Table, records: List[dict[str, object]]) -> None:
    stmt = pg_insert(table).values(records)
    update_cols = {
        column: stmt.excluded[column] for column in records[0] if column != "id"
    }
    conn.execute(
        stmt.on_conflict_do_update(index_elements=[table.c.id], set_=update_cols)
    )


def seed() -> tuple[int, int]:
    settings = load_settings()
    engine = create_engine(settings.database_url, future=True)
    metadata_obj = MetaData()
    employees_table = Table("funcionarios", metadata_obj, autoload_with=engine)
    entries_table = Table("lancamentos", metadata_obj, autoload_with=engine)

    employees = build_seed_employees()
    entries = build_seed_entries(date.today())
    with engine.begin() as conn:
        _upsert(conn, employees_table, employees)
        _upsert(conn, entries_table, entries)

    return len(employees), len(entries)


def main() -> None:
    employees, entries = seed()
    print(f"Seeded {employees} employees and {entries} entries.")


if __name__ == "__main__":
    main()
