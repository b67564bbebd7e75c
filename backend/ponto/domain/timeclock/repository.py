"""Persistence adapters for time-clock entries."""

from __future__ import annotations

from threading import RLock
from typing import Any, Dict, Iterable, List, Mapping, Optional, Protocol

from sqlalchemy import (
    MetaData,
    Table,
    asc,
    delete,
    desc,
    func,
    insert,
    select,
    update,
)
from sqlalchemy.engine import Engine

from ...infra.db import get_engine
from .types import (
    Entry,
    EntryNotFound,
    EntryType,
    Page,
    PageRequest,
    SortDirection,
)

# Entry attribute -> ``lancamentos`` column.
COLUMN_MAP: Dict[str, str] = {
    "id": "id",
    "timestamp": "data",
    "type": "tipo",
    "employee_id": "funcionario_id",
    "description": "descricao",
    "location": "localizacao",
}


class EntryRepository(Protocol):  # pragma: no cover - interface only
    """Persistence abstraction consumed by :class:`EntryService`."""

    def get(self, entry_id: str) -> Optional[Entry]: ...

    def save(self, entry: Entry) -> Entry: ...

    def list_by_employee(
        self, employee_id: str, page_request: PageRequest
    ) -> Page[Entry]: ...

    def delete(self, entry_id: str) -> None: ...


class InMemoryEntryRepository(EntryRepository):
    """Dict-backed adapter used for tests and the ``memory`` storage backend."""

    def __init__(self, entries: Iterable[Entry] = ()) -> None:
        self._lock = RLock()
        self._store: Dict[str, Entry] = {}
        for entry in entries:
            self.save(entry)

    def get(self, entry_id: str) -> Optional[Entry]:
        with self._lock:
            return self._store.get(entry_id)

    def save(self, entry: Entry) -> Entry:
        stored = entry.with_generated_id()
        with self._lock:
            self._store[stored.id] = stored
        return stored

    def list_by_employee(
        self, employee_id: str, page_request: PageRequest
    ) -> Page[Entry]:
        with self._lock:
            rows = [
                entry
                for entry in self._store.values()
                if entry.employee_id == employee_id
            ]
        rows = self._apply_sort(rows, page_request)
        start = page_request.offset
        return Page(
            content=rows[start : start + page_request.size],
            number=page_request.page,
            size=page_request.size,
            total_elements=len(rows),
        )

    def delete(self, entry_id: str) -> None:
        with self._lock:
            if self._store.pop(entry_id, None) is None:
                raise EntryNotFound(entry_id)

    @staticmethod
    def _apply_sort(rows: List[Entry], page_request: PageRequest) -> List[Entry]:
        reverse = page_request.direction is SortDirection.DESC

        def sort_key(entry: Entry) -> Any:
            value = getattr(entry, page_request.sort_by)
            if isinstance(value, EntryType):
                value = value.value
            # None sorts last in ascending order, first in descending.
            return (value is None, value if value is not None else "")

        return sorted(rows, key=sort_key, reverse=reverse)


class PostgresEntryRepository(EntryRepository):
    """SQLAlchemy-backed adapter over the ``lancamentos`` table."""

    def __init__(
        self,
        engine: Engine | None = None,
        *,
        table: Table | None = None,
    ) -> None:
        self._engine = engine or get_engine()
        if table is not None:
            self._entries = table
        else:
            self._entries = Table(
                "lancamentos", MetaData(), autoload_with=self._engine
            )

    def get(self, entry_id: str) -> Optional[Entry]:
        stmt = select(self._entries).where(self._entries.c.id == entry_id)
        with self._engine.begin() as conn:
            row = conn.execute(stmt).mappings().first()
        return self._row_to_entry(row) if row is not None else None

    def save(self, entry: Entry) -> Entry:
        stored = entry.with_generated_id()
        values = self._entry_to_values(stored)
        changes = {column: value for column, value in values.items() if column != "id"}
        with self._engine.begin() as conn:
            result = conn.execute(
                update(self._entries)
                .where(self._entries.c.id == stored.id)
                .values(**changes)
            )
            if result.rowcount == 0:
                conn.execute(insert(self._entries).values(**values))
        return stored

    def list_by_employee(
        self, employee_id: str, page_request: PageRequest
    ) -> Page[Entry]:
        table = self._entries
        condition = table.c.funcionario_id == employee_id
        direction = desc if page_request.direction is SortDirection.DESC else asc
        order_column = table.c[COLUMN_MAP[page_request.sort_by]]

        stmt = (
            select(table)
            .where(condition)
            .order_by(direction(order_column), direction(table.c.id))
            .offset(page_request.offset)
            .limit(page_request.size)
        )
        count_stmt = select(func.count()).select_from(table).where(condition)

        with self._engine.begin() as conn:
            total = conn.execute(count_stmt).scalar_one()
            rows = conn.execute(stmt).mappings().all()

        return Page(
            content=[self._row_to_entry(row) for row in rows],
            number=page_request.page,
            size=page_request.size,
            total_elements=int(total),
        )

    def delete(self, entry_id: str) -> None:
        stmt = delete(self._entries).where(self._entries.c.id == entry_id)
        with self._engine.begin() as conn:
            result = conn.execute(stmt)
        if result.rowcount == 0:
            raise EntryNotFound(entry_id)

    @staticmethod
    def _entry_to_values(entry: Entry) -> Dict[str, Any]:
        return {
            COLUMN_MAP[attribute]: (
                value.value if isinstance(value, EntryType) else value
            )
            for attribute, value in (
                ("id", entry.id),
                ("timestamp", entry.timestamp),
                ("type", entry.type),
                ("employee_id", entry.employee_id),
                ("description", entry.description),
                ("location", entry.location),
            )
        }

    @staticmethod
    def _row_to_entry(row: Mapping[str, Any]) -> Entry:
        return Entry(
            id=row["id"],
            timestamp=row["data"],
            type=EntryType(row["tipo"]),
            employee_id=row["funcionario_id"],
            description=row.get("descricao"),
            location=row.get("localizacao"),
        )


def build_entry_repository(backend: str = "postgres") -> EntryRepository:
    """Factory that returns the configured entry repository implementation."""

    if backend == "postgres":
        return PostgresEntryRepository()
    return InMemoryEntryRepository()
