"""Entry service: persistence operations used by the entries controller."""

from __future__ import annotations

from typing import Optional

from ...infra.logging import get_logger
from ...infra.metrics import EntryMetrics, MetricsClient
from .repository import EntryRepository, InMemoryEntryRepository
from .types import Entry, Page, PageRequest

logger = get_logger(__name__)


class EntryService:
    """Thin layer over :class:`EntryRepository` with logging and counters."""

    def __init__(
        self,
        *,
        repository: EntryRepository | None = None,
        metrics: MetricsClient | None = None,
    ) -> None:
        self._repository = repository or InMemoryEntryRepository()
        self._metrics = EntryMetrics(metrics)

    def find_by_id(self, entry_id: str) -> Optional[Entry]:
        return self._repository.get(entry_id)

    def persist(self, entry: Entry) -> Entry:
        is_new = entry.id is None or self._repository.get(entry.id) is None
        stored = self._repository.save(entry)
        self._metrics.persisted(is_new=is_new)
        logger.info(
            "entry_persisted",
            extra={
                "entry_id": stored.id,
                "employee_id": stored.employee_id,
                "entry_type": stored.type.value,
                "is_new": is_new,
            },
        )
        return stored

    def find_by_employee(
        self, employee_id: str, page_request: PageRequest
    ) -> Page[Entry]:
        logger.debug(
            "entries_list_by_employee",
            extra={
                "employee_id": employee_id,
                "page": page_request.page,
                "size": page_request.size,
            },
        )
        return self._repository.list_by_employee(employee_id, page_request)

    def delete(self, entry_id: str) -> None:
        self._repository.delete(entry_id)
        self._metrics.deleted()
        logger.warning("entry_deleted", extra={"entry_id": entry_id})
