"""Tests for EntryService over the in-memory repository."""

from __future__ import annotations

import logging
from datetime import datetime

import pytest

from backend.ponto.domain.timeclock import (
    Entry,
    EntryNotFound,
    EntryService,
    EntryType,
    InMemoryEntryRepository,
    PageRequest,
    SortDirection,
)
from backend.ponto.domain.timeclock import service as service_module
from backend.ponto.infra.metrics import MetricsClient
from tests.helpers.logging import RecordingLogger, assert_extra_contains, find_log

pytestmark = [pytest.mark.service]


class RecordingMetrics(MetricsClient):
    def __init__(self) -> None:
        self.increments: list[tuple[str, int]] = []

    def increment(self, metric: str, value: int = 1) -> None:
        self.increments.append((metric, value))


def _entry(**overrides) -> Entry:
    values = {
        "timestamp": datetime(2026, 3, 2, 8, 0),
        "type": EntryType.WORK_START,
        "employee_id": "emp-1",
    }
    values.update(overrides)
    return Entry(**values)


def _build_service() -> tuple[EntryService, InMemoryEntryRepository, RecordingMetrics]:
    repository = InMemoryEntryRepository()
    metrics = RecordingMetrics()
    return EntryService(repository=repository, metrics=metrics), repository, metrics


def test_persist_assigns_id_and_counts_creation():
    service, repository, metrics = _build_service()

    saved = service.persist(_entry())

    assert saved.id
    assert repository.get(saved.id) == saved
    assert metrics.increments == [("entries_created_total", 1)]


def test_persist_existing_entry_counts_update():
    service, _, metrics = _build_service()
    saved = service.persist(_entry())

    updated = service.persist(_entry(id=saved.id, type=EntryType.WORK_END))

    assert updated.id == saved.id
    assert service.find_by_id(saved.id).type is EntryType.WORK_END
    assert metrics.increments[-1] == ("entries_updated_total", 1)


def test_find_by_employee_filters_sorts_and_pages():
    service, _, _ = _build_service()
    for hour in (17, 8, 12):
        service.persist(_entry(timestamp=datetime(2026, 3, 2, hour, 0)))
    service.persist(_entry(employee_id="emp-2"))

    page = service.find_by_employee(
        "emp-1",
        PageRequest(page=0, size=2, direction=SortDirection.ASC, sort_by="timestamp"),
    )

    assert [entry.timestamp.hour for entry in page.content] == [8, 12]
    assert page.total_elements == 3
    assert page.total_pages == 2


def test_find_by_employee_past_last_page_is_empty():
    service, _, _ = _build_service()
    service.persist(_entry())

    page = service.find_by_employee("emp-1", PageRequest(page=3, size=2))

    assert page.content == []
    assert page.number == 3
    assert page.total_elements == 1


def test_sorting_places_missing_values_last_when_ascending():
    service, _, _ = _build_service()
    service.persist(_entry(id="a", description=None))
    service.persist(_entry(id="b", description="zeta"))
    service.persist(_entry(id="c", description="alpha"))

    ascending = service.find_by_employee(
        "emp-1",
        PageRequest(page=0, size=10, direction=SortDirection.ASC, sort_by="description"),
    )
    descending = service.find_by_employee(
        "emp-1",
        PageRequest(page=0, size=10, direction=SortDirection.DESC, sort_by="description"),
    )

    assert [entry.id for entry in ascending.content] == ["c", "b", "a"]
    assert [entry.id for entry in descending.content] == ["a", "b", "c"]


def test_delete_removes_entry_and_missing_ids_raise():
    service, _, metrics = _build_service()
    saved = service.persist(_entry())

    service.delete(saved.id)

    assert service.find_by_id(saved.id) is None
    assert ("entries_deleted_total", 1) in metrics.increments
    with pytest.raises(EntryNotFound):
        service.delete(saved.id)


def test_page_map_keeps_paging_metadata():
    service, _, _ = _build_service()
    service.persist(_entry(id="x"))

    page = service.find_by_employee("emp-1", PageRequest(page=0, size=5)).map(
        lambda entry: entry.id
    )

    assert page.content == ["x"]
    assert (page.number, page.size, page.total_elements) == (0, 5, 1)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"page": 0, "size": 5, "sort_by": "salary"},
        {"page": -1, "size": 5},
        {"page": 0, "size": 0},
    ],
)
def test_page_request_rejects_invalid_selection(kwargs):
    with pytest.raises(ValueError):
        PageRequest(**kwargs)


def test_persist_logs_whether_the_entry_is_new(monkeypatch):
    recorder = RecordingLogger()
    monkeypatch.setattr(service_module, "logger", recorder)
    service, _, _ = _build_service()

    saved = service.persist(_entry())
    service.persist(_entry(id=saved.id, type=EntryType.WORK_END))

    created, updated = [
        record for record in recorder.records if record["message"] == "entry_persisted"
    ]
    assert_extra_contains(created, entry_id=saved.id, is_new=True)
    assert_extra_contains(updated, entry_type="TERMINO_TRABALHO", is_new=False)


def test_persist_emits_info_records_through_stdlib_logging(caplog):
    caplog.set_level(logging.INFO, logger="backend.ponto")
    service, _, _ = _build_service()

    saved = service.persist(_entry())

    records = [record for record in caplog.records if record.msg == "entry_persisted"]
    assert len(records) == 1
    assert records[0].entry_id == saved.id
    assert records[0].is_new is True


def test_delete_logs_warning(monkeypatch):
    recorder = RecordingLogger()
    monkeypatch.setattr(service_module, "logger", recorder)
    service, _, _ = _build_service()
    saved = service.persist(_entry())

    service.delete(saved.id)

    record = find_log(recorder.records, level="warning", message="entry_deleted")
    assert_extra_contains(record, entry_id=saved.id)
