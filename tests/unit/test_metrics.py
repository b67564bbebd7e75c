"""Tests for the entry counters."""

from __future__ import annotations

import pytest

from backend.ponto.infra.metrics import (
    ENTRY_OPERATIONS,
    EntryMetrics,
    InMemoryMetricsClient,
)

pytestmark = [pytest.mark.service]


def test_entry_metrics_use_operation_scoped_counter_names():
    client = InMemoryMetricsClient()
    metrics = EntryMetrics(client)

    for operation in ENTRY_OPERATIONS:
        metrics.request(operation)
    metrics.rejected("create")
    metrics.rejected("create")
    metrics.access_denied()
    metrics.persisted(is_new=True)
    metrics.persisted(is_new=False)
    metrics.deleted()

    assert dict(client.counters) == {
        "entries_create_http_total": 1,
        "entries_update_http_total": 1,
        "entries_get_http_total": 1,
        "entries_list_http_total": 1,
        "entries_delete_http_total": 1,
        "entries_create_rejected_total": 2,
        "entries_access_denied_total": 1,
        "entries_created_total": 1,
        "entries_updated_total": 1,
        "entries_deleted_total": 1,
    }


def test_unknown_operations_are_rejected():
    metrics = EntryMetrics(InMemoryMetricsClient())

    with pytest.raises(ValueError, match="purge"):
        metrics.request("purge")
