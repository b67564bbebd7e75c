"""Counters for time-clock entry operations."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from typing import DefaultDict

from .logging import get_logger

logger = get_logger(__name__)

# Operations exposed by the entries router; each gets request/rejection counters.
ENTRY_OPERATIONS = ("create", "update", "get", "list", "delete")


class MetricsClient:  # pragma: no cover - simple helper
    """Counter sink interface."""

    def increment(self, metric: str, value: int = 1) -> None:
        raise NotImplementedError


@dataclass
class InMemoryMetricsClient(MetricsClient):
    """Process-local counter sink; values are logged at debug level."""

    counters: DefaultDict[str, int] = field(default_factory=lambda: defaultdict(int))

    def increment(self, metric: str, value: int = 1) -> None:
        self.counters[metric] += value
        logger.debug("metrics_increment", extra={"metric": metric, "value": value})


_metrics_singleton: InMemoryMetricsClient | None = None


def get_metrics_client() -> MetricsClient:
    """Return the shared metrics client."""

    global _metrics_singleton
    if _metrics_singleton is None:
        _metrics_singleton = InMemoryMetricsClient()
    return _metrics_singleton


class EntryMetrics:
    """Named entry counters written to a :class:`MetricsClient`.

    Counter names follow ``entries_<event>_total``; HTTP-level counters carry
    the router operation, e.g. ``entries_list_http_total``.
    """

    def __init__(self, client: MetricsClient | None = None) -> None:
        self._client = client or get_metrics_client()

    def request(self, operation: str) -> None:
        self._client.increment(f"entries_{_checked(operation)}_http_total")

    def rejected(self, operation: str) -> None:
        self._client.increment(f"entries_{_checked(operation)}_rejected_total")

    def access_denied(self) -> None:
        self._client.increment("entries_access_denied_total")

    def persisted(self, *, is_new: bool) -> None:
        self._client.increment(
            "entries_created_total" if is_new else "entries_updated_total"
        )

    def deleted(self) -> None:
        self._client.increment("entries_deleted_total")


def _checked(operation: str) -> str:
    if operation not in ENTRY_OPERATIONS:
        raise ValueError(f"Unknown entry operation '{operation}'")
    return operation
