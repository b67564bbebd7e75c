"""Time-clock entry domain package."""

from .repository import (
    EntryRepository,
    InMemoryEntryRepository,
    PostgresEntryRepository,
    build_entry_repository,
)
from .service import EntryService
from .types import (
    SORTABLE_FIELDS,
    Entry,
    EntryNotFound,
    EntryType,
    Page,
    PageRequest,
    SortDirection,
)

__all__ = [
    "SORTABLE_FIELDS",
    "Entry",
    "EntryNotFound",
    "EntryRepository",
    "EntryService",
    "EntryType",
    "InMemoryEntryRepository",
    "Page",
    "PageRequest",
    "PostgresEntryRepository",
    "SortDirection",
    "build_entry_repository",
]
