"""Time-clock entry domain types."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Generic, List, Optional, TypeVar
from uuid import uuid4

T = TypeVar("T")


class EntryType(str, Enum):
    """Kinds of clock punches an employee can register."""

    WORK_START = "INICIO_TRABALHO"
    WORK_END = "TERMINO_TRABALHO"
    LUNCH_START = "INICIO_ALMOCO"
    LUNCH_END = "TERMINO_ALMOCO"
    BREAK_START = "INICIO_PAUSA"
    BREAK_END = "TERMINO_PAUSA"

    @classmethod
    def names(cls) -> tuple[str, ...]:
        return tuple(member.value for member in cls)


class SortDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"

    @classmethod
    def names(cls) -> tuple[str, ...]:
        return tuple(member.value for member in cls)


@dataclass(frozen=True)
class Entry:
    """A single persisted time-clock record."""

    timestamp: datetime
    type: EntryType
    employee_id: str
    description: Optional[str] = None
    location: Optional[str] = None
    id: Optional[str] = None

    def with_generated_id(self) -> "Entry":
        """Return a copy carrying a fresh id when none has been assigned."""

        if self.id:
            return self
        return replace(self, id=str(uuid4()))


# Attribute names of ``Entry`` that listing endpoints may order by.
SORTABLE_FIELDS: tuple[str, ...] = (
    "id",
    "timestamp",
    "type",
    "employee_id",
    "description",
    "location",
)


@dataclass(frozen=True)
class PageRequest:
    """Zero-based page selection plus a single-column ordering."""

    page: int
    size: int
    direction: SortDirection = SortDirection.DESC
    sort_by: str = "id"

    def __post_init__(self) -> None:
        if self.sort_by not in SORTABLE_FIELDS:
            raise ValueError(f"Cannot order entries by '{self.sort_by}'")
        if self.page < 0 or self.size < 1:
            raise ValueError("page must be >= 0 and size >= 1")

    @property
    def offset(self) -> int:
        return self.page * self.size


@dataclass(frozen=True)
class Page(Generic[T]):
    content: List[T] = field(default_factory=list)
    number: int = 0
    size: int = 0
    total_elements: int = 0

    @property
    def total_pages(self) -> int:
        if not self.size:
            return 0
        return math.ceil(self.total_elements / self.size)

    def map(self, converter) -> "Page":
        return Page(
            content=[converter(item) for item in self.content],
            number=self.number,
            size=self.size,
            total_elements=self.total_elements,
        )


class EntryNotFound(LookupError):
    """Raised by repositories when an entry id has no stored record."""

    def __init__(self, entry_id: str) -> None:
        super().__init__(f"Entry '{entry_id}' not found")
        self.entry_id = entry_id
