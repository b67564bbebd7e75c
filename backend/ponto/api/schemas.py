"""Transport models for the time-clock API."""

from __future__ import annotations

from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    """Uniform ``{data, errors}`` wrapper; ``data`` is null whenever errors exist."""

    data: Optional[T] = None
    errors: List[str] = Field(default_factory=list)


class EntryDTO(BaseModel):
    """Entry as exchanged over HTTP.

    Every field is an optional string so that malformed payloads reach the
    handler and all validation failures can be reported together.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = None
    timestamp: Optional[str] = Field(default=None, alias="data")
    type: Optional[str] = Field(default=None, alias="tipo")
    employee_id: Optional[str] = Field(default=None, alias="funcionarioId")
    description: Optional[str] = Field(default=None, alias="descricao")
    location: Optional[str] = Field(default=None, alias="localizacao")


class EntryPage(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    content: List[EntryDTO] = Field(default_factory=list)
    number: int = 0
    size: int = 0
    total_elements: int = Field(default=0, alias="totalElements")
    total_pages: int = Field(default=0, alias="totalPages")
