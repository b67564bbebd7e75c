"""Employee domain types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional


class Profile(str, Enum):
    """Access profile attached to an employee account."""

    ADMIN = "ROLE_ADMIN"
    USER = "ROLE_USUARIO"


@dataclass(frozen=True)
class Employee:
    id: str
    name: str
    email: str
    cpf: str
    profile: Profile = Profile.USER
    company_id: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Employee":
        """Build an employee from a config-style mapping (``seed_employees``)."""

        return cls(
            id=str(data["id"]),
            name=str(data.get("name", "")),
            email=str(data.get("email", "")),
            cpf=str(data.get("cpf", "")),
            profile=Profile(str(data.get("profile", Profile.USER.value)).upper()),
            company_id=data.get("company_id"),
        )
