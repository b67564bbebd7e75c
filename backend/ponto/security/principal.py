"""Authenticated caller representation and ownership rule."""

from __future__ import annotations

from dataclasses import dataclass

from ..domain.employees.types import Profile


@dataclass(frozen=True)
class Principal:
    """The employee on whose behalf a request runs."""

    user_id: str
    profile: Profile

    @property
    def is_admin(self) -> bool:
        return self.profile is Profile.ADMIN


def belongs_to_user(principal: Principal, employee_id: str) -> bool:
    """True when the caller is an admin or is the employee itself."""

    return principal.is_admin or principal.user_id == employee_id
