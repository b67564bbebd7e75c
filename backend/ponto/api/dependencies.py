"""Shared API dependencies."""

from __future__ import annotations

from functools import lru_cache

from fastapi import Depends, Request

from ..config import Settings, load_settings
from ..domain.employees import EmployeeService, build_employee_repository
from ..domain.timeclock import EntryService, build_entry_repository
from ..security import (
    AccessDenied,
    AuthenticationFacade,
    HeaderAuthenticationFacade,
    Principal,
)

__all__ = [
    "get_settings",
    "get_page_size",
    "get_entry_service",
    "get_employee_service",
    "get_authentication_facade",
    "get_current_principal",
    "require_admin",
]


@lru_cache()
def get_settings() -> Settings:
    """Return settings loaded once per process."""

    return load_settings()


def get_page_size(settings: Settings = Depends(get_settings)) -> int:
    return settings.page_size


@lru_cache()
def _entry_service_singleton() -> EntryService:
    settings = get_settings()
    return EntryService(repository=build_entry_repository(settings.storage_backend))


@lru_cache()
def _employee_service_singleton() -> EmployeeService:
    settings = get_settings()
    return EmployeeService(
        repository=build_employee_repository(
            settings.storage_backend, seed_employees=settings.seed_employees
        )
    )


def get_entry_service() -> EntryService:
    """Return the process-wide entry service instance."""

    return _entry_service_singleton()


def get_employee_service() -> EmployeeService:
    """Return the process-wide employee service instance."""

    return _employee_service_singleton()


def get_authentication_facade(request: Request) -> AuthenticationFacade:
    return HeaderAuthenticationFacade(request.headers)


def get_current_principal(
    facade: AuthenticationFacade = Depends(get_authentication_facade),
) -> Principal:
    """Resolve the caller; raises ``AuthenticationRequired`` when absent."""

    return facade.current_principal()


def require_admin(
    principal: Principal = Depends(get_current_principal),
) -> Principal:
    """Route guard for admin-only endpoints, evaluated before the handler."""

    if not principal.is_admin:
        raise AccessDenied("Access denied: ROLE_ADMIN required")
    return principal
