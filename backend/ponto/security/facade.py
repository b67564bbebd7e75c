"""Authentication facade resolving the current principal."""

from __future__ import annotations

from typing import Mapping, Protocol

from ..domain.employees.types import Profile
from .errors import AuthenticationRequired
from .principal import Principal

USER_ID_HEADER = "x-user-id"
USER_PROFILE_HEADER = "x-user-profile"
DEFAULT_PROFILE = Profile.USER.value


class AuthenticationFacade(Protocol):  # pragma: no cover - interface only
    def current_principal(self) -> Principal: ...


class HeaderAuthenticationFacade(AuthenticationFacade):
    """Reads the principal forwarded by the authenticating gateway.

    The gateway in front of the API validates credentials and passes the
    employee id and profile along as ``X-User-Id`` / ``X-User-Profile``.
    """

    def __init__(self, headers: Mapping[str, str]) -> None:
        self._headers = headers

    def current_principal(self) -> Principal:
        user_id = (self._headers.get(USER_ID_HEADER) or "").strip()
        if not user_id:
            raise AuthenticationRequired("Authentication required")
        raw_profile = (
            self._headers.get(USER_PROFILE_HEADER) or ""
        ).strip().upper() or DEFAULT_PROFILE
        try:
            profile = Profile(raw_profile)
        except ValueError as exc:
            raise AuthenticationRequired(
                f"Unknown profile '{raw_profile}'"
            ) from exc
        return Principal(user_id=user_id, profile=profile)

