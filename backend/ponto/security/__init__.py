"""Principal resolution and access rules."""

from .errors import AccessDenied, AuthenticationRequired, PontoApiError
from .facade import AuthenticationFacade, HeaderAuthenticationFacade
from .principal import Principal, belongs_to_user

__all__ = [
    "AccessDenied",
    "AuthenticationFacade",
    "AuthenticationRequired",
    "HeaderAuthenticationFacade",
    "PontoApiError",
    "Principal",
    "belongs_to_user",
]
