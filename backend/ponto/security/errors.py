"""Authentication and authorization failures raised before handlers run."""

from __future__ import annotations

from http import HTTPStatus


class PontoApiError(Exception):
    """Base error rendered as a ``{data, errors}`` envelope by the API."""

    status_code: HTTPStatus = HTTPStatus.BAD_REQUEST

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class AuthenticationRequired(PontoApiError):
    status_code = HTTPStatus.UNAUTHORIZED


class AccessDenied(PontoApiError):
    status_code = HTTPStatus.FORBIDDEN
