"""Exception handlers rendering failures as ``{data, errors}`` envelopes."""

from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..infra.logging import get_logger
from ..security.errors import PontoApiError

logger = get_logger(__name__)


def _envelope(status_code: int, messages: list[str]) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"data": None, "errors": messages},
    )


async def handle_api_error(request: Request, exc: PontoApiError) -> JSONResponse:
    logger.info(
        "request_rejected",
        extra={
            "path": request.url.path,
            "method": request.method,
            "status_code": int(exc.status_code),
            "reason": exc.message,
        },
    )
    return _envelope(int(exc.status_code), [exc.message])


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        messages.append(f"{location}: {error.get('msg', 'invalid value')}")
    return _envelope(status.HTTP_400_BAD_REQUEST, messages)


def install_error_handlers(application: FastAPI) -> None:
    """Register envelope-rendering handlers on ``application``."""

    application.add_exception_handler(PontoApiError, handle_api_error)
    application.add_exception_handler(
        RequestValidationError, handle_request_validation_error
    )
