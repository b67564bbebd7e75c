"""FastAPI entrypoint for the Ponto Inteligente API."""

from fastapi import FastAPI

from .api.dependencies import get_settings
from .api.errors import install_error_handlers
from .api.routers import health, lancamentos
from .infra.logging import configure_logging


def create_app() -> FastAPI:
    """Instantiate the FastAPI app and register routers."""

    settings = get_settings()
    configure_logging(settings.logging)
    application = FastAPI(title="Ponto Inteligente API", version="0.1.0")
    install_error_handlers(application)
    for router in (health.router, lancamentos.router):
        application.include_router(router)
    return application


app = create_app()
