"""Router exports for FastAPI composition."""

from . import health, lancamentos

__all__ = ["health", "lancamentos"]
