"""
FastAPI dependencies for dependency injection.

The page works against a single ClientContext built from settings.
Tests swap it through app.dependency_overrides[get_client_context].
"""

from functools import lru_cache

from tinylink_app.config import settings
from tinylink_app.services.context import ClientContext


@lru_cache()
def get_client_context() -> ClientContext:
    """
    Get the client context (singleton).

    @lru_cache ensures this is built only once per process.
    """
    return ClientContext.from_settings(settings)
