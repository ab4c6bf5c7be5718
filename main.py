from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from tinylink_app.config import settings
from tinylink_app.api.v1 import links, pages
from tinylink_app.dependencies import get_client_context
from tinylink_app.link_api.factory import LinkAPIFactory
from tinylink_app.logging_config import setup_logging

setup_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    # Shutdown logic
    await LinkAPIFactory.close_instance()
    # The cached context holds the closed client
    get_client_context.cache_clear()


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Link directory client for a URL shortening service",
    debug=settings.debug,
    lifespan=lifespan,
)


@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "environment": settings.environment,
        "api_base_url": settings.api_base_url,
    }


######## Include routers
app.include_router(pages.router)
app.include_router(links.router)


if __name__ == "__main__":
    uvicorn.run(app, host=settings.host, port=settings.port)
