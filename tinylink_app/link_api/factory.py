"""
Factory for creating link API instances.
Simple, clean factory with singleton caching.
"""

import logging
from enum import Enum
from typing import Optional

from .short_codes import RandomShortCodeStrategy
from .strategies import LinkAPIStrategy, HttpLinkAPI, InMemoryLinkAPI
from tinylink_app.config import settings

logger = logging.getLogger(__name__)


class LinkAPIBackend(Enum):
    """Available link API backends"""
    HTTP = "http"
    MEMORY = "memory"


class LinkAPIFactory:
    """
    Simple factory for creating link API instances.

    Uses Singleton Pattern - creates instance once, reuses it.
    Gets configuration from settings (not passed as parameters).
    """

    _instance: Optional[LinkAPIStrategy] = None  # Single cached instance

    @classmethod
    def create(cls, backend: LinkAPIBackend) -> LinkAPIStrategy:
        """
        Create or return cached link API instance.

        Args:
            backend: Type of link API backend (from enum)

        Returns:
            Singleton link API instance
        """
        if cls._instance is not None:
            return cls._instance

        if backend == LinkAPIBackend.HTTP:
            cls._instance = HttpLinkAPI(
                settings.api_base_url,
                timeout=settings.api_timeout,
            )
            logger.info("HTTP link API initialized for %s", settings.api_base_url)

        elif backend == LinkAPIBackend.MEMORY:
            cls._instance = InMemoryLinkAPI(
                settings.api_base_url,
                code_strategy=RandomShortCodeStrategy(
                    length=settings.generated_code_length,
                    max_retries=settings.max_retries,
                ),
            )
            logger.info("In-memory link API initialized")

        else:
            raise ValueError(f"Unknown link API backend: {backend}")

        return cls._instance

    @classmethod
    async def close_instance(cls):
        """Close and forget the cached instance (app shutdown)"""
        if cls._instance is not None:
            await cls._instance.aclose()
            cls._instance = None

    @classmethod
    def clear_instance(cls):
        """Clear cached instance (for testing)"""
        cls._instance = None
