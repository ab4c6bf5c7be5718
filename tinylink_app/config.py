from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """
    Client settings loaded from environment variables.

    Loading priority (highest to lowest):
    1. Environment variables
    2. .env file
    3. Default values below
    """

    # Environment
    environment: str = "development"
    debug: bool = True

    # Application
    app_name: str = "TinyLink"
    app_version: str = "1.0.0"

    # Server (the page itself)
    host: str = "127.0.0.1"
    port: int = 8080

    # Remote link API
    api_base_url: str = "http://localhost:5000"
    api_backend: str = "http"  # Options: "http", "memory"
    api_timeout: Optional[float] = None  # None = wait until the network layer gives up

    # Link input limits
    custom_code_max_length: int = 8
    generated_code_length: int = 6  # Used by the in-memory API only
    max_retries: int = 5

    # Logging
    log_level: str = "INFO"

    # Pydantic v2 configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Create settings instance
settings = Settings()
