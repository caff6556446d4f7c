"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        rate_limit_default: Default rate limit for all endpoints.
        rate_limit_enabled: Turn rate limiting off entirely (local runs, tests).
        cosmos_endpoint: Cosmos DB account URI (COSMOS_ENDPOINT).
        cosmos_database: Database id (COSMOS_DATABASE).
        cosmos_container: Container id (COSMOS_CONTAINER).
        cosmos_key: Account key (COSMOS_KEY). Leave unset to authenticate
            with DefaultAzureCredential (managed identity, Azure CLI, ...).

    The Cosmos defaults target the local emulator.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Product Catalog"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    rate_limit_default: str = "60/minute"
    rate_limit_enabled: bool = True

    cosmos_endpoint: str = "https://localhost:8081"
    cosmos_database: str = "ProductsDB"
    cosmos_container: str = "Products"
    cosmos_key: Optional[str] = None


settings = Settings()
