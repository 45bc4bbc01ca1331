"""Client configuration.

Environment variables (optional, also read from .env):
- CATALOG_BASE_URL: where the product store listens (default http://127.0.0.1:8085)
- CATALOG_TIMEOUT: per-request timeout in seconds
- CATALOG_RETRIES: connection retries done by the HTTP transport
- CATALOG_LOG_LEVEL: logging level for the CLI
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

PRODUCTS_PATH = "/api/products"


class ClientSettings(BaseSettings):
    """Settings for talking to the product store."""

    base_url: str = "http://127.0.0.1:8085"
    timeout: float = 10.0
    retries: int = 0
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="CATALOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
