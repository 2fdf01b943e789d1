"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache) - single instance per process
    - DB_USER / DB_PASS are percent-encoded before entering the connection string

Design Decisions:
    - MONGODB_URI overrides the credential-built SRV string (local Mongo, CI)
    - Defaults provided for all non-secret settings: works out-of-the-box against localhost
"""

from functools import lru_cache
from urllib.parse import quote_plus

from pydantic_settings import BaseSettings, SettingsConfigDict


LOCAL_MONGODB_URI = "mongodb://localhost:27017"


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, extra="ignore",
    )

    # Server
    host: str = "0.0.0.0"
    port: int = 5000

    # Database
    db_user: str | None = None
    db_pass: str | None = None
    db_cluster: str = "cluster0.mhbkfqu.mongodb.net"
    db_name: str = "diu_smart_transport"
    mongodb_uri: str | None = None
    mongo_server_selection_timeout_ms: int = 5000
    mongo_max_pool_size: int = 100

    # Startup: abort when the first ping fails, else serve 503 until restart
    storage_fail_fast: bool = True
    use_in_memory_store: bool = False

    # API
    cors_origins: list[str] = ["*"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def mongo_connection_uri(self) -> str:
        """Resolve the MongoDB connection string."""
        if self.mongodb_uri:
            return self.mongodb_uri
        if self.db_user and self.db_pass:
            username = quote_plus(self.db_user)
            password = quote_plus(self.db_pass)
            return (
                f"mongodb+srv://{username}:{password}@{self.db_cluster}/"
                "?retryWrites=true&w=majority&appName=Cluster0"
            )
        return LOCAL_MONGODB_URI


@lru_cache
def get_settings() -> Settings:
    return Settings()
