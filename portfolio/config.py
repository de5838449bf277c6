"""Application configuration using Pydantic Settings"""

from typing import Literal
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Application
    environment: str = "development"
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    # Project store
    store_backend: Literal["redis", "local"] = "redis"
    initialize_on_startup: bool = True
    db_version: str = "1.0.0"

    # Redis
    redis_url: str = "redis://localhost:6379/0"

    # Local (offline/demo) store
    local_store_path: str = "data/local_storage.json"

    # Simulated network latency
    simulate_latency: bool = False
    latency_min_ms: int = 200
    latency_max_ms: int = 500

    # CORS
    cors_origins: str = "http://localhost:3000,http://localhost:5173"

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins into a list"""
        return [origin.strip() for origin in self.cors_origins.split(",")]


# Global settings instance
settings = Settings()
