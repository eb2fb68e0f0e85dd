"""Configuration management using pydantic-settings."""

from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import List


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Upstream provider credentials
    sec_api_key: str = ""
    finnhub_api_key: str = ""

    # Upstream endpoints
    sec_api_base_url: str = "https://api.sec-api.io"
    finnhub_base_url: str = "https://finnhub.io/api/v1"
    upstream_timeout_seconds: float = 10.0

    # Server Configuration
    host: str = "0.0.0.0"
    port: int = 8080
    cors_origins: str = "*"

    # Application Configuration
    app_env: str = "development"
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = False

    @property
    def cors_origin_list(self) -> List[str]:
        """Comma-separated CORS_ORIGINS as a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
