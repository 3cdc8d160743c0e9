"""
Configuration management for User Service.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    # Service Configuration
    SERVICE_NAME: str = "user-service"
    SERVICE_HOST: str = "0.0.0.0"
    SERVICE_PORT: int = 8080
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True

    # Cache Configuration
    CACHE_NAME: str = "exampleCache"
    STORE_BACKEND: str = "memory"  # memory | redis
    STORE_WORKERS: int = 4
    REDIS_URL: str = "redis://localhost:6379/0"

    # Seed the fixture users on startup
    SEED_ON_STARTUP: bool = True

    class Config:
        """Pydantic config."""

        env_file = ".env"
        case_sensitive = True


settings = Settings()
