"""Application configuration via environment variables."""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """App settings loaded from .env or environment."""

    CORS_ORIGINS: str = "*"
    SEED_DATA_PATH: str = ""
    SUBSCRIPTION_QUEUE_SIZE: int = 100
    SSE_KEEPALIVE_SECONDS: float = 15.0
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"


settings = Settings()
