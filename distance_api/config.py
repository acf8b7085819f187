"""Configuration du microservice de distance d'édition."""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Configuration de l'application."""

    APP_NAME: str = "DistancePy - Levenshtein Distance Service"

    # Redis
    REDIS_URL: str = "redis://redis:6379/0"
    ENABLE_CACHE: bool = True
    CACHE_TTL: int = 300

    # Distance
    DISTANCE_CACHE_SIZE: int = 4096
    MAX_LEVENSHTEIN_DISTANCE_CAP: int = 4

    # Logs
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"
    LOG_TO_FILE: bool = True

    # Performance
    ENABLE_METRICS: bool = True

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


settings = Settings()
