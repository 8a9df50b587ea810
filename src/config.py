from pydantic import field_validator
from pydantic_settings import BaseSettings

from constants.tmdb import TMDB_BASE_URL


class Settings(BaseSettings):
    # TMDB credentials, must be set in .env or the environment
    TMDB_API_KEY: str
    TMDB_BASE_URL: str = TMDB_BASE_URL
    TMDB_TIMEOUT_SECONDS: float = 10.0

    ENVIRONMENT: str = "Production"  # Development | Staging | Production
    DATABASE_URL: str = "sqlite+aiosqlite:///./movieapp.db"
    CORS_ORIGINS: list[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://localhost:5174",
        "http://localhost:8080",
    ]
    LOG_LEVEL: str = "INFO"

    model_config = {"env_file": ".env", "extra": "ignore", "frozen": True}

    @field_validator("TMDB_API_KEY")
    @classmethod
    def _require_api_key(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("TMDB_API_KEY is required but not set")
        return value

    @field_validator("ENVIRONMENT")
    @classmethod
    def _default_environment(cls, value: str) -> str:
        return value.strip() or "Production"

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT.lower() == "development"


settings = Settings()
