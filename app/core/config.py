from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    DATABASE_URL: str
    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24

    ENVIRONMENT: str = "development"  # "development" or "production"
    CORS_ORIGINS: List[str] = ["http://localhost:5173"]

    # How many times union creation re-allocates a slug after losing an insert race
    SLUG_INSERT_RETRIES: int = 5
    MIN_PASSWORD_LENGTH: int = 6

    @property
    def is_production(self):
        return self.ENVIRONMENT == "production"

    @property
    def is_sqlite(self):
        return self.DATABASE_URL.startswith("sqlite")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

settings = Settings()
