from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from typing import Literal

class Settings(BaseSettings):

    OPENAI_API_KEY: str | None = None
    OPENAI_MODEL: str = "gpt-5"
    OPENAI_TIMEOUT_SECONDS: float = 15.0
    OPENAI_MAX_ATTEMPTS: int = 2

    STORAGE_BACKEND: Literal["memory", "dynamodb"] = "memory"
    AWS_REGION: str = "eu-west-3"
    AWS_PROFILE: str | None = None
    DYNAMODB_TABLE_NAME: str = "nexus-connect-submissions"

    CORS_ALLOW_ORIGINS: list[str] = ["*"]
    ROOT_PATH: str = ""
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @property
    def ai_enabled(self) -> bool:
        return bool(self.OPENAI_API_KEY)

@lru_cache()
def get_settings() -> Settings:
    return Settings()

settings = get_settings()
