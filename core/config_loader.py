from __future__ import annotations
from typing import Annotated, Any, Optional

from pydantic import BeforeValidator
from pydantic_settings import BaseSettings, SettingsConfigDict


def parse_cors(value: Any) -> list[str] | str:
    # "http://a.com, http://b.com" or a JSON list
    if isinstance(value, str) and not value.startswith("["):
        return [origin.strip() for origin in value.split(",") if origin.strip()]
    if isinstance(value, (list, str)):
        return value
    raise ValueError(value)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_ignore_empty=True, extra="ignore")

    PROJECT_NAME: str = "Employee Task Management API"

    DATABASE_URL: str = "sqlite:///./database.sqlite"
    DATABASE_ECHO: bool = False
    AUTO_CREATE_SCHEMA: bool = True
    SEED_SAMPLE_DATA: bool = True

    BACKEND_CORS_ORIGINS: Annotated[list[str] | str, BeforeValidator(parse_cors)] = ["*"]

    LOG_LEVEL: str = "INFO"
    LOG_DIR: Optional[str] = None

    HOST: str = "0.0.0.0"
    PORT: int = 4000


settings = Settings()
