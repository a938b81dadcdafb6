from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    # Application
    APP_NAME: str = "Bird Shop API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # API
    API_PREFIX: str = "/api"

    # Storage backend
    DB_BACKEND: Literal["sqlite", "mysql"] = "sqlite"

    # SQLite
    SQLITE_PATH: str = "birdshop.db"

    # MySQL
    MYSQL_HOST: str = "localhost"
    MYSQL_PORT: int = 3306
    MYSQL_USER: str = "birdshop"
    MYSQL_PASSWORD: str = "birdshop"
    MYSQL_DATABASE: str = "birdshop"
    MYSQL_POOL_MINSIZE: int = 1
    MYSQL_POOL_MAXSIZE: int = 10

    # Server
    HOST: str = "127.0.0.1"
    PORT: int = 8000

    LOG_LEVEL: str = "INFO"

    # Seeding
    SEED_ON_STARTUP: bool = True
    SEED_ONLY_IF_EMPTY: bool = True

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
