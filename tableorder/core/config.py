"""Application configuration."""
from functools import lru_cache
from pathlib import Path
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_STATIC_DIR = Path(__file__).resolve().parent.parent / "static"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database
    database_url: str = Field(min_length=1)

    # Admin gate
    admin_user: str = "admin"
    admin_pass: str = "admin123"

    # Orders
    orders_require_admin: bool = True
    orders_list_limit: int = 300

    # Menu bootstrap
    seed_file: str = "data/menu.json"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    static_dir: str = str(DEFAULT_STATIC_DIR)
    cors_origins: List[str] = ["*"]
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Load settings from the environment once."""
    return Settings()
