"""Application settings loaded from environment variables."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings for API, CLI and persistence layers."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    database_url: str = Field(
        default="sqlite:///./checkout_hero.db",
        alias="DATABASE_URL",
    )
    default_locale: str = Field(default="en_US", alias="DEFAULT_LOCALE")
    default_currency_symbol: str = Field(
        default="$",
        alias="DEFAULT_CURRENCY_SYMBOL",
        min_length=1,
        max_length=8,
    )
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance for the current process."""

    return Settings()
