"""
Configuration settings for record-core.

Uses Pydantic Settings to load environment variables for logging, the
resource catalog (order pricing, user seeding) and projection behaviour.
"""
from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    # Resource catalog
    order_unit_price: int = Field(1000, alias="ORDER_UNIT_PRICE", ge=0)
    seed_users: bool = Field(True, alias="SEED_USERS")

    # Projection
    projection_strict: bool = Field(False, alias="PROJECTION_STRICT")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
