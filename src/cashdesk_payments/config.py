from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings, read from CASHDESK_* environment variables or .env."""

    store_backend: Literal["sqlalchemy", "memory"] = "sqlalchemy"
    database_url: str = "sqlite:///cashdesk_payments.db"
    sql_echo: bool = False
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="CASHDESK_", env_file=".env", extra="ignore")
