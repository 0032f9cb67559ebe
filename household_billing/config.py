"""Configuration management using Pydantic Settings"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "household-billing"
    log_level: str = "INFO"

    # Projection policy
    default_closing_day: int = Field(default=18, ge=1, le=31)
    horizon_months: int = Field(default=24, ge=1, le=240)  # months from January of the current year
    strict_card_lookup: bool = False


settings = Settings()
