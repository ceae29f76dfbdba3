"""Application settings loaded from the environment and .env file."""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application name, environment and logging options."""

    model_config = SettingsConfigDict(
        # absolute so the working directory doesn't matter
        env_file=Path(__file__).resolve().parents[1] / ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Application
    app_name: str = Field(default="AppErrors", validation_alias="APP_NAME")
    app_env: Literal["development", "staging", "production"] = Field(
        default="development",
        validation_alias="APP_ENV",
    )

    # Logging
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_dir: Path = Field(default=Path("logs"), validation_alias="LOG_DIR")
    log_to_file: bool = Field(default=False, validation_alias="LOG_TO_FILE")


# Global settings instance
settings = Settings()
