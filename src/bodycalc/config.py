"""Application configuration."""

import os
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    progress_store_path: Path = Path("bodycalc_progress.json")
    progress_storage_key: str = "bodycalc_progress"
    enum_key_policy: Literal["lenient", "strict"] = "lenient"
    chart_limit: int = 30
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="BODYCALC_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
