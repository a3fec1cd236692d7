"""
Application Settings
Load from environment variables
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List


class Settings(BaseSettings):
    """Application settings from environment"""

    # ======================
    # Application
    # ======================
    APP_NAME: str = "Portfolio Tracker"
    APP_VERSION: str = "1.0.0"
    APP_ENV: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    API_HOST: str = "0.0.0.0"
    PORT: int = 4000

    # ======================
    # CORS (dashboard dev server)
    # ======================
    CORS_ORIGINS: List[str] = ["http://localhost:5173"]

    # ======================
    # Ledger
    # ======================
    SEED_DEMO_DATA: bool = True

    # ======================
    # Pydantic v2 config
    # ======================
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="forbid",
    )


settings = Settings()
