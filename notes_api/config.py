"""
Configuration management.
Simple .env based config, loaded once at startup.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Server
    host: str = "0.0.0.0"
    port: int = 8080

    # Security
    session_secret: Optional[str] = None  # falls back to a well-known default if unset
    require_session_secret: bool = False  # refuse to start without SESSION_SECRET
    token_ttl_seconds: int = 60 * 60
    bcrypt_rounds: int = 10
    cookie_secure: bool = False  # Set to True in production with HTTPS
    invalid_token_status: int = 401  # 500 reproduces the legacy behavior

    # Database
    database_path: str = "./data/app.db"
    store_timeout_seconds: float = 5.0

    # Logging
    log_level: str = "INFO"


# Global settings instance
settings = Settings()
