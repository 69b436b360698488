"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "intellicard"
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000

    # Projection
    projection_months: int = 12

    # Presentation
    high_usage_threshold_percent: float = 80.0
    currency_symbol: str = "R$"


settings = Settings()
