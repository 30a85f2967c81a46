"""
RentalFlow Application Configuration
Loads settings from .env file using Pydantic v2 with BaseSettings
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # ==================== Project Info ====================
    PROJECT_NAME: str = "RentalFlow API"
    PROJECT_DESCRIPTION: str = "Rental Property Management - Properties, Tenants, Payments & Expenses"
    VERSION: str = "1.0.0"
    API_PREFIX: str = "/api"

    # ==================== Database ====================
    DATABASE_URL: str = "sqlite:///rentalflow_local.db"
    DATABASE_ECHO: bool = False

    # ==================== CORS & Frontend ====================
    FRONTEND_URL: str = "http://localhost:5173"
    ALLOWED_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]

    # ==================== Server Configuration ====================
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    RELOAD: bool = False

    # ==================== Leases & Tax ====================
    LEASE_ENDING_SOON_DAYS: int = 90
    TAX_RATE: float = 0.10  # flat rate on net rental income

    # ==================== Features ====================
    DEBUG: bool = False
    TESTING: bool = False
    LOG_LEVEL: str = "INFO"

    # ==================== Configuration Loading ====================
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="allow",
        validate_default=True,
    )

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.lower().startswith("sqlite")


# ==================== Settings Singleton ====================
@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()


def is_development() -> bool:
    """Check if running in development"""
    return settings.DEBUG or "localhost" in settings.FRONTEND_URL
