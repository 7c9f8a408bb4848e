"""Configuration and environment settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional, List


class Settings(BaseSettings):
    """Application configuration"""
    
    # Database (Supabase Postgres)
    DATABASE_URL: Optional[str] = None
    DB_POOL_MIN_SIZE: int = 1
    DB_POOL_MAX_SIZE: int = 10
    DB_COMMAND_TIMEOUT: float = 30.0  # seconds
    
    # Report data
    REPORT_SOURCE: str = "sample"  # sample | database
    QUARTER_END_DATE: Optional[str] = None  # ISO date, e.g. 2025-09-30
    REPORT_CACHE_TTL_SECONDS: float = 300.0
    
    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False
    
    # Web
    CORS_ORIGINS: str = "http://localhost:5173,http://localhost:3000"
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )
    
    def get_cors_origins(self) -> List[str]:
        """Get CORS origin list"""
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


settings = Settings()
