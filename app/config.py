from pydantic_settings import BaseSettings
from typing import List
from datetime import timedelta
from functools import lru_cache
import re


_DURATION_RE = re.compile(r"^\s*(\d+)\s*([smhd]?)\s*$")
_DURATION_UNITS = {"": 1, "s": 1, "m": 60, "h": 3600, "d": 86400}


def parse_duration(value: str) -> timedelta:
    """Parse durations such as "8h", "30m", "2d" or plain seconds ("3600")"""
    match = _DURATION_RE.match(str(value).lower())
    if not match:
        raise ValueError(f"Invalid duration: {value!r}")
    amount, unit = match.groups()
    return timedelta(seconds=int(amount) * _DURATION_UNITS[unit])


class Settings(BaseSettings):
    """Application settings loaded from environment variables with hardcoded defaults"""

    # Database - local SQLite file unless overridden via .env or environment
    DATABASE_URL: str = "sqlite:///./drivers.db"

    # Manager login - empty means nobody can log in
    MANAGER_PASSWORD: str = ""

    # JWT Configuration
    JWT_SECRET_KEY: str = "change-this-jwt-secret-in-production"
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRES_IN: str = "8h"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 5000

    # CORS - comma-separated, "*" allows any origin
    FRONTEND_ORIGIN: str = "*"

    # Profile photo storage, served under /uploads
    UPLOAD_DIR: str = "uploads"

    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"

    @property
    def cors_origins(self) -> List[str]:
        """Parse CORS origins from comma-separated string"""
        return [origin.strip() for origin in self.FRONTEND_ORIGIN.split(",") if origin.strip()]

    @property
    def token_lifetime(self) -> timedelta:
        return parse_duration(self.JWT_EXPIRES_IN)


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
