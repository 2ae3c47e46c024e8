"""Configuration settings for Messagely."""

import os
import secrets
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


def check_work_factor(rounds: int) -> int:
    """Return ``rounds`` or raise ValueError if bcrypt would reject it."""
    if not 4 <= rounds <= 31:
        raise ValueError(f"BCRYPT_WORK_FACTOR={rounds} is outside bcrypt's 4-31 range")
    return rounds


class Settings:
    """Application settings loaded from environment variables."""

    # Database
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./messagely.db")

    # JWT
    JWT_SECRET_KEY: str = os.getenv("JWT_SECRET_KEY", "")
    JWT_ALGORITHM: str = os.getenv("JWT_ALGORITHM", "HS256")
    JWT_EXPIRE_MINUTES: int = int(os.getenv("JWT_EXPIRE_MINUTES", "480"))  # 0 = tokens never expire

    # Password hashing
    BCRYPT_WORK_FACTOR: int = int(os.getenv("BCRYPT_WORK_FACTOR", "12"))

    # Server
    HOST: str = os.getenv("HOST", "127.0.0.1")
    PORT: int = int(os.getenv("PORT", "8000"))

    # Application
    APP_ENV: str = os.getenv("APP_ENV", "development")
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"

    def __init__(self) -> None:
        check_work_factor(self.BCRYPT_WORK_FACTOR)
        self._generated_secret = not self.JWT_SECRET_KEY
        if self._generated_secret:
            self.JWT_SECRET_KEY = secrets.token_urlsafe(32)

    def validate(self) -> list[str]:
        """Validate settings and return list of warnings."""
        errors = []
        if self._generated_secret:
            errors.append("JWT_SECRET_KEY is not set - using auto-generated key (not persistent across restarts)")
        if self.JWT_EXPIRE_MINUTES <= 0:
            errors.append("JWT_EXPIRE_MINUTES is 0 - issued tokens never expire")
        return errors


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
