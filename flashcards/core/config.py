from pydantic_settings import BaseSettings
import logging
import os
from pathlib import Path
from typing import List

from dotenv import load_dotenv

_logger = logging.getLogger(__name__)

# Look for .env in the project root (parent of the package directory), then the cwd
_project_env = Path(__file__).parent.parent.parent / ".env"
_current_env = Path(".env")

if _project_env.exists():
    load_dotenv(_project_env, override=False)
    _logger.info(f"Loaded .env file from: {_project_env}")
elif _current_env.exists():
    load_dotenv(_current_env, override=False)
    _logger.info(f"Loaded .env file from: {_current_env.absolute()}")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database - DATABASE_URL (DB_URL is accepted as a fallback)
    database_url: str = ""

    # Server
    host: str = "0.0.0.0"
    port: int = 8080
    environment: str = "production"
    log_level: str = "INFO"

    # API
    api_v1_prefix: str = "/api/v1"

    # CORS
    cors_origins: List[str] = ["*"]

    # AI translation: "gemini" (LLM prompt) or "google" (Cloud Translation API)
    translation_provider: str = "gemini"
    google_gemini_api_key: str = ""
    gemini_model: str = "gemini-2.5-flash"
    google_translate_api_key: str = ""
    translation_timeout_seconds: float = 10.0

    # Hints are the question translated from hint_source_language into the
    # requested language, or hint_default_language when none is requested
    hint_source_language: str = "en"
    hint_default_language: str = "el"

    class Config:
        env_file = ".env"
        case_sensitive = False

    def __init__(self, **kwargs):
        if not kwargs.get("database_url") and not os.getenv("DATABASE_URL"):
            kwargs["database_url"] = os.getenv("DB_URL", "")
        super().__init__(**kwargs)

    @property
    def is_development(self) -> bool:
        return self.environment.lower() in ("development", "dev", "local")

    @property
    def sqlalchemy_database_url(self) -> str:
        """Database URL with postgres:// rewritten to postgresql:// for SQLAlchemy."""
        if self.database_url.startswith("postgres://"):
            return self.database_url.replace("postgres://", "postgresql://", 1)
        return self.database_url


# Create settings instance
settings = Settings()

# Validate required DATABASE_URL
if not settings.database_url:
    raise ValueError("DATABASE_URL environment variable is required")
