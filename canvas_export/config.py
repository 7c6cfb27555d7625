"""
Service configuration, read from ``APP_*`` environment variables and ``.env``.
"""
import logging
from functools import lru_cache
from typing import Any, List, Literal

from dotenv import load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()

logger = logging.getLogger(__name__)

Environment = Literal["development", "staging", "production"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Canvas export service settings"""

    # --- service ---
    app_name: str = "Canvas Export Service"
    app_version: str = "0.1.0"
    api_title: str = "Canvas Export API"
    environment: Environment = "development"
    debug: bool = True
    cors_origins: List[str] = ["http://localhost:3000"]

    # --- logging ---
    log_level: LogLevel = "INFO"
    log_dir: str = "logs"

    # --- export ---
    # Off: property text is interpolated verbatim into XML documents
    export_escape_values: bool = False

    # --- stored projects ---
    project_store_backend: Literal["memory", "filesystem"] = "memory"
    project_store_path: str = "./project_store"

    @field_validator('log_level', mode='before')
    @classmethod
    def normalize_log_level(cls, v: Any) -> str:
        return str(v).strip().upper()

    @field_validator('environment', mode='before')
    @classmethod
    def normalize_environment(cls, v: Any) -> str:
        value = str(v).strip().lower()
        if value not in ("development", "staging", "production"):
            logger.warning(f"Unknown environment '{v}', using 'development'")
            return "development"
        return value

    @field_validator('project_store_backend', mode='before')
    @classmethod
    def normalize_store_backend(cls, v: Any) -> str:
        return str(v).strip().lower()

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
