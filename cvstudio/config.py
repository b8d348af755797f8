"""Application settings."""

import os
from functools import lru_cache
from pydantic_settings import BaseSettings


class AppSettings(BaseSettings):
    """CV Studio configuration settings."""

    cv_default_language: str = os.getenv("CV_DEFAULT_LANGUAGE", "tr")
    cv_default_theme: str = os.getenv("CV_DEFAULT_THEME", "modern")
    cv_export_pixel_ratio: float = float(os.getenv("CV_EXPORT_PIXEL_RATIO", "2"))
    cv_export_retries: int = int(os.getenv("CV_EXPORT_RETRIES", "1"))
    cv_max_photo_bytes: int = int(os.getenv("CV_MAX_PHOTO_BYTES", str(5 * 1024 * 1024)))
    cv_log_level: str = os.getenv("CV_LOG_LEVEL", "INFO")

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """
    Get the cached application settings.

    Returns:
        AppSettings: Settings loaded from the environment and ``.env``
    """
    return AppSettings()
