"""
Application settings loaded from the environment
"""
import os
from typing import List

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from signalpage.utils.exceptions import ConfigurationError

load_dotenv()


class AppSettings(BaseModel):
    """Runtime configuration for the fit scorer API"""
    environment: str = Field(default="development", description="development, production or testing")
    log_level: str = Field(default="INFO", description="Root log level in production")
    app_title: str = Field(default="SignalPage Fit Scorer API", description="FastAPI application title")
    app_version: str = Field(default="1.0.0", description="Reported API version")
    cors_origins: List[str] = Field(default_factory=lambda: ["*"], description="Allowed CORS origins")
    slow_request_threshold: float = Field(default=2.0, gt=0.0, description="Seconds before a request is logged as slow")
    max_rank_jobs: int = Field(default=50, ge=1, description="Maximum number of jobs accepted by /rank")


def _env_float(key: str, default: float) -> float:
    raw = os.getenv(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ConfigurationError(f"{key} must be a number", config_key=key, config_value=raw, cause=e)


def _env_int(key: str, default: int) -> int:
    raw = os.getenv(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError as e:
        raise ConfigurationError(f"{key} must be an integer", config_key=key, config_value=raw, cause=e)
    if value < 1:
        raise ConfigurationError(f"{key} must be at least 1", config_key=key, config_value=raw)
    return value


def load_settings() -> AppSettings:
    """Build settings from environment variables (and .env if present)"""
    origins = os.getenv("CORS_ORIGINS", "*")
    threshold = _env_float("SLOW_REQUEST_THRESHOLD", 2.0)
    if threshold <= 0:
        raise ConfigurationError(
            "SLOW_REQUEST_THRESHOLD must be positive",
            config_key="SLOW_REQUEST_THRESHOLD",
            config_value=threshold,
        )

    return AppSettings(
        environment=os.getenv("ENVIRONMENT", "development").lower(),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        app_title=os.getenv("APP_TITLE", "SignalPage Fit Scorer API"),
        cors_origins=[o.strip() for o in origins.split(",") if o.strip()] or ["*"],
        slow_request_threshold=threshold,
        max_rank_jobs=_env_int("MAX_RANK_JOBS", 50),
    )


_settings = None


def get_settings() -> AppSettings:
    global _settings

    if _settings is None:
        _settings = load_settings()
    return _settings


def reset_settings():
    """Drop the cached settings (used by tests after changing the environment)"""
    global _settings
    _settings = None
