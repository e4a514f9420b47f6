"""
Library configuration.

Centralized configuration management with environment variables.
"""

import logging
import math
from functools import lru_cache
from typing import Any, Optional

from pydantic import ValidationError, ValidatorFunctionWrapHandler, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_COMPARISON_EPSILON = 1e-9

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Library settings"""

    model_config = SettingsConfigDict(
        env_prefix="POLYLIB_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Polynomial equality
    COMPARISON_EPSILON: float = DEFAULT_COMPARISON_EPSILON

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "text"  # json or text
    LOG_FILE: Optional[str] = None

    @field_validator("COMPARISON_EPSILON", mode="wrap")
    @classmethod
    def _validate_epsilon(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> float:
        """Fall back to the default tolerance instead of failing the whole model."""
        try:
            epsilon = handler(value)
        except ValidationError:
            epsilon = None

        if epsilon is None or not math.isfinite(epsilon) or epsilon <= 0:
            logger.debug(
                "Invalid COMPARISON_EPSILON %r, using default %s", value, DEFAULT_COMPARISON_EPSILON
            )
            return DEFAULT_COMPARISON_EPSILON
        return epsilon


def load_settings() -> Settings:
    """
    Build settings from the environment.

    A malformed tolerance only resets that one setting (see the validator).
    Any other validation failure falls back to the defaults for everything.
    """
    try:
        return Settings()
    except ValidationError as exc:
        logger.debug("Invalid polylib settings, using defaults: %s", exc)
        return Settings.model_construct()


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return load_settings()


# Global settings instance
settings = get_settings()
