# =============================================================================
# Configuration Module
# =============================================================================
# Pydantic Settings model controlling how validate() reports failures.
# =============================================================================

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ["ValidationSettings", "get_settings"]


class ValidationSettings(BaseSettings):
    """
    Validation reporting settings.

    Maps environment variables with prefix "GEOJSON_IO_":
    - GEOJSON_IO_FAIL_FAST → fail_fast
    - GEOJSON_IO_MAX_ISSUES → max_issues
    - GEOJSON_IO_LOG_LEVEL → log_level

    Attributes:
        fail_fast: Stop at the first failing element or key (default: False)
        max_issues: Cap on top-level issues returned (default: no cap)
        log_level: Logging level for the self-check script (default: "INFO")
    """

    fail_fast: bool = Field(False, description="Stop at the first failing element or key")
    max_issues: Optional[int] = Field(None, ge=1, description="Cap on top-level issues returned")
    log_level: str = Field("INFO", description="Logging level for the self-check script")

    model_config = SettingsConfigDict(
        env_prefix="GEOJSON_IO_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",  # Ignore unrelated env vars from shared .env files
    )


@lru_cache
def get_settings() -> ValidationSettings:
    """Get cached settings instance."""
    return ValidationSettings()
