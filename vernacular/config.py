"""Package Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Every setting can be overridden with a VERNACULAR_* environment variable
    - get_settings() is cached (lru_cache) — single instance per process
    - default_page_size never exceeds max_page_size

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for everything: works out-of-the-box in tests and scripts
"""

from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Package settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="VERNACULAR_", env_file=".env", case_sensitive=False,
        extra="ignore",
    )

    # Paging
    default_page_size: int = Field(20, ge=1)
    max_page_size: int = Field(500, ge=1)

    # Observability
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"

    @model_validator(mode="after")
    def check_page_size_bounds(self) -> "Settings":
        if self.default_page_size > self.max_page_size:
            raise ValueError(
                f"default_page_size ({self.default_page_size}) exceeds "
                f"max_page_size ({self.max_page_size})"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()
