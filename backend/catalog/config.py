"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All settings come from CATALOG_* environment variables or .env
    - get_settings() is cached (lru_cache): single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env support
    - Defaults provided for every setting: works out-of-the-box with an empty catalog
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from catalog.core.domain_types import Locale, RECORD_ID_LENGTH, RECYCLE_EXPIRY_LABELS


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CATALOG_", env_file=".env", case_sensitive=False,
    )

    # Recycle bin
    creator: str = "anonymous"
    locale: Locale = Locale.EN
    record_id_length: int = Field(RECORD_ID_LENGTH, ge=4, le=32)

    # Startup state (JSON snapshot file, optional)
    initial_snapshot_path: str | None = None

    @field_validator("initial_snapshot_path", mode="before")
    @classmethod
    def blank_path_is_none(cls, v: str | None) -> str | None:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def expiry_label(self) -> str:
        """Human expiry label stamped on every new recycle record."""
        return RECYCLE_EXPIRY_LABELS[self.locale]


@lru_cache
def get_settings() -> Settings:
    return Settings()
