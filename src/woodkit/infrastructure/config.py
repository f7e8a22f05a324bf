"""
Application configuration using Pydantic Settings.
All environment-specific values are centralized here.
"""

from decimal import Decimal
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from ``WOODKIT_*`` environment variables."""

    # ── Storage ──────────────────────────────────────────
    data_dir: Path = Path("data")

    # ── Pricing ──────────────────────────────────────────
    currency: str = "NIS"
    tax_rate: Decimal = Field(default=Decimal("0.17"), ge=0, le=1)
    minimum_price_ratio: Decimal = Field(default=Decimal("0.8"), ge=0, le=1)

    # ── Logging ──────────────────────────────────────────
    log_level: str = "INFO"

    model_config = {
        "env_prefix": "WOODKIT_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


@lru_cache()
def get_settings() -> Settings:
    """Return cached application settings (singleton)."""
    return Settings()
