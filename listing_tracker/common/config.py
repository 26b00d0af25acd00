"""Project configuration and paths.

Loads settings from config/settings.yaml and environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

# === Paths ===
PROJECT_ROOT = Path(__file__).resolve().parents[2]
CONFIG_DIR = PROJECT_ROOT / "config"
DATA_DIR = PROJECT_ROOT / "data"

# Load .env from project root
load_dotenv(PROJECT_ROOT / ".env")


class SupabaseSettings(BaseModel):
    """Location of the listings table behind the PostgREST API."""
    rest_path: str = "/rest/v1"
    table: str = "listings"


class QuerySettings(BaseModel):
    """Fixed query used by every listing load."""
    status: str = "active"
    transmission: str = "manual"
    order_by: str = "investment_score"
    descending: bool = True
    limit: int = Field(default=50, gt=0)


class HTTPSettings(BaseModel):
    """Settings for the HTTP client."""
    request_timeout: float = 15.0
    max_retries: int = Field(default=1, ge=0)  # extra attempts after the first
    backoff_base: float = 2.0


class MetricsSettings(BaseModel):
    """Thresholds for derived metrics."""
    high_score_threshold: float = 8.5


class DisplaySettings(BaseModel):
    """Presentation settings."""
    default_currency: str = "EUR"
    currency_symbols: dict[str, str] = Field(
        default_factory=lambda: {"EUR": "€", "USD": "$", "GBP": "£", "CHF": "CHF "}
    )


class Settings(BaseModel):
    """Top-level application settings."""
    supabase: SupabaseSettings = Field(default_factory=SupabaseSettings)
    query: QuerySettings = Field(default_factory=QuerySettings)
    http: HTTPSettings = Field(default_factory=HTTPSettings)
    metrics: MetricsSettings = Field(default_factory=MetricsSettings)
    display: DisplaySettings = Field(default_factory=DisplaySettings)

    @classmethod
    def load(cls, path: str | Path | None = None) -> Settings:
        """Load settings from YAML, falling back to defaults.

        The file is taken from ``path``, then the LISTING_TRACKER_SETTINGS
        environment variable, then config/settings.yaml.
        """
        if path is None:
            path = os.getenv("LISTING_TRACKER_SETTINGS") or CONFIG_DIR / "settings.yaml"
        settings_path = Path(path)
        if settings_path.exists():
            with open(settings_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            return cls(**data)
        return cls()


def get_supabase_url() -> str:
    """Get the Supabase project URL from environment (empty if unset)."""
    return os.getenv("SUPABASE_URL") or os.getenv("NEXT_PUBLIC_SUPABASE_URL", "")


def get_supabase_key() -> str:
    """Get the Supabase anon API key from environment (empty if unset)."""
    return os.getenv("SUPABASE_ANON_KEY") or os.getenv("NEXT_PUBLIC_SUPABASE_ANON_KEY", "")


# Singleton settings instance
settings = Settings.load()
