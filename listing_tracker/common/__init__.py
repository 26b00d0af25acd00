# Common utilities and shared modules
"""
Shared components used by every listing tracker module:
- Listing data model (Pydantic)
- HTTP client
- Logging configuration
- Project configuration
"""

from .config import settings, PROJECT_ROOT, DATA_DIR, Settings
from .http_client import HTTPClient
from .logging import setup_logging
from .models import Listing

__all__ = [
    "settings",
    "PROJECT_ROOT",
    "DATA_DIR",
    "Settings",
    "HTTPClient",
    "setup_logging",
    "Listing",
]
