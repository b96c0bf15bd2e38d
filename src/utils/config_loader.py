"""
Runtime settings for the review proxy.

Settings are read from the environment (a local .env is loaded first) once at
startup and passed to the API through FastAPI dependencies.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_MOCK_DATA_DIR = Path(__file__).parent.parent.parent / "data" / "mock"

_TRUTHY = {"true"}


class Settings(BaseModel):
    """Immutable proxy configuration."""

    model_config = ConfigDict(frozen=True)

    use_mock: bool = False
    host: str = "0.0.0.0"
    port: int = Field(default=3001, ge=1, le=65535)
    devices_api_url: str = ""
    featured_reviews_api_url: str = ""
    image_reviews_api_url: str = ""
    review_list_api_url: str = ""
    product_reviews_api_url: str = ""
    mock_data_dir: Path = DEFAULT_MOCK_DATA_DIR
    upstream_timeout_seconds: float = Field(default=15.0, gt=0)
    log_level: str = "INFO"

    @property
    def mode(self) -> str:
        return "mock" if self.use_mock else "live"

    def upstream_url(self, url_setting: str) -> str:
        """Return the upstream URL stored under the given attribute name."""
        return getattr(self, url_setting, "") or ""


def load_settings(environ: Optional[Mapping[str, str]] = None, *, dotenv: bool = True) -> Settings:
    """
    Build Settings from environment variables.

    Args:
        environ: Mapping to read from. Defaults to os.environ.
        dotenv: Load a .env file into os.environ first (ignored when environ is given).

    Raises:
        ValidationError: If a value cannot be coerced (e.g. PORT=abc)
    """
    if environ is None:
        if dotenv:
            load_dotenv()
        environ = os.environ

    data = {
        # Only the literal "true" enables mock mode.
        "use_mock": environ.get("USE_MOCK", "").strip().lower() in _TRUTHY,
        "host": environ.get("HOST") or "0.0.0.0",
        "port": environ.get("PORT") or 3001,
        "devices_api_url": environ.get("DEVICES_API_URL", ""),
        "featured_reviews_api_url": environ.get("FEATURED_REVIEWS_API_URL", ""),
        "image_reviews_api_url": environ.get("IMAGE_REVIEWS_API_URL", ""),
        "review_list_api_url": environ.get("REVIEW_LIST_API_URL", ""),
        "product_reviews_api_url": environ.get("PRODUCT_REVIEWS_API_URL", ""),
        "mock_data_dir": environ.get("MOCK_DATA_DIR") or DEFAULT_MOCK_DATA_DIR,
        "upstream_timeout_seconds": environ.get("UPSTREAM_TIMEOUT_SECONDS") or 15.0,
        "log_level": (environ.get("LOG_LEVEL") or "INFO").upper(),
    }

    try:
        return Settings(**data)
    except ValidationError as e:
        logger.error(f"Settings validation failed: {e}")
        raise
