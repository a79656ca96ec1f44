"""Configuration for the credibility checker."""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://factchecktools.googleapis.com/v1alpha1"
DEFAULT_STORAGE_PATH = Path.home() / ".credibility_checker" / "storage.json"


class FactCheckConfig(BaseModel):
    """Settings shared by the fact-check provider, service and stores."""

    model_config = ConfigDict(frozen=True)

    api_key: Optional[str] = Field(None, description="Google Fact Check Tools API key")
    base_url: str = Field(default=DEFAULT_BASE_URL, description="Fact Check Tools API root")
    timeout: float = Field(default=10.0, gt=0, description="Request timeout in seconds")
    history_limit: int = Field(default=50, ge=1, description="Records kept in history")
    fallback_delay: float = Field(
        default=1.5, ge=0, description="Simulated latency of the fallback in seconds"
    )
    storage_path: Path = Field(
        default=DEFAULT_STORAGE_PATH, description="File backing persisted history and key"
    )

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "FactCheckConfig":
        """Create configuration from environment variables.

        A ``.env`` file is loaded first when present; variables already set in
        the environment win.
        """
        if load_dotenv(dotenv_path or find_dotenv(usecwd=True)):
            logger.info("📁 Environment variables loaded from .env file via python-dotenv")

        values = {}
        api_key = os.getenv("GOOGLE_FACTCHECK_API_KEY")
        if api_key:
            values["api_key"] = api_key
        else:
            logger.warning("⚠️ GOOGLE_FACTCHECK_API_KEY not found in environment variables")

        env_fields = {
            "base_url": "FACTCHECK_BASE_URL",
            "timeout": "FACTCHECK_TIMEOUT",
            "history_limit": "FACTCHECK_HISTORY_LIMIT",
            "fallback_delay": "FACTCHECK_FALLBACK_DELAY",
            "storage_path": "FACTCHECK_STORAGE_PATH",
        }
        for field_name, env_name in env_fields.items():
            value = os.getenv(env_name)
            if value:
                values[field_name] = value

        return cls(**values)
