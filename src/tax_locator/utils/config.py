"""
Configuration utilities for the Tax Locator CLI tool.
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from ..lookup.errors import ConfigError

# Settings that must be present before any lookup is attempted, keyed to the
# environment variable that supplies them.
REQUIRED_KEYS = {
    "geocoder_api_key": "OPENCAGE_API_KEY",
    "tax_api_key": "API_NINJAS_KEY",
}


class Config:
    """Configuration manager for the Tax Locator project."""

    def __init__(self, env_file: Optional[str] = None) -> None:
        """Initialize configuration.

        If an env_file path is provided, load environment variables from it
        without overriding variables that are already set. Values are then read
        from the process environment.
        """
        self.env_file = env_file
        self._load_environment()
        self._config = self._load_config()

    def _load_environment(self) -> None:
        """Load environment variables from explicit .env file if provided."""
        if not self.env_file:
            return
        env_path = Path(self.env_file)
        if env_path.exists():
            load_dotenv(env_path, override=False)

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from environment variables."""
        return {
            # Core settings
            "log_level": self._get_str("LOG_LEVEL", default="INFO"),
            # Geocoding API
            "geocoder_api_key": self._get_str("OPENCAGE_API_KEY"),
            "geocoder_base_url": self._get_str("GEOCODER_BASE_URL"),
            # Sales tax API
            "tax_api_key": self._get_str("API_NINJAS_KEY"),
            "tax_base_url": self._get_str("SALES_TAX_BASE_URL"),
            # HTTP settings
            "http_timeout": self._get_float("HTTP_TIMEOUT_SECONDS", default=10.0),
        }

    def _get_str(self, key: str, default: str = "") -> str:
        """Get string configuration value."""
        return os.getenv(key, default).strip() or default

    def _get_float(self, key: str, default: float = 0.0) -> float:
        """Get float configuration value."""
        try:
            value = float(os.getenv(key, str(default)))
        except ValueError:
            return default
        return value if value > 0 else default

    def validate(self) -> "Config":
        """Fail fast when a required credential is missing.

        Raises:
            ConfigError: naming every missing environment variable
        """
        missing = [env for key, env in REQUIRED_KEYS.items() if not self._config.get(key)]
        if missing:
            raise ConfigError(f"API key(s) are missing: {', '.join(missing)}")
        return self

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value."""
        return self._config.get(key, default)

    def __getitem__(self, key: str) -> Any:
        """Get configuration value using bracket notation."""
        return self._config[key]

    def __contains__(self, key: str) -> bool:
        """Check if configuration key exists."""
        return key in self._config
