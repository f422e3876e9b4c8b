"""Configuration management for the wishlist client.

Loads configuration from environment variables and provides defaults.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

# Load .env file if present
load_dotenv()

DEFAULT_HOST = "https://wishlist.mohsin.ninja"
DEFAULT_PORT = 443
DEFAULT_VERSION = "v1"
DEFAULT_USER_ID = 1
DEFAULT_TIMEOUT = 10.0

# Placeholder until a login flow issues real tokens
PLACEHOLDER_TOKEN = (
    "eyJ0eXAiOiJKV1QiLCJhbGciOiJIUzI1NiJ9"
    ".eyJ1c2VyX2lkIjoxfQ"
    ".UIGp2674w1UQjIg3av5vbT1X-8lIIjZjPkkjsHJeAeY"
)


@dataclass
class Config:
    """Client configuration."""

    # Service location
    host: str
    port: int
    version: str

    # Credentials
    api_key: Optional[str]
    api_secret: Optional[str]
    access_token: str

    # Caller
    user_id: int

    # HTTP
    timeout: float  # seconds

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        return cls(
            host=os.environ.get("WISHLIST_HOST", DEFAULT_HOST).rstrip("/"),
            port=int(os.environ.get("WISHLIST_PORT", str(DEFAULT_PORT))),
            version=os.environ.get("WISHLIST_API_VERSION", DEFAULT_VERSION),
            api_key=os.environ.get("WISHLIST_API_KEY"),
            api_secret=os.environ.get("WISHLIST_API_SECRET"),
            access_token=os.environ.get("WISHLIST_ACCESS_TOKEN", PLACEHOLDER_TOKEN),
            user_id=int(os.environ.get("WISHLIST_USER_ID", str(DEFAULT_USER_ID))),
            timeout=float(os.environ.get("WISHLIST_TIMEOUT", str(DEFAULT_TIMEOUT))),
        )

    @property
    def base_url(self) -> str:
        """Root URL every API path is joined onto."""
        return f"{self.host}:{self.port}/api/{self.version}"

    def validate(self) -> list[str]:
        """Validate configuration, return list of errors."""
        errors = []

        if not self.host.startswith(("http://", "https://")):
            errors.append(f"Host must include a scheme: {self.host}")
        if not 0 < self.port < 65536:
            errors.append(f"Port out of range: {self.port}")
        if self.timeout <= 0:
            errors.append(f"Timeout must be positive: {self.timeout}")
        if not self.api_key:
            errors.append("WISHLIST_API_KEY not set")
        if not self.api_secret:
            errors.append("WISHLIST_API_SECRET not set")

        return errors

    def has_credentials(self) -> bool:
        """Check if API key and secret are present."""
        return bool(self.api_key and self.api_secret)


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get or create the global config instance."""
    global _config
    if _config is None:
        _config = Config.from_env()
    return _config


def reset_config() -> None:
    """Reset the global config instance. Used for testing."""
    global _config
    _config = None
