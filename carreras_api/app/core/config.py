"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for everything except
the key-value store credentials: ``KV_REST_API_URL`` and
``KV_REST_API_TOKEN`` must be supplied, and ``validate`` refuses to
continue without them.
"""

import os
from dataclasses import dataclass, field
from typing import Optional

from .errors import ConfigurationError


def _env(name: str, default: str = "") -> str:
    return os.getenv(name, default)


@dataclass
class Settings:
    """Application settings loaded from environment variables.

    Values are read when the instance is created, not when the module
    is imported, so tests can adjust the environment and build a fresh
    ``Settings()``.
    """

    project_name: str = field(default_factory=lambda: _env("PROJECT_NAME", "Carreras API"))
    api_version: str = field(default_factory=lambda: _env("API_VERSION", "1.0.0"))
    debug: bool = field(default_factory=lambda: _env("DEBUG", "false").lower() in {"1", "true", "yes"})
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))
    log_file: Optional[str] = field(default_factory=lambda: _env("LOG_FILE") or None)

    # Upstash / Vercel KV REST credentials.  Both are mandatory.
    kv_rest_api_url: str = field(default_factory=lambda: _env("KV_REST_API_URL"))
    kv_rest_api_token: str = field(default_factory=lambda: _env("KV_REST_API_TOKEN"))

    # Prefix for the index sets, e.g. ``idx:carreras``.
    index_prefix: str = field(default_factory=lambda: _env("INDEX_PREFIX", "idx"))

    api_host: str = field(default_factory=lambda: _env("API_HOST", "0.0.0.0"))
    api_port: int = field(default_factory=lambda: int(_env("API_PORT", "8000")))

    def validate(self) -> None:
        """Raise ``ConfigurationError`` if the store credentials are missing."""
        missing = []
        if not self.kv_rest_api_url:
            missing.append("KV_REST_API_URL")
        if not self.kv_rest_api_token:
            missing.append("KV_REST_API_TOKEN")
        if missing:
            raise ConfigurationError(
                "KV environment variables are not set: " + ", ".join(missing)
            )


# Instantiate settings once so other modules can import it.  Environment
# variables should be set before importing this module; tests build
# their own instances instead.
settings = Settings()
