#!/usr/bin/env python3
"""Configuration management for the Forge MCP server."""

import os
from typing import Any, Optional, Dict
from dataclasses import dataclass
from dotenv import load_dotenv
from config.logging_setup import get_logger
from config.server_instructions import server_instructions


# Load environment variables from .env file
load_dotenv()

logger = get_logger(__name__)

DEFAULT_BASE_URL = "https://forge.laravel.com/api/v1"
DEFAULT_TIMEOUT = 30.0


@dataclass
class APIConfig:
    """Configuration for the Forge API connection."""
    base_url: str = DEFAULT_BASE_URL
    token: Optional[str] = None
    verify_ssl: bool = True
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self):
        self.base_url = self.base_url.rstrip('/')


class ConfigManager:
    """Loads the API configuration once from the environment."""

    def __init__(self):
        self.api_config = self._load_api_config()
        self.server_instructions = server_instructions

    def _load_api_config(self) -> APIConfig:
        base_url = os.getenv("FORGE_API_URL") or DEFAULT_BASE_URL
        token = os.getenv("FORGE_API_TOKEN") or None
        verify_ssl = os.getenv("FORGE_VERIFY_SSL", "true").strip().lower() in ("true", "1", "yes")

        return APIConfig(
            base_url=base_url,
            token=token.strip() if token else None,
            verify_ssl=verify_ssl,
            timeout=self._load_timeout()
        )

    def _load_timeout(self) -> float:
        raw = os.getenv("FORGE_API_TIMEOUT")
        if not raw:
            return DEFAULT_TIMEOUT
        try:
            timeout = float(raw)
        except ValueError:
            logger.warning("Invalid FORGE_API_TIMEOUT %r, using %ss", raw, DEFAULT_TIMEOUT)
            return DEFAULT_TIMEOUT
        if timeout <= 0:
            logger.warning("FORGE_API_TIMEOUT must be positive, using %ss", DEFAULT_TIMEOUT)
            return DEFAULT_TIMEOUT
        return timeout

    @property
    def has_credentials(self) -> bool:
        return bool(self.api_config.token)

    def get_config_summary(self) -> Dict[str, Any]:
        """Get configuration summary for debugging."""
        return {
            'base_url': self.api_config.base_url,
            'token_present': self.has_credentials,
            'verify_ssl': self.api_config.verify_ssl,
            'timeout': self.api_config.timeout,
        }


# Global configuration instance
config = ConfigManager()
