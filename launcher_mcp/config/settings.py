"""Application settings from environment variables.

Centralized environment variable parsing and validation.
"""

import logging
import os
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass
class Settings:
    """Application settings from environment.

    Handles parsing, validation, and defaults for all env vars.
    """

    # Transport
    transport: str = field(default="http")
    http_host: str = field(default="0.0.0.0")
    http_port: int = field(default=8000)

    # Logging
    log_level: str = field(default="INFO")
    log_colors: bool = field(default=True)
    log_payloads: bool = field(default=False)
    slow_threshold_ms: int = field(default=1000)
    include_traceback: bool = field(default=False)

    # Paths
    lowercase_paths: bool = field(default=True)

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from LAUNCHER_* environment variables.

        Returns:
            Settings instance with values from environment
        """
        return cls(
            transport=cls._get_transport(),
            http_host=os.getenv("LAUNCHER_HTTP_HOST", "0.0.0.0"),
            http_port=cls._get_int("LAUNCHER_HTTP_PORT", 8000),
            log_level=os.getenv("LAUNCHER_LOG_LEVEL", "INFO").upper(),
            log_colors=cls._get_bool("LAUNCHER_LOG_COLORS", True),
            log_payloads=cls._get_bool("LAUNCHER_LOG_PAYLOADS", False),
            slow_threshold_ms=cls._get_int("LAUNCHER_SLOW_THRESHOLD_MS", 1000),
            include_traceback=cls._get_bool("LAUNCHER_INCLUDE_TRACEBACK", False),
            lowercase_paths=cls._get_bool("LAUNCHER_LOWERCASE_PATHS", True),
        )

    @staticmethod
    def _get_int(key: str, default: int) -> int:
        """Get integer from environment.

        Args:
            key: Environment variable key
            default: Default value if not set or invalid

        Returns:
            Integer value from environment or default
        """
        value = os.getenv(key)
        if value is None:
            return default

        try:
            return int(value)
        except ValueError:
            logger.warning("Invalid int for %s: %s, using default %d", key, value, default)
            return default

    @staticmethod
    def _get_bool(key: str, default: bool) -> bool:
        value = os.getenv(key)
        if value is None:
            return default
        return value.lower() in ("1", "true", "yes", "on")

    @staticmethod
    def _get_transport() -> str:
        """Get transport ("http" or "stdio"), falling back to http."""
        transport = os.getenv("LAUNCHER_TRANSPORT", "").lower()
        if transport in ("http", "stdio"):
            return transport
        if transport:
            logger.warning("Unknown transport %r, using http", transport)
        return "http"
