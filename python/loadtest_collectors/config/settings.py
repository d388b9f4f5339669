"""
Exporter configuration with environment variable support.

Environment Variables:
    LOADTEST_EXPORTER_PORT - Port for the Prometheus HTTP endpoint (default: 9270)
    LOADTEST_EXPORTER_HOST - Host to bind to (default: 0.0.0.0)
    LOADTEST_DEFINITIONS_PATH - JSON file with collector definitions
    LOADTEST_DEBUG - Enable debug logging (true/false)
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Optional

logger = logging.getLogger("loadtest.config")


def _get_definitions_path_from_env() -> Optional[str]:
    """Read the definitions path, treating an empty value as unset."""
    path = os.getenv("LOADTEST_DEFINITIONS_PATH", "").strip()
    return path or None


@dataclass
class ExporterConfig:
    """Exporter configuration."""

    port: int = field(
        default_factory=lambda: int(os.getenv("LOADTEST_EXPORTER_PORT", "9270"))
    )
    host: str = field(
        default_factory=lambda: os.getenv("LOADTEST_EXPORTER_HOST", "0.0.0.0")
    )

    definitions_path: Optional[str] = field(default_factory=_get_definitions_path_from_env)

    debug: bool = field(
        default_factory=lambda: os.getenv("LOADTEST_DEBUG", "false").lower() == "true"
    )

    def __post_init__(self):
        """Validate settings after initialization."""
        if not 0 < self.port < 65536:
            raise ValueError(f"Exporter port out of range: {self.port}")

        if not self.definitions_path:
            logger.warning(
                "No collector definitions configured. Set LOADTEST_DEFINITIONS_PATH environment variable."
            )

    @property
    def log_level(self) -> str:
        """Log level implied by the debug flag."""
        return "DEBUG" if self.debug else os.getenv("LOADTEST_LOG_LEVEL", "INFO").upper()


_config: Optional[ExporterConfig] = None


def get_config() -> ExporterConfig:
    """Get or create the global config instance."""
    global _config
    if _config is None:
        _config = ExporterConfig()
    return _config


def reset_config():
    """Reset the global config (useful for testing)."""
    global _config
    _config = None
