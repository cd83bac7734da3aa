"""
Soulscape Settings

Runtime settings for the API server and CLI, read from environment variables.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _split_origins(value: str) -> List[str]:
    return [origin.strip() for origin in value.split(",") if origin.strip()]


@dataclass
class SoulscapeConfig:
    """
    Soulscape runtime configuration.

    Attributes:
        host: Interface the API server binds to
        port: API server port
        log_level: Root logging level name
        tables_path: Optional YAML file overriding the built-in tables
        cors_origins: Origins allowed by the CORS middleware
    """

    host: str = "0.0.0.0"
    port: int = 5001
    log_level: str = "INFO"
    tables_path: Optional[Path] = None
    cors_origins: List[str] = field(default_factory=lambda: ["*"])

    @classmethod
    def from_env(cls) -> "SoulscapeConfig":
        """
        Create configuration from environment variables.

        Environment variables:
        - SOULSCAPE_HOST: Bind address (default: 0.0.0.0)
        - PORT: Server port (default: 5001)
        - SOULSCAPE_LOG_LEVEL: Logging level (default: INFO)
        - SOULSCAPE_TABLES_PATH: Tables YAML file (default: built-in tables)
        - SOULSCAPE_CORS_ORIGINS: Comma separated origins (default: *)
        """
        port = os.environ.get("PORT", "5001")
        try:
            port_number = int(port)
        except ValueError:
            raise ValueError(f"Invalid PORT: {port}")

        tables_path = os.environ.get("SOULSCAPE_TABLES_PATH")

        return cls(
            host=os.environ.get("SOULSCAPE_HOST", "0.0.0.0"),
            port=port_number,
            log_level=os.environ.get("SOULSCAPE_LOG_LEVEL", "INFO").upper(),
            tables_path=Path(tables_path) if tables_path else None,
            cors_origins=_split_origins(os.environ.get("SOULSCAPE_CORS_ORIGINS", "*")),
        )

    def to_dict(self) -> Dict:
        """Convert configuration to dictionary."""
        return {
            "host": self.host,
            "port": self.port,
            "log_level": self.log_level,
            "tables_path": str(self.tables_path) if self.tables_path else None,
            "cors_origins": self.cors_origins,
        }

    def validate(self) -> bool:
        """
        Validate configuration values.

        Returns:
            bool: True if configuration is valid

        Raises:
            ValueError: If configuration is invalid
        """
        if not 1 <= self.port <= 65535:
            raise ValueError(f"Invalid port: {self.port}")

        if self.log_level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log_level: {self.log_level}. Valid options: {VALID_LOG_LEVELS}"
            )

        return True

    def configure_logging(self) -> None:
        """Configure root logging with the configured level."""
        logging.basicConfig(level=getattr(logging, self.log_level), format=LOG_FORMAT)


# Global configuration instance
_config: Optional[SoulscapeConfig] = None


def get_config() -> SoulscapeConfig:
    """
    Get global configuration instance

    Returns:
        SoulscapeConfig loaded from the environment on first use
    """
    global _config

    if _config is None:
        _config = SoulscapeConfig.from_env()
        _config.validate()
        logger.debug(f"Configuration loaded: {_config.to_dict()}")

    return _config


def reset_config() -> None:
    """Drop the cached configuration so the next get_config() re-reads the environment."""
    global _config
    _config = None
