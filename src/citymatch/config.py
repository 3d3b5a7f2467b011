"""
Centralized Configuration Module

Provides configuration classes and environment variable loading for all components.

Usage:
    from citymatch.config import get_config

    config = get_config()
    data_dir = config.data.data_dir
    api_port = config.api.port
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env file if present
load_dotenv()


def _get_project_root() -> Path:
    """Get the project root directory."""
    # config.py -> citymatch -> src -> project_root
    current = Path(__file__).resolve()
    return current.parent.parent.parent


@dataclass
class DataConfig:
    """Listing data configuration."""

    data_dir: str = field(default_factory=lambda: os.getenv(
        "CITYMATCH_DATA_DIR",
        str(_get_project_root() / "data")
    ))
    encoding: str = field(default_factory=lambda: os.getenv(
        "CITYMATCH_CSV_ENCODING", "utf-8-sig"
    ))

    def __post_init__(self):
        # Resolve relative paths
        if not os.path.isabs(self.data_dir):
            self.data_dir = str(_get_project_root() / self.data_dir)

    def weekday_path(self, city_id: str) -> Path:
        """Path to a city's weekday listings file."""
        return Path(self.data_dir) / f"{city_id}_weekdays.csv"

    def weekend_path(self, city_id: str) -> Path:
        """Path to a city's weekend listings file."""
        return Path(self.data_dir) / f"{city_id}_weekends.csv"


@dataclass
class APIConfig:
    """API server configuration."""

    host: str = field(default_factory=lambda: os.getenv(
        "CITYMATCH_API_HOST", "127.0.0.1"
    ))
    port: int = field(default_factory=lambda: int(os.getenv(
        "CITYMATCH_API_PORT", "5000"
    )))
    debug: bool = field(default_factory=lambda: os.getenv(
        "CITYMATCH_DEBUG", "false"
    ).lower() in ("true", "1", "yes"))


@dataclass
class MatchConfig:
    """City matching configuration."""

    top_n: int = field(default_factory=lambda: int(os.getenv(
        "CITYMATCH_TOP_N", "3"
    )))


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = field(default_factory=lambda: os.getenv(
        "CITYMATCH_LOG_LEVEL", "INFO"
    ).upper())
    log_file: Optional[str] = field(default_factory=lambda: os.getenv(
        "CITYMATCH_LOG_FILE"
    ))

    def __post_init__(self):
        # Validate log level
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if self.level not in valid_levels:
            self.level = "INFO"


@dataclass
class Config:
    """Main configuration container."""

    data: DataConfig = field(default_factory=DataConfig)
    api: APIConfig = field(default_factory=APIConfig)
    match: MatchConfig = field(default_factory=MatchConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# Singleton instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global configuration instance.

    Returns:
        Config: The application configuration.
    """
    global _config
    if _config is None:
        _config = Config()
    return _config


def reset_config() -> None:
    """Reset the configuration (useful for testing)."""
    global _config
    _config = None
