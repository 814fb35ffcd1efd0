#!/usr/bin/env python3
"""
Configuration Management for Frugeasy

Handles environment-based configuration with defaults and validation.
Supports multiple environments (development, test, production).
"""

import logging
import os
import re
import tempfile
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


@dataclass
class AnalysisConfig:
    """Analysis and reporting configuration."""

    currency: str = "USD"  # Display label only
    largest_limit: int = 5


@dataclass
class Config:
    """
    Main configuration class for the Frugeasy tools.

    Loads configuration from environment variables with defaults and
    validation for each environment type.
    """

    environment: Environment

    # Core directories
    data_dir: Path
    output_dir: Path

    analysis: AnalysisConfig

    # Application settings
    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> "Config":
        """Create configuration from environment variables."""
        env = Environment(os.getenv("FRUGEASY_ENV", "development"))

        # Base directories
        if env == Environment.TEST:
            default_test_dir = Path(tempfile.gettempdir()) / "test_frugeasy"
            base_dir = Path(os.getenv("FRUGEASY_DATA_DIR", str(default_test_dir)))
        else:
            base_dir = Path(os.getenv("FRUGEASY_DATA_DIR", "./data")).expanduser().resolve()

        data_dir = base_dir
        output_dir = data_dir / "reports"

        # Ensure directories exist
        for directory in [data_dir, output_dir]:
            directory.mkdir(parents=True, exist_ok=True)

        analysis = AnalysisConfig(
            currency=os.getenv("FRUGEASY_CURRENCY", "USD").strip().upper(),
            largest_limit=int(os.getenv("FRUGEASY_LARGEST_LIMIT", "5")),
        )

        return cls(
            environment=env,
            data_dir=data_dir,
            output_dir=output_dir,
            analysis=analysis,
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> list:
        """Validate configuration and return list of errors."""
        errors = []

        for name, path in [
            ("data_dir", self.data_dir),
            ("output_dir", self.output_dir),
        ]:
            if not path.exists():
                errors.append(f"{name} does not exist: {path}")

        if not re.fullmatch(r"[A-Z]{3}", self.analysis.currency):
            errors.append(f"FRUGEASY_CURRENCY must be a 3-letter code, got {self.analysis.currency!r}")

        if self.analysis.largest_limit <= 0:
            errors.append("FRUGEASY_LARGEST_LIMIT must be positive")

        if self.log_level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            errors.append(f"Unknown LOG_LEVEL: {self.log_level}")

        return errors

    def setup_logging(self) -> None:
        """Configure logging based on configuration."""
        level = getattr(logging, self.log_level, logging.INFO)

        # Configure format based on environment
        if self.environment == Environment.DEVELOPMENT:
            format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_str = "%(asctime)s - %(levelname)s - %(message)s"

        logging.basicConfig(level=level, format=format_str, datefmt="%Y-%m-%d %H:%M:%S")

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a plain dictionary for display."""
        return {
            "environment": self.environment.value,
            "data_dir": str(self.data_dir),
            "output_dir": str(self.output_dir),
            "analysis": {
                "currency": self.analysis.currency,
                "largest_limit": self.analysis.largest_limit,
            },
            "debug": self.debug,
            "log_level": self.log_level,
        }


# Global configuration instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        config = Config.from_environment()

        errors = config.validate()
        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

        config.setup_logging()
        _config = config

    return _config


def reload_config() -> Config:
    """Reload configuration from environment (useful for testing)."""
    global _config
    _config = None
    return get_config()


def is_development() -> bool:
    """Check if running in development environment."""
    return get_config().environment == Environment.DEVELOPMENT


def is_test() -> bool:
    """Check if running in test environment."""
    return get_config().environment == Environment.TEST


def is_production() -> bool:
    """Check if running in production environment."""
    return get_config().environment == Environment.PRODUCTION
