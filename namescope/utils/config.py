"""
Configuration System for namescope.

Settings are read from a JSON or YAML file with environment variable
overrides for the options most often changed from build tooling.
"""

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .constants import (
    CONFIG_FILE_NAMES,
    DEFAULT_KERNEL_NAME,
    DEFAULT_LOG_FILE,
    DEFAULT_LOG_LEVEL,
    DEFAULT_PROFILE,
    ENV_CONFIG_FILE,
    ENV_LOG_LEVEL,
    ENV_PROFILE,
)
from .logging import get_logger

logger = get_logger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")


@dataclass
class NamingConfig:
    """Identifier allocation configuration."""

    profile: str = DEFAULT_PROFILE
    extra_reserved: List[str] = field(default_factory=list)
    kernel_name: str = DEFAULT_KERNEL_NAME


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = DEFAULT_LOG_LEVEL
    enable_file_logging: bool = False
    log_file: str = DEFAULT_LOG_FILE


class NamescopeConfig:
    """
    Unified configuration manager for namescope.

    Loads a single JSON or YAML file and exposes its sections as
    dataclasses.
    """

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration file. If None, uses
                NAMESCOPE_CONFIG or the default location.
        """
        self.config_file = self._get_config_file_path(config_file)
        self._config_data = self._load_config()

        self.naming = self._create_naming_config()
        self.logging = self._create_logging_config()

    def _get_config_file_path(self, config_file: Optional[str]) -> Path:
        if config_file:
            return Path(config_file)

        env_file = os.getenv(ENV_CONFIG_FILE)
        if env_file:
            return Path(env_file)

        config_dir = Path(__file__).parent
        for file_name in CONFIG_FILE_NAMES:
            candidate = config_dir / file_name
            if candidate.exists():
                return candidate
        return config_dir / CONFIG_FILE_NAMES[-1]

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from file (JSON or YAML)."""
        if not self.config_file.exists():
            logger.warning(f"Configuration file {self.config_file} not found, using defaults")
            return {}

        try:
            with open(self.config_file, "r") as f:
                if self.config_file.suffix.lower() in YAML_SUFFIXES:
                    config_data = yaml.safe_load(f)
                else:
                    config_data = json.load(f)
        except (OSError, ValueError, yaml.YAMLError) as e:
            logger.error(f"Failed to load configuration: {e}")
            return {}

        if not isinstance(config_data, dict):
            logger.error(f"Configuration in {self.config_file} is not a mapping, using defaults")
            return {}

        logger.info(f"Loaded configuration from {self.config_file}")
        return config_data

    def _create_naming_config(self) -> NamingConfig:
        naming_data = self._config_data.get("naming", {})

        # Environment variable override
        profile = os.getenv(ENV_PROFILE) or naming_data.get("profile", DEFAULT_PROFILE)

        return NamingConfig(
            profile=profile,
            extra_reserved=list(naming_data.get("extra_reserved", [])),
            kernel_name=naming_data.get("kernel_name", DEFAULT_KERNEL_NAME),
        )

    def _create_logging_config(self) -> LoggingConfig:
        log_data = self._config_data.get("logging", {})

        return LoggingConfig(
            level=os.getenv(ENV_LOG_LEVEL) or log_data.get("level", DEFAULT_LOG_LEVEL),
            enable_file_logging=log_data.get("enable_file_logging", False),
            log_file=log_data.get("log_file", DEFAULT_LOG_FILE),
        )

    def profile(self):
        """
        Resolve the configured language profile.

        Returns:
            The registered profile with extra_reserved merged in

        Raises:
            ProfileError: If the configured profile is not registered
        """
        from ..profiles import get_profile

        return get_profile(self.naming.profile).with_reserved(self.naming.extra_reserved)

    def apply_logging(self) -> None:
        """Reconfigure package logging from the logging section."""
        from .logging import setup_logging

        log_file = self.logging.log_file if self.logging.enable_file_logging else None
        setup_logging(level=self.logging.level, log_file=log_file)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "version": "1.0",
            "description": "namescope configuration",
            "naming": {
                "profile": self.naming.profile,
                "extra_reserved": list(self.naming.extra_reserved),
                "kernel_name": self.naming.kernel_name,
            },
            "logging": {
                "level": self.logging.level,
                "enable_file_logging": self.logging.enable_file_logging,
                "log_file": self.logging.log_file,
            },
        }

    def save_config(self) -> None:
        """Save current configuration to file."""
        config_data = self.to_dict()

        try:
            with open(self.config_file, "w") as f:
                if self.config_file.suffix.lower() in YAML_SUFFIXES:
                    yaml.safe_dump(config_data, f, sort_keys=False)
                else:
                    json.dump(config_data, f, indent=2)
            logger.info(f"Configuration saved to {self.config_file}")
        except OSError as e:
            logger.error(f"Failed to save configuration: {e}")


# Global configuration instance
_global_config: Optional[NamescopeConfig] = None


def get_config() -> NamescopeConfig:
    """Get the global configuration instance."""
    global _global_config
    if _global_config is None:
        _global_config = NamescopeConfig()
    return _global_config


def set_config(config: Optional[NamescopeConfig]) -> None:
    """Set the global configuration instance."""
    global _global_config
    _global_config = config


def load_config(config_file: str) -> NamescopeConfig:
    """Load configuration from a specific file."""
    return NamescopeConfig(config_file)
