"""
Configuration management for Release Checker.
"""

import json
import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from . import __version__
from .utils.logging import get_logger, setup_logging
from .utils.validators import ConfigValidator

DEFAULT_USER_AGENT = f"release-checker/{__version__}"
CONFIG_ENV_VAR = "RELEASE_CHECKER_CONFIG"


@dataclass
class CheckerConfig:
    """Configuration for update checks."""
    user_agent: str = DEFAULT_USER_AGENT
    request_timeout: float = 10.0  # Connect/read timeout handed to the transport
    max_workers: int = 4
    comparator: str = "decimal"


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    level: str = "INFO"
    file_path: str = ""  # Empty logs to the console only
    max_file_size: int = 5 * 1024 * 1024
    backup_count: int = 3
    log_to_console: bool = True


class Config:
    """Main configuration class."""

    def __init__(self):
        self.checker = CheckerConfig()
        self.logging = LoggingConfig()
        self.logger = get_logger(__name__)

    @classmethod
    def load_from_file(cls, config_path: Optional[str] = None) -> 'Config':
        """Load configuration from a JSON file, falling back to defaults."""
        if config_path is None:
            config_path = cls.get_default_config_path()

        config_file = Path(config_path)
        config = cls()

        if config_file.exists():
            try:
                with open(config_file, 'r', encoding='utf-8') as f:
                    data = json.load(f)

                config._update_from_dict(data)
                config.logger.info(f"Config loaded from {config_file}")

            except (OSError, ValueError) as e:
                config.logger.warning(f"Failed to load config from {config_file}: {e}")
                config.logger.info("Using default configuration")
        else:
            config.logger.debug(f"No config file at {config_file}, using defaults")

        return config

    def save_to_file(self, config_path: Optional[str] = None):
        """Save configuration to file."""
        if config_path is None:
            config_path = self.get_default_config_path()

        config_file = Path(config_path)
        config_file.parent.mkdir(parents=True, exist_ok=True)

        with open(config_file, 'w', encoding='utf-8') as f:
            json.dump(self.to_dict(), f, indent=2)

        self.logger.info(f"Config saved to {config_file}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            'checker': asdict(self.checker),
            'logging': asdict(self.logging),
        }

    def _update_from_dict(self, data: Dict[str, Any]):
        """Update configuration from dictionary."""
        if not isinstance(data, dict):
            raise ValueError("Configuration root must be a JSON object")

        if isinstance(data.get('checker'), dict):
            self._update_dataclass(self.checker, data['checker'])

        if isinstance(data.get('logging'), dict):
            self._update_dataclass(self.logging, data['logging'])

    def _update_dataclass(self, instance, data: Dict[str, Any]):
        """Update a dataclass instance from dictionary."""
        for key, value in data.items():
            if hasattr(instance, key):
                setattr(instance, key, value)

    @staticmethod
    def get_default_config_path() -> str:
        """Get the default configuration file path."""
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if env_path:
            return env_path
        config_dir = Path.home() / ".config" / "release_checker"
        return str(config_dir / "config.json")

    def validate(self) -> bool:
        """Validate configuration values, logging each problem found."""
        validator = ConfigValidator()
        errors = validator.validate_checker_config(asdict(self.checker))
        errors.extend(validator.validate_logging_config(asdict(self.logging)))

        for error in errors:
            self.logger.error(f"Config validation error: {error}")

        return not errors

    def apply_logging(self):
        """Configure root logging from the logging section."""
        setup_logging(
            level=self.logging.level,
            log_file=self.logging.file_path or None,
            max_bytes=self.logging.max_file_size,
            backup_count=self.logging.backup_count,
            log_to_console=self.logging.log_to_console,
        )
