from typing import Any, List, Optional, Tuple

from ..comparators import available_comparators
from .logging import get_logger


class ValidationError(ValueError):
    """Raised when an argument or configuration value is unusable."""
    pass


class BaseValidator:
    """Base validator class."""

    def __init__(self):
        self.logger = get_logger(__name__)

    def validate(self, value: Any) -> Tuple[bool, Optional[str]]:
        """
        Validate a value.

        Returns:
            Tuple of (is_valid, error_message)
        """
        raise NotImplementedError

    def is_valid(self, value: Any) -> bool:
        """Check if value is valid."""
        valid, _ = self.validate(value)
        return valid

    def require(self, value: Any) -> Any:
        """Return ``value`` unchanged, or raise ValidationError."""
        valid, error = self.validate(value)
        if not valid:
            raise ValidationError(error)
        return value


class SourceIdValidator(BaseValidator):
    """Validate project identifiers substituted into release API URLs."""

    def validate(self, value: Any) -> Tuple[bool, Optional[str]]:
        if not isinstance(value, str):
            return False, f"Source id must be a string, got {type(value).__name__}"

        if not value.strip():
            return False, "Source id cannot be blank"

        return True, None


class VersionStringValidator(BaseValidator):
    """Validate the locally installed version string."""

    def validate(self, value: Any) -> Tuple[bool, Optional[str]]:
        if not isinstance(value, str):
            return False, f"Local version must be a string, got {type(value).__name__}"

        return True, None


class ConfigValidator:
    """Validate configuration values."""

    VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

    def __init__(self):
        self.logger = get_logger(__name__)

    def validate_checker_config(self, config: dict) -> List[str]:
        """Validate update checker configuration."""
        errors = []

        timeout = config.get('request_timeout', 0)
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0 or timeout > 300:
            errors.append("request_timeout must be between 0 and 300 seconds")

        workers = config.get('max_workers', 0)
        if isinstance(workers, bool) or not isinstance(workers, int) or workers < 1 or workers > 64:
            errors.append("max_workers must be between 1 and 64")

        user_agent = config.get('user_agent', '')
        if not isinstance(user_agent, str) or not user_agent.strip():
            errors.append("user_agent cannot be empty")

        comparator = config.get('comparator', '')
        if comparator not in available_comparators():
            errors.append(f"comparator must be one of: {', '.join(available_comparators())}")

        return errors

    def validate_logging_config(self, config: dict) -> List[str]:
        """Validate logging configuration."""
        errors = []

        level = config.get('level', '')
        if not isinstance(level, str) or level.upper() not in self.VALID_LOG_LEVELS:
            errors.append(f"level must be one of: {', '.join(self.VALID_LOG_LEVELS)}")

        max_size = config.get('max_file_size', 0)
        if not isinstance(max_size, int) or max_size < 1024:
            errors.append("max_file_size must be at least 1024 bytes")

        backups = config.get('backup_count', -1)
        if not isinstance(backups, int) or backups < 0:
            errors.append("backup_count cannot be negative")

        return errors
