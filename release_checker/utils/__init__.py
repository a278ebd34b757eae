"""
Utility modules and helper functions.
"""

from .logging import get_log_file_path, get_logger, setup_logging
from .validators import (BaseValidator, ConfigValidator, SourceIdValidator,
                         ValidationError, VersionStringValidator)

__all__ = [
    "get_logger", "setup_logging", "get_log_file_path",
    "ValidationError", "BaseValidator", "SourceIdValidator",
    "VersionStringValidator", "ConfigValidator",
]
