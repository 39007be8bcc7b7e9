"""Core module exports."""

from docbind.core.errors import (
    ConfigError,
    DocBindError,
    ErrorCode,
    InvalidTargetError,
    UnsupportedShapeError,
)
from docbind.core.logging import (
    configure_logging,
    get_log_file_path,
    get_logger,
)

__all__ = [
    # Errors
    "DocBindError",
    "ErrorCode",
    "ConfigError",
    "InvalidTargetError",
    "UnsupportedShapeError",
    # Logging
    "configure_logging",
    "get_log_file_path",
    "get_logger",
]
