"""Config module exports."""

from docbind.config.loader import load_config
from docbind.config.models import (
    DocBindConfig,
    ExtractConfig,
    LoggingConfig,
    LogOutputConfig,
)

__all__ = [
    "load_config",
    "DocBindConfig",
    "ExtractConfig",
    "LoggingConfig",
    "LogOutputConfig",
]
