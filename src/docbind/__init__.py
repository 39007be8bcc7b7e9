"""docbind - unmarshal source doc comments into annotated records."""

from docbind.core.errors import (
    ConfigError,
    DocBindError,
    InvalidTargetError,
    UnsupportedShapeError,
)
from docbind.extract import DocPair, extract_module, extract_package
from docbind.unmarshal import comment, unmarshal_module, unmarshal_package, unmarshal_pairs

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "DocBindError",
    "DocPair",
    "InvalidTargetError",
    "UnsupportedShapeError",
    "comment",
    "extract_module",
    "extract_package",
    "unmarshal_module",
    "unmarshal_package",
    "unmarshal_pairs",
]
