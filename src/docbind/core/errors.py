"""docbind error types with typed error codes.

Error code ranges:
- 1xxx: Target / destination schema
- 2xxx: Config

Extraction errors (``SyntaxError``, ``UnicodeDecodeError``, ``OSError``) are
not wrapped; they propagate from the extractor as raised.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Target (1xxx)
    INVALID_TARGET = 1001
    UNSUPPORTED_SHAPE = 1002
    UNSUPPORTED_MAP_KEY = 1003
    UNSUPPORTED_MAP_VALUE = 1004
    RECORD_NOT_CONSTRUCTIBLE = 1005

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002


@dataclass(frozen=True, slots=True)
class DocBindError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'INVALID_TARGET')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


def _type_name(value: Any) -> str:
    tp = value if isinstance(value, type) else type(value)
    return getattr(tp, "__qualname__", None) or repr(tp)


class InvalidTargetError(DocBindError):
    """The destination is not a mutable record instance."""

    @classmethod
    def for_value(cls, value: Any) -> "InvalidTargetError":
        if value is None:
            reason = "unmarshal(None)"
        elif isinstance(value, type):
            reason = f"unmarshal(class {_type_name(value)}), pass an instance"
        else:
            reason = f"unmarshal(frozen {_type_name(value)})"
        return cls(
            code=ErrorCode.INVALID_TARGET,
            message=f"Invalid destination: {reason}",
            details={"type": "None" if value is None else _type_name(value)},
        )


class UnsupportedShapeError(DocBindError):
    """The destination, or a field inside it, has a shape the engine cannot fill."""

    @classmethod
    def not_a_record(cls, value: Any) -> "UnsupportedShapeError":
        name = _type_name(value)
        return cls(
            code=ErrorCode.UNSUPPORTED_SHAPE,
            message=f"Only dataclass or pydantic model instances are supported, but got {name!r}",
            details={"type": name},
        )

    @classmethod
    def map_key(cls, field_name: str, key_type: Any) -> "UnsupportedShapeError":
        return cls(
            code=ErrorCode.UNSUPPORTED_MAP_KEY,
            message=f"Field {field_name!r}: maps with non-str keys are not supported",
            details={"field": field_name, "key_type": repr(key_type)},
        )

    @classmethod
    def map_value(cls, field_name: str, value_type: Any) -> "UnsupportedShapeError":
        return cls(
            code=ErrorCode.UNSUPPORTED_MAP_VALUE,
            message=f"Field {field_name!r}: maps with non-record values are not supported",
            details={"field": field_name, "value_type": repr(value_type)},
        )

    @classmethod
    def not_constructible(cls, record_type: type, reason: str) -> "UnsupportedShapeError":
        name = _type_name(record_type)
        return cls(
            code=ErrorCode.RECORD_NOT_CONSTRUCTIBLE,
            message=f"Cannot create an empty {name}: {reason}",
            details={"type": name, "reason": reason},
        )


class ConfigError(DocBindError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )
