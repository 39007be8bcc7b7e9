"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (DOCBIND__SECTION__KEY)
3. Repo YAML (.docbind/config.yaml)
4. Global YAML (~/.config/docbind/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    DOCBIND__<SECTION>__<KEY>=<VALUE>

Examples:
    DOCBIND__LOGGING__LEVEL=DEBUG
    DOCBIND__EXTRACT__TAG=doc
    DOCBIND__EXTRACT__LANGUAGES='["go"]'
    DOCBIND__EXTRACT__EXCLUDE_DIRS='["__pycache__", ".venv"]'
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        DOCBIND__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level. DEBUG logs every dropped pair.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class ExtractConfig(BaseModel):
    """Extraction and path-matching configuration.

    Env vars:
        DOCBIND__EXTRACT__TAG: Field metadata key holding the path annotation
        DOCBIND__EXTRACT__WILDCARD: Annotation that matches unconditionally
        DOCBIND__EXTRACT__ENCODING: Source file encoding
    """

    tag: str = Field(
        default="comment",
        description="Metadata key read from dataclass metadata or pydantic json_schema_extra.",
    )
    wildcard: str = Field(
        default="*",
        description="Annotation value matching any path. Required on map fields.",
    )
    languages: list[str] = Field(
        default_factory=lambda: ["go", "python"],
        description="Language packs to extract from. Each pack claims its own file extensions.",
    )
    encoding: str = Field(
        default="utf-8",
        description="Encoding used to read source files.",
    )
    exclude_dirs: list[str] = Field(
        default_factory=list,
        description="Directory names pruned during a module walk. "
        "Empty by default: every directory is visited.",
    )

    @field_validator("tag", "wildcard")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("must not be empty")
        return v

    @field_validator("languages")
    @classmethod
    def validate_languages(cls, v: list[str]) -> list[str]:
        if not v:
            raise ValueError("at least one language is required")
        return [name.lower() for name in v]


class DocBindConfig(BaseModel):
    """Root configuration model."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    extract: ExtractConfig = Field(default_factory=ExtractConfig)
