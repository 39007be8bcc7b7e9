"""Configuration loading: YAML files layered under environment variables.

Sources, lowest precedence first:

1. Built-in defaults (``docbind.config.models``)
2. Global file ``~/.config/docbind/config.yaml``
3. Repo file ``<repo_root>/.docbind/config.yaml``
4. Environment variables ``DOCBIND__<SECTION>__<KEY>``
5. Keyword arguments to ``load_config``
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from docbind.config.models import DocBindConfig, ExtractConfig, LoggingConfig
from docbind.core.errors import ConfigError

GLOBAL_CONFIG_PATH = Path("~/.config/docbind/config.yaml").expanduser()
REPO_CONFIG_PATH = Path(".docbind") / "config.yaml"
ENV_PREFIX = "DOCBIND__"


def _load_yaml(path: Path) -> dict[str, Any]:
    """Read one config file. A missing or empty file is an empty mapping."""
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return {}
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError.parse_error(str(path), str(e)) from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError.parse_error(str(path), "top-level value must be a mapping")
    return data


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = _deep_merge(current, value)
        else:
            merged[key] = value
    return merged


class _MappingSource(PydanticBaseSettingsSource):
    """Feeds the merged YAML mapping to pydantic-settings as one source."""

    def __init__(self, settings_cls: type[BaseSettings], data: dict[str, Any]) -> None:
        super().__init__(settings_cls)
        self._data = data

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:  # noqa: ARG002
        return self._data.get(field_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        return self._data


class _Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    extract: ExtractConfig = Field(default_factory=ExtractConfig)


def _settings_for(yaml_data: dict[str, Any]) -> type[_Settings]:
    class _LayeredSettings(_Settings):
        @classmethod
        def settings_customise_sources(
            cls,
            settings_cls: type[BaseSettings],
            init_settings: PydanticBaseSettingsSource,
            env_settings: PydanticBaseSettingsSource,
            dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
            file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        ) -> tuple[PydanticBaseSettingsSource, ...]:
            # First source wins
            return (init_settings, env_settings, _MappingSource(settings_cls, yaml_data))

    return _LayeredSettings


def load_config(repo_root: Path | None = None, **kwargs: Any) -> DocBindConfig:
    """Resolve the configuration for a run.

    Args:
        repo_root: Directory holding ``.docbind/config.yaml``. Defaults to the
            current working directory.
        **kwargs: Section overrides, e.g. ``extract={"tag": "doc"}``.

    Raises:
        ConfigError: A config file is not valid YAML, or a value fails
            validation.
    """
    root = repo_root or Path.cwd()
    layered: dict[str, Any] = {}
    for path in (GLOBAL_CONFIG_PATH, root / REPO_CONFIG_PATH):
        layered = _deep_merge(layered, _load_yaml(path))

    try:
        settings = _settings_for(layered)(**kwargs)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"])
        raise ConfigError.invalid_value(field, first.get("input"), first["msg"]) from e
    return DocBindConfig.model_validate(settings.model_dump())
