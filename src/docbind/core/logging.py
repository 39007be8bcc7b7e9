"""Logging setup: structlog events rendered through stdlib handlers.

Modules log key/value events through ``get_logger(name)``::

    log = get_logger("docbind.unmarshal")
    log.debug("pair_dropped", path="module1/Client")

``configure_logging`` decides where events go. Every configured output gets
its own stdlib handler with its own level and renderer, so a log file can
keep DEBUG events (every dropped pair) while stderr only shows warnings.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from docbind.config.models import LoggingConfig, LogOutputConfig

# First file output of the current configuration, for CLI error pointers
_log_file_path: Path | None = None

_CONSOLE_DESTINATIONS = ("stderr", "stdout")


def get_log_file_path() -> Path | None:
    """Get the current log file path, if any."""
    return _log_file_path


def _level(name: str | None, default: int = logging.INFO) -> int:
    if not name:
        return default
    value = logging.getLevelName(name.upper())
    return value if isinstance(value, int) else default


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", key="timestamp"),
    ]


def configure_logging(
    *,
    config: LoggingConfig | None = None,
    json_format: bool = False,
    level: str = "INFO",
) -> None:
    """Configure structlog and the root stdlib logger.

    Args:
        config: Logging configuration with outputs. Takes precedence over
            ``json_format`` and ``level``.
        json_format: Render a single stderr output as JSON lines
        level: Level of the single stderr output
    """
    global _log_file_path
    from docbind.config.models import LoggingConfig, LogOutputConfig

    if config is None:
        config = LoggingConfig(
            level=level,  # type: ignore[arg-type]
            outputs=[LogOutputConfig(format="json" if json_format else "console")],
        )

    root_level = _level(config.level)
    shared = _shared_processors()
    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.make_filtering_bound_logger(root_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # Reconfiguration (tests, CLI -v) must reach loggers created earlier
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    for old in root.handlers:
        old.close()
    root.handlers.clear()
    root.setLevel(root_level)

    _log_file_path = None
    for output in config.outputs:
        if output.destination not in _CONSOLE_DESTINATIONS and _log_file_path is None:
            _log_file_path = Path(output.destination)
        handler = _open_handler(output.destination)
        handler.setLevel(_level(output.level, root_level))
        handler.setFormatter(_formatter(output, shared))
        root.addHandler(handler)


def _open_handler(destination: str) -> logging.Handler:
    if destination == "stderr":
        return logging.StreamHandler(sys.stderr)
    if destination == "stdout":
        return logging.StreamHandler(sys.stdout)
    path = Path(destination)
    path.parent.mkdir(parents=True, exist_ok=True)
    return logging.FileHandler(path, mode="a", encoding="utf-8")


def _formatter(
    output: LogOutputConfig,
    shared: list[structlog.types.Processor],
) -> structlog.stdlib.ProcessorFormatter:
    renderer: structlog.types.Processor
    if output.format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        stream = sys.stdout if output.destination == "stdout" else sys.stderr
        renderer = structlog.dev.ConsoleRenderer(
            colors=output.destination in _CONSOLE_DESTINATIONS and stream.isatty(),
            pad_event_to=0,
            pad_level=False,
        )
    return structlog.stdlib.ProcessorFormatter(processor=renderer, foreign_pre_chain=shared)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Lazy logger proxy; safe at module level before ``configure_logging`` runs."""
    if name:
        # ``structlog.get_logger(logger=...)`` collides with wrap_logger's ``logger``
        # parameter, so build the same lazy proxy with the initial value directly
        return structlog._config.BoundLoggerLazyProxy(  # type: ignore[return-value]
            None, initial_values={"logger": name}, logger_factory_args=()
        )
    return structlog.get_logger()  # type: ignore[no-any-return]
