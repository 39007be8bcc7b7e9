"""CLI utilities."""

import importlib
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

import click

from docbind.core.errors import DocBindError
from docbind.core.logging import get_log_file_path


def import_schema(spec: str, import_paths: tuple[Path, ...] = ()) -> type:
    """Resolve a ``package.module:ClassName`` reference.

    Args:
        spec: Module path and attribute separated by a colon
        import_paths: Directories put in front of sys.path before importing

    Raises:
        click.BadParameter: If the reference cannot be imported
    """
    module_name, sep, attr = spec.partition(":")
    if not sep or not module_name or not attr:
        raise click.BadParameter(f"expected 'module:Class', got {spec!r}", param_hint="--schema")

    for path in reversed(import_paths):
        entry = str(path.resolve())
        if entry not in sys.path:
            sys.path.insert(0, entry)

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise click.BadParameter(f"cannot import {module_name!r}: {e}", param_hint="--schema") from e

    obj: Any = module
    for part in attr.split("."):
        obj = getattr(obj, part, None)
        if obj is None:
            raise click.BadParameter(f"{module_name!r} has no attribute {attr!r}", param_hint="--schema")
    if not isinstance(obj, type):
        raise click.BadParameter(f"{spec!r} is not a class", param_hint="--schema")
    return obj


@contextmanager
def cli_errors() -> Iterator[None]:
    """Turn docbind, parse and I/O errors into ClickException."""
    try:
        yield
    except DocBindError as e:
        raise click.ClickException(_with_log_pointer(str(e))) from e
    except SyntaxError as e:
        location = f"{e.filename}:{e.lineno}" if e.filename else "<source>"
        raise click.ClickException(f"{location}: {e.msg}") from e
    except OSError as e:
        raise click.ClickException(_with_log_pointer(str(e))) from e


def _with_log_pointer(message: str) -> str:
    log_file = get_log_file_path()
    if log_file is None:
        return message
    return f"{message}\nSee {log_file} for details."
