"""Unmarshal entry points.

``unmarshal_package`` and ``unmarshal_module`` extract doc pairs from source
and feed them, one at a time and in order, through a ``Resolver`` into the
caller's record. ``unmarshal_pairs`` does the same for any pair stream.

The destination is validated before the first pair is read. After that a
failing call (parse error, I/O error, schema error) leaves every leaf that
was already assigned in place; there is no rollback.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Any

from docbind.config.models import ExtractConfig
from docbind.core.errors import InvalidTargetError, UnsupportedShapeError
from docbind.core.logging import get_logger
from docbind.extract.ops import extract_module, extract_package
from docbind.unmarshal.resolver import Resolver
from docbind.unmarshal.schema import is_frozen, is_record_type

log = get_logger("docbind.unmarshal")


def check_target(target: Any) -> None:
    """Reject destinations that cannot be filled.

    Raises:
        InvalidTargetError: ``None``, a class instead of an instance, or a
            frozen record.
        UnsupportedShapeError: an instance that is not a record.
    """
    if target is None or isinstance(target, type):
        raise InvalidTargetError.for_value(target)
    if not is_record_type(type(target)):
        raise UnsupportedShapeError.not_a_record(target)
    if is_frozen(type(target)):
        raise InvalidTargetError.for_value(target)


def _feed(resolver: Resolver, target: Any, pairs: Iterable[tuple[str, str]]) -> int:
    seen = matched = 0
    for path, text in pairs:
        seen += 1
        if resolver.assign(target, path, text):
            matched += 1
        else:
            log.debug("pair_dropped", path=path)
    log.debug("pairs_resolved", seen=seen, matched=matched)
    return matched


def _resolver(config: ExtractConfig) -> Resolver:
    return Resolver(tag=config.tag, wildcard=config.wildcard)


def unmarshal_pairs(
    pairs: Iterable[tuple[str, str]],
    target: Any,
    *,
    config: ExtractConfig | None = None,
) -> int:
    """Resolve ``(path, text)`` pairs into ``target``.

    Returns:
        Number of pairs that matched a leaf.
    """
    config = config or ExtractConfig()
    check_target(target)
    return _feed(_resolver(config), target, pairs)


def unmarshal_package(
    path: Path | str,
    target: Any,
    *,
    config: ExtractConfig | None = None,
) -> int:
    """Fill ``target`` from the source files directly inside ``path``.

    Paths are unprefixed: ``Name`` and ``Owner.member``.

    Returns:
        Number of pairs that matched a leaf.
    """
    config = config or ExtractConfig()
    check_target(target)
    log.debug("unmarshal_package", path=str(path), target=type(target).__qualname__)
    return _feed(_resolver(config), target, extract_package(path, config=config))


def unmarshal_module(
    root: Path | str,
    target: Any,
    *,
    config: ExtractConfig | None = None,
) -> int:
    """Fill ``target`` from every directory under ``root``, root included.

    Pairs from a subdirectory are prefixed with its root-relative path and a
    trailing ``/`` (``module1/module2/Name``), so map fields annotated with
    the wildcard collect one entry per directory.

    Returns:
        Number of pairs that matched a leaf.
    """
    config = config or ExtractConfig()
    check_target(target)
    log.debug("unmarshal_module", root=str(root), target=type(target).__qualname__)
    return _feed(_resolver(config), target, extract_module(root, config=config))
