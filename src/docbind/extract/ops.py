"""Extraction entry points: file, package (one directory) and module (a tree).

Everything here is lazy. Files are read and parsed only when the returned
iterator reaches them, so parse and I/O errors surface during iteration and
propagate unchanged (``SyntaxError``, ``UnicodeDecodeError``, ``OSError``).
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from pathlib import Path

from docbind.config.models import ExtractConfig
from docbind.core.logging import get_logger
from docbind.extract.languages import LanguagePack, pack_for_suffix, parse, resolve_packs
from docbind.extract.models import SCOPE_SEP, DocPair

log = get_logger("docbind.extract")


def extract_source(
    content: bytes,
    pack: LanguagePack,
    *,
    prefix: str = "",
    filename: str = "<source>",
    encoding: str = "utf-8",
) -> Iterator[DocPair]:
    """Yield the pairs of one in-memory source file."""
    tree = parse(pack, content, filename)

    def node_text(node: object) -> str:
        return node.text.decode(encoding)  # type: ignore[attr-defined]

    for name, text in pack.collector(tree.root_node, node_text):
        yield DocPair(prefix + name, text)


def extract_file(
    path: Path | str,
    prefix: str = "",
    *,
    config: ExtractConfig | None = None,
) -> Iterator[DocPair]:
    config = config or ExtractConfig()
    path = Path(path)
    pack = pack_for_suffix(path.suffix, resolve_packs(config.languages))
    if pack is None:
        raise ValueError(f"Unsupported file extension: {path.suffix or path.name}")
    yield from extract_source(
        path.read_bytes(),
        pack,
        prefix=prefix,
        filename=str(path),
        encoding=config.encoding,
    )


def extract_package(
    path: Path | str,
    prefix: str = "",
    *,
    config: ExtractConfig | None = None,
) -> Iterator[DocPair]:
    """Yield the pairs of every source file directly inside ``path``.

    Files are visited in name order; subdirectories are not entered.
    """
    config = config or ExtractConfig()
    packs = resolve_packs(config.languages)
    directory = Path(path)
    for entry in sorted(directory.iterdir()):
        if not entry.is_file():
            continue
        pack = pack_for_suffix(entry.suffix, packs)
        if pack is None:
            continue
        yield from extract_source(
            entry.read_bytes(),
            pack,
            prefix=prefix,
            filename=str(entry),
            encoding=config.encoding,
        )


def _raise(err: OSError) -> None:
    raise err


def iter_packages(root: Path | str, *, exclude_dirs: Iterable[str] = ()) -> Iterator[tuple[Path, str]]:
    """Yield ``(directory, prefix)`` for ``root`` and every directory below it.

    The root's prefix is empty; every other prefix is the root-relative POSIX
    path plus ``/``. Directories are visited top-down in name order, whether
    or not they hold source files. Walk errors are raised, not skipped.
    """
    root = Path(root)
    excluded = frozenset(exclude_dirs)
    for dirpath, dirnames, _filenames in os.walk(root, onerror=_raise):
        dirnames[:] = sorted(d for d in dirnames if d not in excluded)
        current = Path(dirpath)
        relative = current.relative_to(root).as_posix()
        yield current, "" if relative == "." else relative + SCOPE_SEP


def extract_module(root: Path | str, *, config: ExtractConfig | None = None) -> Iterator[DocPair]:
    """Yield the pairs of every package under ``root``, each with its prefix."""
    config = config or ExtractConfig()
    for directory, prefix in iter_packages(root, exclude_dirs=config.exclude_dirs):
        log.debug("package_visited", directory=str(directory), prefix=prefix)
        yield from extract_package(directory, prefix, config=config)
