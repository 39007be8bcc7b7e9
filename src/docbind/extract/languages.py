"""LanguagePack registry: grammar loading and collector lookup per language.

Every language docbind can extract from has exactly ONE LanguagePack:
- Grammar module (``tree_sitter_<lang>``) and its loader function
- File extensions it claims
- Declaration collector turning a syntax tree into ``(name, text)`` pairs

The PACKS registry is the canonical lookup: ``PACKS["go"]``.
"""

from __future__ import annotations

import importlib
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from functools import lru_cache
from typing import Any

import tree_sitter

from docbind.core.errors import ConfigError
from docbind.extract import golang, python

Collector = Callable[[Any, Callable[[Any], str]], Iterator[tuple[str, str]]]


@dataclass(frozen=True)
class LanguagePack:
    name: str
    grammar_module: str
    extensions: frozenset[str]
    collector: Collector
    language_func: str = "language"


PACKS: dict[str, LanguagePack] = {
    "go": LanguagePack(
        name="go",
        grammar_module="tree_sitter_go",
        extensions=frozenset({".go"}),
        collector=golang.collect,
    ),
    "python": LanguagePack(
        name="python",
        grammar_module="tree_sitter_python",
        extensions=frozenset({".py", ".pyi"}),
        collector=python.collect,
    ),
}


def get_pack(name: str) -> LanguagePack | None:
    return PACKS.get(name)


def resolve_packs(names: Iterable[str]) -> tuple[LanguagePack, ...]:
    """Look up enabled packs by name, rejecting unknown names."""
    packs: list[LanguagePack] = []
    for name in names:
        pack = get_pack(name)
        if pack is None:
            raise ConfigError.invalid_value(
                "extract.languages", name, f"unknown language, expected one of {sorted(PACKS)}"
            )
        packs.append(pack)
    return tuple(packs)


def pack_for_suffix(suffix: str, packs: Iterable[LanguagePack]) -> LanguagePack | None:
    suffix = suffix.lower()
    for pack in packs:
        if suffix in pack.extensions:
            return pack
    return None


@lru_cache(maxsize=None)
def load_language(name: str) -> tree_sitter.Language:
    """Load (once) the tree-sitter grammar for a pack."""
    pack = PACKS[name]
    try:
        module = importlib.import_module(pack.grammar_module)
        language_fn = getattr(module, pack.language_func)
    except (ImportError, AttributeError) as err:
        raise ValueError(f"Language not available: {name}") from err
    return tree_sitter.Language(language_fn())


def parse(pack: LanguagePack, content: bytes, filename: str) -> tree_sitter.Tree:
    """Parse ``content``; syntax errors are raised as ``SyntaxError``."""
    parser = tree_sitter.Parser(load_language(pack.name))
    tree = parser.parse(content)
    if tree.root_node.has_error:
        bad = _first_error(tree.root_node)
        row, column = bad.start_point[0], bad.start_point[1]
        lines = content.splitlines()
        line = lines[row].decode("utf-8", "replace") if row < len(lines) else ""
        kind = f"missing {bad.type}" if bad.is_missing else "invalid syntax"
        raise SyntaxError(f"{kind} ({pack.name})", (filename, row + 1, column + 1, line))
    return tree


def _first_error(node: Any) -> Any:
    if node.type == "ERROR" or node.is_missing:
        return node
    for child in node.children:
        if child.has_error or child.is_missing:
            return _first_error(child)
    return node
