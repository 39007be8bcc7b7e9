"""Doc-comment extraction from source trees.

Turns source files into a lazy stream of ``DocPair(path, text)``, one per
top-level declaration, using tree-sitter grammars.
"""

from docbind.extract.languages import PACKS, LanguagePack, get_pack
from docbind.extract.models import MEMBER_SEP, SCOPE_SEP, DocPair
from docbind.extract.ops import (
    extract_file,
    extract_module,
    extract_package,
    extract_source,
    iter_packages,
)

__all__ = [
    "DocPair",
    "LanguagePack",
    "MEMBER_SEP",
    "PACKS",
    "SCOPE_SEP",
    "extract_file",
    "extract_module",
    "extract_package",
    "extract_source",
    "get_pack",
    "iter_packages",
]
