"""Extraction result types."""

from typing import NamedTuple

# Separators used in name paths
MEMBER_SEP = "."  # Class/receiver to member
SCOPE_SEP = "/"  # Directory / nesting scope


class DocPair(NamedTuple):
    """One documented declaration: its name path and normalized comment text."""

    path: str
    text: str


def join_member(owner: str, name: str) -> str:
    return f"{owner}{MEMBER_SEP}{name}"
