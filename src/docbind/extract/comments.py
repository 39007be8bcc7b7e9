"""Comment text normalization shared by the language collectors.

All collectors hand raw comment lines to ``normalize_lines`` so that every
language produces the same CommentText shape:

- trailing whitespace removed from each line
- leading and trailing blank lines removed
- runs of interior blank lines collapsed to one
- non-empty text is newline-terminated, absent text is ``""``
"""

from __future__ import annotations

import ast
import inspect
import re
from collections.abc import Callable, Iterable
from typing import Any

# //go:generate, //line foo.go:1, //export Foo, ...
_GO_DIRECTIVE_RE = re.compile(r"^(line |extern |export |[a-z0-9]+:[a-z0-9])")

PY_DOC_COMMENT = "#:"


def normalize_lines(lines: Iterable[str]) -> str:
    out: list[str] = []
    for line in lines:
        line = line.rstrip()
        if line or (out and out[-1]):
            out.append(line)
    while out and not out[-1]:
        out.pop()
    if not out:
        return ""
    return "\n".join(out) + "\n"


def go_comment_lines(raw: str) -> list[str]:
    """Strip Go comment markers from one ``//`` or ``/* */`` comment."""
    if raw.startswith("//"):
        body = raw[2:]
        if body.startswith(" "):
            return [body[1:]]
        if _GO_DIRECTIVE_RE.match(body):
            return []
        return [body]
    if raw.startswith("/*"):
        return raw[2:-2].split("\n")
    return [raw]


def is_py_doc_comment(raw: str) -> bool:
    return raw.startswith(PY_DOC_COMMENT)


def py_doc_comment_lines(raw: str) -> list[str]:
    """Strip the ``#:`` marker (and one following space) from a comment."""
    body = raw[len(PY_DOC_COMMENT) :]
    if body.startswith(" "):
        body = body[1:]
    return [body]


def python_string_value(raw: str) -> str | None:
    """Evaluate a Python string literal; None for bytes, f-strings and non-literals."""
    try:
        value = ast.literal_eval(raw)
    except (ValueError, SyntaxError):
        return None
    return value if isinstance(value, str) else None


def docstring_text(raw_literal: str) -> str:
    value = python_string_value(raw_literal)
    if value is None:
        return ""
    return normalize_lines(inspect.cleandoc(value).splitlines())


def preceding_comments(
    node: Any,
    node_text: Callable[[Any], str],
    accept: Callable[[str], bool] = lambda _raw: True,
) -> list[str]:
    """Raw texts of the comment group directly above ``node``, in source order.

    The group must end on the line right before ``node`` starts; comments in
    it are on consecutive lines (or share a line). A comment that starts on
    the line where the previous named sibling ends trails that sibling and is
    not part of the group.
    """
    group: list[Any] = []
    next_start = node.start_point[0]
    sibling = node.prev_named_sibling
    while sibling is not None and sibling.type == "comment" and accept(node_text(sibling)):
        end_row = sibling.end_point[0]
        if group:
            if end_row not in (next_start - 1, next_start):
                break
        elif end_row != next_start - 1:
            break
        group.append(sibling)
        next_start = sibling.start_point[0]
        sibling = sibling.prev_named_sibling

    while group and sibling is not None and sibling.end_point[0] == group[-1].start_point[0]:
        sibling = group.pop()

    return [node_text(comment) for comment in reversed(group)]
