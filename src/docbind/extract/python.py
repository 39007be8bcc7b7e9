"""Python declaration collector.

Emits one ``(name, text)`` per documented-able declaration of a module:

- ``class Name``                     -> ``Name`` (class docstring)
- ``def name`` / ``async def name``  -> ``name`` (function docstring)
- ``def name`` inside a top-level class body -> ``Class.name``
- module-level assignments and ``type X = ...`` statements -> each bound name

Assignments are declaration groups. A statement binding one name takes the
string literal right after it (attribute docstring) or, failing that, the
``#:`` comment block right above it. A statement binding several names
(``A = B = x``, ``A, B = x, y``) never shares that documentation: each name
takes only a ``#:`` block placed directly above it inside the target list.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

from docbind.extract.comments import (
    docstring_text,
    is_py_doc_comment,
    normalize_lines,
    preceding_comments,
    py_doc_comment_lines,
)
from docbind.extract.models import join_member

_STRING_TYPES = frozenset({"string", "concatenated_string"})
_PATTERN_TYPES = frozenset(
    {"pattern_list", "tuple_pattern", "list_pattern", "tuple", "list", "list_splat_pattern"}
)


def collect(root: Any, node_text: Callable[[Any], str]) -> Iterator[tuple[str, str]]:
    for node in root.named_children:
        definition = _unwrap_decorated(node)
        if definition.type == "class_definition":
            class_name = node_text(definition.child_by_field_name("name"))
            yield class_name, _docstring(definition, node_text)
            for member in definition.child_by_field_name("body").named_children:
                method = _unwrap_decorated(member)
                if method.type == "function_definition":
                    name = node_text(method.child_by_field_name("name"))
                    yield join_member(class_name, name), _docstring(method, node_text)
        elif definition.type == "function_definition":
            name = node_text(definition.child_by_field_name("name"))
            yield name, _docstring(definition, node_text)
        elif node.type == "expression_statement":
            yield from _collect_assignment(node, node_text)
        elif node.type == "type_alias_statement":
            target = _first_identifier(node.child_by_field_name("left"))
            if target is not None:
                yield node_text(target), _attribute_doc(node, node_text)


def _unwrap_decorated(node: Any) -> Any:
    if node.type == "decorated_definition":
        return node.child_by_field_name("definition")
    return node


def _docstring(definition: Any, node_text: Callable[[Any], str]) -> str:
    body = definition.child_by_field_name("body")
    if body is None:
        return ""
    for statement in body.named_children:
        if statement.type == "comment":
            continue
        literal = _string_statement(statement)
        return docstring_text(node_text(literal)) if literal is not None else ""
    return ""


def _string_statement(statement: Any) -> Any | None:
    """The string literal if ``statement`` is a bare string expression."""
    if statement is None or statement.type != "expression_statement":
        return None
    children = [c for c in statement.named_children if c.type != "comment"]
    if len(children) == 1 and children[0].type in _STRING_TYPES:
        return children[0]
    return None


def _collect_assignment(statement: Any, node_text: Callable[[Any], str]) -> Iterator[tuple[str, str]]:
    assignments = [c for c in statement.named_children if c.type == "assignment"]
    if len(assignments) != 1:
        return

    targets: list[Any] = []
    node = assignments[0]
    # a = b = value nests as assignment(left=a, right=assignment(left=b, ...))
    while node is not None and node.type == "assignment":
        targets.extend(_target_identifiers(node.child_by_field_name("left")))
        node = node.child_by_field_name("right")

    if len(targets) == 1:
        yield node_text(targets[0]), _attribute_doc(statement, node_text)
        return

    for target in targets:
        raw = preceding_comments(target, node_text, is_py_doc_comment)
        lines = [line for comment in raw for line in py_doc_comment_lines(comment)]
        yield node_text(target), normalize_lines(lines)


def _target_identifiers(target: Any) -> list[Any]:
    if target is None:
        return []
    if target.type == "identifier":
        return [target]
    if target.type in _PATTERN_TYPES:
        found: list[Any] = []
        for child in target.named_children:
            found.extend(_target_identifiers(child))
        return found
    # attribute, subscript: not a declaration
    return []


def _first_identifier(node: Any) -> Any | None:
    if node is None:
        return None
    if node.type == "identifier":
        return node
    for child in node.named_children:
        found = _first_identifier(child)
        if found is not None:
            return found
    return None


def _attribute_doc(statement: Any, node_text: Callable[[Any], str]) -> str:
    literal = _string_statement(statement.next_named_sibling)
    if literal is not None:
        return docstring_text(node_text(literal))
    raw = preceding_comments(statement, node_text, is_py_doc_comment)
    return normalize_lines(line for comment in raw for line in py_doc_comment_lines(comment))
