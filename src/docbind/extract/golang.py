"""Go declaration collector.

Emits one ``(name, text)`` per top-level declaration of a Go source file:

- ``func Name``            -> ``Name``
- ``func (r *Recv) Name``  -> ``Recv.Name``
- ``type Name ...``        -> ``Name``

Doc comments are the comment group directly above the declaration. In a
parenthesized ``type ( ... )`` group holding one spec, that spec inherits the
group's doc comment; with several specs each spec uses its own comment and
the group comment is ignored. ``var``, ``const`` and ``import`` declarations
are not collected.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

from docbind.extract.comments import go_comment_lines, normalize_lines, preceding_comments
from docbind.extract.models import join_member

_SPEC_TYPES = frozenset({"type_spec", "type_alias"})


def collect(root: Any, node_text: Callable[[Any], str]) -> Iterator[tuple[str, str]]:
    def doc(node: Any) -> str:
        lines: list[str] = []
        for raw in preceding_comments(node, node_text):
            lines.extend(go_comment_lines(raw))
        return normalize_lines(lines)

    for node in root.named_children:
        if node.type == "function_declaration":
            yield node_text(node.child_by_field_name("name")), doc(node)
        elif node.type == "method_declaration":
            receiver = _receiver_name(node.child_by_field_name("receiver"), node_text)
            name = node_text(node.child_by_field_name("name"))
            yield join_member(receiver, name), doc(node)
        elif node.type == "type_declaration":
            specs = [child for child in node.named_children if child.type in _SPEC_TYPES]
            for spec in specs:
                text = doc(node) if len(specs) == 1 else doc(spec)
                yield node_text(spec.child_by_field_name("name")), text


def _receiver_name(receiver: Any, node_text: Callable[[Any], str]) -> str:
    params = [child for child in receiver.named_children if child.type == "parameter_declaration"]
    if not params:
        raise ValueError(f"Cannot parse method receiver: {node_text(receiver)}")
    rtype = params[0].child_by_field_name("type")
    # Recv, *Recv, Recv[T], *Recv[T]
    while rtype is not None and rtype.type in ("pointer_type", "parenthesized_type"):
        rtype = rtype.named_children[0] if rtype.named_children else None
    if rtype is not None and rtype.type == "generic_type":
        rtype = rtype.child_by_field_name("type")
    if rtype is None or rtype.type != "type_identifier":
        raise ValueError(f"Cannot parse method receiver: {node_text(receiver)}")
    return node_text(rtype)
