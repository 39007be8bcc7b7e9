"""Path resolution and assignment.

The resolver walks a destination record along a name path and assigns the
comment text to the single leaf the path addresses:

- Record: annotated fields are scanned in declaration order. A leaf matches
  only when its annotation equals the whole remaining path. A nested record
  or map matches when its annotation is the wildcard, or when the remaining
  path starts with ``annotation + "/"``; the prefix and separator are
  stripped before recursing (nothing is stripped for the wildcard). The
  first field that reports success ends the scan.
- Map: the remaining path must hold a ``/``. The first segment is the key,
  the rest is resolved inside the entry. Entries are get-or-create, resolve,
  store-on-success, so an unmatched path never leaves an empty entry behind.

Unmatched paths are not errors: ``assign`` just returns False. Shape errors
in map fields (non-``str`` keys, non-record values) and records that cannot
be built empty raise ``UnsupportedShapeError``.
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from docbind.core.errors import UnsupportedShapeError
from docbind.extract.models import SCOPE_SEP
from docbind.unmarshal.schema import DEFAULT_TAG, FieldKind, FieldSpec, is_fillable_record, record_fields

DEFAULT_WILDCARD = "*"


class Resolver:
    """Assigns ``(path, text)`` pairs into a destination record."""

    def __init__(self, *, tag: str = DEFAULT_TAG, wildcard: str = DEFAULT_WILDCARD) -> None:
        self.tag = tag
        self.wildcard = wildcard

    def assign(self, record: Any, path: str, text: str) -> bool:
        """Assign ``text`` to the leaf addressed by ``path``. False if none matches."""
        return self._resolve_record(record, path, text, frozenset())

    def _resolve_record(
        self,
        record: Any,
        path: str,
        text: str,
        active: frozenset[tuple[type, str]],
    ) -> bool:
        # A wildcard record consumes no path; re-entering a (type, path) pair
        # already on the stack cannot match anything new.
        active = active | {(type(record), path)}
        for spec in record_fields(type(record), self.tag):
            if spec.kind is FieldKind.LEAF:
                if spec.annotation == path:
                    setattr(record, spec.name, text)
                    return True
                continue
            if spec.kind is FieldKind.OTHER:
                continue

            if spec.annotation == self.wildcard:
                rest = path
                if spec.kind is FieldKind.RECORD and (spec.record_type, rest) in active:
                    continue
            elif path.startswith(spec.annotation + SCOPE_SEP):
                rest = path[len(spec.annotation) + len(SCOPE_SEP) :]
            else:
                continue

            if spec.kind is FieldKind.RECORD:
                matched = self._resolve_nested(record, spec, rest, text, active)
            else:
                matched = self._resolve_map(record, spec, rest, text, active)
            if matched:
                return True
        return False

    def _resolve_nested(
        self,
        record: Any,
        spec: FieldSpec,
        path: str,
        text: str,
        active: frozenset[tuple[type, str]],
    ) -> bool:
        current = getattr(record, spec.name)
        if current is not None:
            return self._resolve_record(current, path, text, active)

        child = new_record(spec.record_type)
        if not self._resolve_record(child, path, text, active):
            return False
        setattr(record, spec.name, child)
        return True

    def _resolve_map(
        self,
        record: Any,
        spec: FieldSpec,
        path: str,
        text: str,
        active: frozenset[tuple[type, str]],
    ) -> bool:
        check_map_field(spec)
        key, sep, rest = path.partition(SCOPE_SEP)
        if not sep:
            return False

        mapping = getattr(record, spec.name)
        entry = mapping.get(key) if mapping is not None else None
        if entry is None:
            entry = new_record(spec.value_type)
        if not self._resolve_record(entry, rest, text, active):
            return False

        if mapping is None:
            # Store the filled map in one write; validating setters may copy it
            setattr(record, spec.name, {key: entry})
        else:
            mapping[key] = entry
        return True


def check_map_field(spec: FieldSpec) -> None:
    if spec.key_type is not str:
        raise UnsupportedShapeError.map_key(spec.name, spec.key_type)
    if not is_fillable_record(spec.value_type):
        raise UnsupportedShapeError.map_value(spec.name, spec.value_type)


def new_record(record_type: type) -> Any:
    """Zero-valued instance of a record type."""
    try:
        return record_type()
    except (TypeError, ValidationError) as e:
        raise UnsupportedShapeError.not_constructible(record_type, str(e)) from e
