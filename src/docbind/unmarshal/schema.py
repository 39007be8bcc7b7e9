"""Destination schema discovery.

A destination is a record: a mutable dataclass or pydantic model instance.
Each field taking part in unmarshaling carries a path annotation, stored in
dataclass field metadata or in pydantic ``json_schema_extra`` under the
configured tag (``comment`` by default)::

    @dataclass
    class ModuleDoc:
        client: str = comment("Client")
        client_do: str = comment("Client.Do")

    @dataclass
    class Docs:
        modules: dict[str, ModuleDoc] = comment("*", default_factory=dict)

Field kinds are derived from type hints:

- ``str``                -> LEAF
- record type            -> RECORD
- ``dict[str, Record]``  -> MAP (``Mapping``/``MutableMapping`` too)
- anything else          -> OTHER, never filled

``X | None`` is treated as ``X``. Map key/value types are only checked when
the resolver reaches the map.
"""

from __future__ import annotations

import dataclasses
import sys
import types
import typing
from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Any, Union

from pydantic import BaseModel

from docbind.core.logging import get_logger

log = get_logger("docbind.unmarshal.schema")

DEFAULT_TAG = "comment"

_MAP_ORIGINS = (dict, Mapping, MutableMapping)

# Unresolved string annotations that still name a leaf
_STR_SPELLINGS = frozenset(
    {"str", "str | None", "None | str", "Optional[str]", "typing.Optional[str]"}
)


class FieldKind(Enum):
    LEAF = "leaf"
    RECORD = "record"
    MAP = "map"
    OTHER = "other"


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """One annotated field of a record type."""

    name: str
    annotation: str
    kind: FieldKind
    record_type: Any = None  # RECORD: the nested record type
    key_type: Any = None  # MAP
    value_type: Any = None  # MAP


def comment(
    path: str,
    *,
    default: Any = dataclasses.MISSING,
    default_factory: Any = dataclasses.MISSING,
    tag: str = DEFAULT_TAG,
    **kwargs: Any,
) -> Any:
    """Dataclass field annotated with a doc path.

    Leaf fields default to ``""``; pass ``default_factory`` for record and
    map fields.
    """
    if default is dataclasses.MISSING and default_factory is dataclasses.MISSING:
        default = ""
    metadata = {**kwargs.pop("metadata", {}), tag: path}
    return dataclasses.field(
        default=default,
        default_factory=default_factory,
        metadata=metadata,
        **kwargs,
    )


def is_record_type(tp: Any) -> bool:
    """True for dataclass classes and pydantic model classes."""
    if not isinstance(tp, type):
        return False
    return dataclasses.is_dataclass(tp) or issubclass(tp, BaseModel)


def is_frozen(tp: type) -> bool:
    if dataclasses.is_dataclass(tp):
        return bool(tp.__dataclass_params__.frozen)  # type: ignore[attr-defined]
    if issubclass(tp, BaseModel):
        return bool(tp.model_config.get("frozen"))
    return False


def is_fillable_record(tp: Any) -> bool:
    return is_record_type(tp) and not is_frozen(tp)


def _strip_optional(tp: Any) -> Any:
    if typing.get_origin(tp) in (Union, types.UnionType):
        args = [arg for arg in typing.get_args(tp) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return tp


def classify(tp: Any) -> tuple[FieldKind, Any, Any]:
    """Kind of a field type plus (record type | key type, value type)."""
    tp = _strip_optional(tp)
    if tp is str or (isinstance(tp, str) and " ".join(tp.split()) in _STR_SPELLINGS):
        return FieldKind.LEAF, None, None
    if is_fillable_record(tp):
        return FieldKind.RECORD, tp, None
    origin = typing.get_origin(tp)
    if tp in _MAP_ORIGINS or origin in _MAP_ORIGINS:
        args = typing.get_args(tp)
        key_type, value_type = args if len(args) == 2 else (Any, Any)
        return FieldKind.MAP, key_type, value_type
    return FieldKind.OTHER, None, None


def _type_hints(record_type: type) -> dict[str, Any]:
    try:
        return typing.get_type_hints(record_type)
    except (NameError, TypeError, AttributeError, SyntaxError) as e:
        log.debug("type_hints_unresolved", record=record_type.__qualname__, error=str(e))
        return {}


def _resolve_annotation(record_type: type, annotation: Any) -> Any:
    """Evaluate one string annotation; the string itself when it cannot be resolved."""
    if not isinstance(annotation, str):
        return annotation
    module = sys.modules.get(record_type.__module__)
    globalns = dict(vars(module)) if module is not None else {}
    try:
        return eval(annotation, globalns, dict(vars(record_type)))  # noqa: S307
    except (NameError, TypeError, AttributeError, SyntaxError) as e:
        log.debug(
            "field_type_unresolved",
            record=record_type.__qualname__,
            annotation=annotation,
            error=str(e),
        )
        return annotation


def _annotated_fields(record_type: type, tag: str) -> list[tuple[str, str, Any]]:
    """(name, annotation, type) for every field carrying ``tag``, in declaration order."""
    found: list[tuple[str, str, Any]] = []
    if dataclasses.is_dataclass(record_type):
        hints = _type_hints(record_type)
        for f in dataclasses.fields(record_type):
            annotation = f.metadata.get(tag)
            if isinstance(annotation, str) and annotation:
                tp = hints[f.name] if f.name in hints else _resolve_annotation(record_type, f.type)
                found.append((f.name, annotation, tp))
    elif issubclass(record_type, BaseModel):
        for name, info in record_type.model_fields.items():
            extra = info.json_schema_extra
            annotation = extra.get(tag) if isinstance(extra, dict) else None
            if isinstance(annotation, str) and annotation:
                found.append((name, annotation, info.annotation))
    return found


@lru_cache(maxsize=256)
def record_fields(record_type: type, tag: str = DEFAULT_TAG) -> tuple[FieldSpec, ...]:
    """Annotated fields of a record type, classified. Cached per (type, tag)."""
    specs: list[FieldSpec] = []
    for name, annotation, tp in _annotated_fields(record_type, tag):
        kind, first, second = classify(tp)
        if kind is FieldKind.RECORD:
            specs.append(FieldSpec(name, annotation, kind, record_type=first))
        elif kind is FieldKind.MAP:
            specs.append(FieldSpec(name, annotation, kind, key_type=first, value_type=second))
        else:
            specs.append(FieldSpec(name, annotation, kind))
    return tuple(specs)
