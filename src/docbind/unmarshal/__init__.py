"""Path resolution and assignment of doc pairs into destination records."""

from docbind.unmarshal.ops import check_target, unmarshal_module, unmarshal_package, unmarshal_pairs
from docbind.unmarshal.resolver import DEFAULT_WILDCARD, Resolver
from docbind.unmarshal.schema import DEFAULT_TAG, FieldKind, FieldSpec, comment, record_fields

__all__ = [
    "DEFAULT_TAG",
    "DEFAULT_WILDCARD",
    "FieldKind",
    "FieldSpec",
    "Resolver",
    "check_target",
    "comment",
    "record_fields",
    "unmarshal_module",
    "unmarshal_package",
    "unmarshal_pairs",
]
