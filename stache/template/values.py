"""
Closed classification of view values.

Both name resolution and section rendering dispatch on ``ValueKind``
instead of inspecting Python types at each call site.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Mapping, Sequence
from dataclasses import fields, is_dataclass
from typing import Any

logger = logging.getLogger(__name__)


class ValueKind(enum.Enum):
    NULL = "null"
    BOOLEAN = "boolean"
    SCALAR = "scalar"
    SEQUENCE = "sequence"
    KEYED = "keyed"
    RECORD = "record"


class _Missing:
    """Marker for a name that did not resolve."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()

_SCALAR_TYPES = (str, bytes, int, float, complex)


def classify(value: Any) -> ValueKind:
    if value is None or value is MISSING:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, _SCALAR_TYPES):
        return ValueKind.SCALAR
    if isinstance(value, Mapping):
        return ValueKind.KEYED
    if isinstance(value, Sequence):
        return ValueKind.SEQUENCE
    if isinstance(value, (set, frozenset)):
        # unordered; iterate in a stable order
        return ValueKind.SEQUENCE
    return ValueKind.RECORD


def is_absent(value: Any) -> bool:
    """True for unresolved names and explicit nulls."""
    return value is MISSING or value is None


def is_empty(value: Any) -> bool:
    """
    Falsiness in the template sense.

    Absent, null, ``False``, empty string, empty sequence and empty mapping
    are empty; everything else (including ``0``) is truthy.
    """
    kind = classify(value)
    if kind is ValueKind.NULL:
        return True
    if kind is ValueKind.BOOLEAN:
        return not value
    if kind is ValueKind.SCALAR:
        return isinstance(value, (str, bytes)) and len(value) == 0
    if kind in (ValueKind.SEQUENCE, ValueKind.KEYED):
        return len(value) == 0
    return False


def as_items(value: Any) -> Sequence[Any]:
    """Ordered items of a SEQUENCE value."""
    if isinstance(value, (set, frozenset)):
        return sorted(value, key=repr)
    return value


def get_field(record: Any, name: str) -> Any:
    """Public field of a RECORD value, or MISSING."""
    if not name or name.startswith("_"):
        return MISSING
    if is_dataclass(record) and name not in {f.name for f in fields(record)}:
        return MISSING
    try:
        return getattr(record, name)
    except AttributeError:
        return MISSING
    except Exception as e:
        # data access must never fail a render
        logger.debug("Field '%s' of %s raised %r; treated as missing", name, type(record).__name__, e)
        return MISSING


def to_text(value: Any) -> str:
    """String form used for variable substitution."""
    kind = classify(value)
    if kind is ValueKind.NULL:
        return ""
    if kind is ValueKind.BOOLEAN:
        return "true" if value else "false"
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)


__all__ = [
    "ValueKind",
    "MISSING",
    "classify",
    "is_absent",
    "is_empty",
    "as_items",
    "get_field",
    "to_text",
]
