"""
Chained rendering scopes.

Each node owns one view value and points to the node it was pushed
from. Names are resolved at the innermost node first and fall back
outward when the local result is absent or null.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from .values import MISSING, ValueKind, as_items, classify, get_field, is_absent

logger = logging.getLogger(__name__)

SELF = "."


class Context:
    """
    One scope in the resolution chain.

    Nodes are never modified after creation except for the per-node
    memoization of resolved names. The parent link is read-only and only
    ever points outward, so chains cannot form cycles.
    """

    __slots__ = ("view", "parent", "_cache")

    def __init__(self, view: Any, parent: Optional[Context] = None):
        self.view = view
        self.parent = parent
        self._cache: Dict[str, Any] = {}

    def push(self, view: Any) -> Context:
        """Creates a child scope for ``view``."""
        return Context(view, parent=self)

    def lookup(self, name: str) -> Any:
        """
        Resolves a (possibly dotted) name.

        Returns:
            The resolved value or MISSING; never raises for missing data
        """
        if name in self._cache:
            local = self._cache[name]
        else:
            local = self._resolve_local(name)
            self._cache[name] = local

        # "." names the current element only; never inherited
        if is_absent(local) and self.parent is not None and name != SELF:
            inherited = self.parent.lookup(name)
            if inherited is not MISSING:
                return inherited
        return local

    def _resolve_local(self, name: str) -> Any:
        if name == SELF:
            return self.view

        value = self.view
        for segment in name.split("."):
            value = _step(value, segment)
            if value is MISSING:
                return MISSING

        if callable(value) and classify(value) is ValueKind.RECORD:
            logger.warning("Lambda values are not supported; '%s' resolves to nothing", name)
            return MISSING
        return value

    @property
    def depth(self) -> int:
        node, count = self, 0
        while node.parent is not None:
            node, count = node.parent, count + 1
        return count

    def __repr__(self) -> str:
        return f"Context(depth={self.depth}, view={type(self.view).__name__})"


def _step(value: Any, segment: str) -> Any:
    """One path segment of a dotted lookup."""
    kind = classify(value)

    if kind is ValueKind.KEYED:
        try:
            return value[segment]
        except (KeyError, TypeError):
            return MISSING

    if kind is ValueKind.SEQUENCE:
        if not (segment.isascii() and segment.isdigit()):
            return MISSING
        items = as_items(value)
        index = int(segment)
        if index >= len(items):
            return MISSING
        return items[index]

    if kind is ValueKind.RECORD:
        return get_field(value, segment)

    return MISSING


__all__ = ["Context", "SELF"]
