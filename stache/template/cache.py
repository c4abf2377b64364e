"""
Memoization of parsed token trees.

Entries are immutable, so concurrent first population of the same key
can only cause redundant parsing, never inconsistent results.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional, Tuple

from .tokenizer import Tokenizer
from .tokens import TemplateAST
from ..types import DEFAULT_DELIMITERS, Delimiters

logger = logging.getLogger(__name__)

CacheKey = Tuple[str, str, str]


def _norm_bool(x: Any) -> bool:
    if isinstance(x, bool):
        return x
    if x is None:
        return False
    s = str(x).strip().lower()
    return s not in {"0", "false", "no", "off", ""}


class TemplateCache:
    """
    Unbounded parse cache keyed by template text and delimiter pair.

    ENV ``STACHE_CACHE`` takes priority over the constructor flag; enabled by default.
    When disabled, every call parses afresh and nothing is stored.
    """

    def __init__(self, *, enabled: Optional[bool] = None):
        env = os.environ.get("STACHE_CACHE", None)
        if env is not None:
            self.enabled = _norm_bool(env)
        elif enabled is not None:
            self.enabled = bool(enabled)
        else:
            self.enabled = True
        self._entries: Dict[CacheKey, TemplateAST] = {}

    @staticmethod
    def build_key(text: str, delimiters: Delimiters) -> CacheKey:
        return (text, delimiters.open, delimiters.close)

    def get_or_parse(self, text: str, delimiters: Optional[Delimiters] = None) -> TemplateAST:
        delimiters = delimiters or DEFAULT_DELIMITERS
        if not self.enabled:
            return Tokenizer(delimiters).tokenize(text)

        key = self.build_key(text, delimiters)
        ast = self._entries.get(key)
        if ast is None:
            ast = Tokenizer(delimiters).tokenize(text)
            self._entries[key] = ast
            logger.debug("Parsed template (%d chars, %s) -> %d tokens", len(text), delimiters, len(ast))
        return ast

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries


_default: Optional[TemplateCache] = None


def default_cache() -> TemplateCache:
    """Process-wide cache, created on first use."""
    global _default
    if _default is None:
        _default = TemplateCache()
    return _default


def clear_default_cache() -> None:
    if _default is not None:
        _default.clear()


__all__ = ["TemplateCache", "default_cache", "clear_default_cache"]
