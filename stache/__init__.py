"""
stache: a logic-less template engine.

Substitutes variables, expands sections and inserts partials without
evaluating expressions from the template.
"""

from __future__ import annotations

from .engine import clear_cache, parse, render
from .errors import InputError, StacheUserError, StructuralError
from .types import DEFAULT_DELIMITERS, Delimiters, RenderOptions

__all__ = [
    "parse",
    "render",
    "clear_cache",
    "StacheUserError",
    "InputError",
    "StructuralError",
    "Delimiters",
    "DEFAULT_DELIMITERS",
    "RenderOptions",
]
