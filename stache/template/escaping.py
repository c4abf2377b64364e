"""
Output escaping strategies.

``html_escape`` is the default. Callers may pick another registered
strategy by name or pass any ``str -> str`` callable.
"""

from __future__ import annotations

from typing import Dict

from ..errors import InputError
from ..types import Escaper, EscapeSpec

# Order matters: "&" first so entities introduced below are not re-escaped
_HTML_TABLE = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#39;"),
    ("/", "&#x2F;"),
    ("`", "&#x60;"),
    ("=", "&#x3D;"),
)


def html_escape(text: str) -> str:
    for char, entity in _HTML_TABLE:
        text = text.replace(char, entity)
    return text


def no_escape(text: str) -> str:
    return text


ESCAPERS: Dict[str, Escaper] = {
    "html": html_escape,
    "none": no_escape,
}


def resolve_escaper(spec: EscapeSpec) -> Escaper:
    """
    Turns the ``escape`` render option into a callable.

    Args:
        spec: None (HTML), a name from ESCAPERS, or a callable

    Raises:
        InputError: For unknown names or unsupported values
    """
    if spec is None:
        return html_escape
    if isinstance(spec, str):
        try:
            return ESCAPERS[spec]
        except KeyError:
            available = ", ".join(sorted(ESCAPERS))
            raise InputError(f"Unknown escape strategy '{spec}'. Available: {available}") from None
    if callable(spec):
        return spec
    raise InputError(f"Escape option must be a name or a callable, got {type(spec).__name__}")


__all__ = ["html_escape", "no_escape", "ESCAPERS", "resolve_escaper"]
