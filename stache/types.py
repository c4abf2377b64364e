from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Sequence, Union

from .errors import InputError


# ---- Delimiters ----

@dataclass(frozen=True)
class Delimiters:
    """Ordered pair of tag markers, e.g. ``{{`` / ``}}``."""
    open: str = "{{"
    close: str = "}}"

    def __post_init__(self) -> None:
        if not isinstance(self.open, str) or not isinstance(self.close, str):
            raise InputError("Delimiters must be strings")
        if not self.open or not self.close:
            raise InputError("Delimiters must not be empty")

    @property
    def is_default(self) -> bool:
        return self == DEFAULT_DELIMITERS

    @classmethod
    def coerce(cls, raw: Union["Delimiters", Sequence[str], str, None]) -> "Delimiters":
        """
        Normalizes user input into a Delimiters pair.

        Accepts an existing pair, a 2-item sequence, a whitespace separated
        string such as ``"<% %>"``, or None for the default pair.
        """
        if raw is None:
            return DEFAULT_DELIMITERS
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, str):
            parts = raw.split()
        else:
            parts = list(raw)
        if len(parts) != 2:
            raise InputError(f"Delimiters must be a pair of markers, got {raw!r}")
        return cls(parts[0], parts[1])

    def __str__(self) -> str:
        return f"{self.open} {self.close}"


DEFAULT_DELIMITERS = Delimiters()


# ---- Render options ----

Escaper = Callable[[str], str]
EscapeSpec = Union[str, Escaper, None]


@dataclass(frozen=True)
class RenderOptions:
    # delimiter override, same effect as passing it to parse()
    tags: Optional[Delimiters] = None
    # escaping strategy: registered name ("html", "none") or callable
    escape: EscapeSpec = None

    _KEYS = ("tags", "escape")

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "RenderOptions":
        unknown = sorted(set(raw) - set(cls._KEYS))
        if unknown:
            raise InputError(f"Unknown render option(s): {', '.join(unknown)}")
        tags = raw.get("tags")
        return cls(
            tags=Delimiters.coerce(tags) if tags is not None else None,
            escape=raw.get("escape"),
        )

    @classmethod
    def coerce(cls, raw: Union["RenderOptions", Mapping[str, Any], None]) -> "RenderOptions":
        if raw is None:
            return cls()
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, Mapping):
            return cls.from_mapping(raw)
        raise InputError(f"Options must be a mapping or RenderOptions, got {type(raw).__name__}")


__all__ = [
    "Delimiters",
    "DEFAULT_DELIMITERS",
    "Escaper",
    "EscapeSpec",
    "RenderOptions",
]
