"""
Loading views and partials from disk for the command line.

The rendering core never touches the filesystem; everything here turns
files into the in-memory values it expects.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Dict, Tuple

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .errors import InputError

PARTIAL_SUFFIX = ".mustache"

_yaml = YAML(typ="safe")


def read_text(source: str) -> str:
    """Reads a file, or stdin when ``source`` is ``-``."""
    if source == "-":
        return sys.stdin.read()
    path = Path(source)
    if not path.is_file():
        raise InputError(f"File not found: {path}")
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(f"Failed to read {path}: {e}") from e


def load_view(source: str) -> Any:
    """
    Loads a YAML or JSON view.

    Empty documents give an empty mapping.
    """
    text = read_text(source)
    try:
        raw = _yaml.load(text)
    except YAMLError as e:
        raise InputError(f"Invalid view document {source}: {e}") from e
    return {} if raw is None else raw


def load_partials_dir(directory: Path) -> Dict[str, str]:
    """Collects ``*.mustache`` files of a directory keyed by file stem."""
    if not directory.is_dir():
        raise InputError(f"Partials directory not found: {directory}")
    partials: Dict[str, str] = {}
    for path in sorted(directory.glob(f"*{PARTIAL_SUFFIX}")):
        if path.is_file():
            partials[path.stem] = read_text(str(path))
    return partials


def parse_partial_arg(spec: str) -> Tuple[str, str]:
    """Parses ``NAME=FILE`` into the partial name and its template text."""
    if "=" not in spec:
        raise InputError(f"Invalid partial format '{spec}'. Expected 'NAME=FILE'")
    name, path = spec.split("=", 1)
    name = name.strip()
    if not name:
        raise InputError(f"Invalid partial format '{spec}'. Partial name is empty")
    return name, read_text(path.strip())


__all__ = ["read_text", "load_view", "load_partials_dir", "parse_partial_arg", "PARTIAL_SUFFIX"]
