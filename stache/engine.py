from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence, Union

from .errors import InputError
from .template.cache import clear_default_cache, default_cache
from .template.context import Context
from .template.escaping import resolve_escaper
from .template.renderer import Renderer
from .template.tokens import TemplateAST
from .types import Delimiters, RenderOptions

logger = logging.getLogger(__name__)

DelimiterSpec = Union[Delimiters, Sequence[str], str, None]
OptionsSpec = Union[RenderOptions, Mapping[str, Any], None]


def parse(template: Optional[str], delimiters: DelimiterSpec = None) -> TemplateAST:
    """
    Parses a template into a token tree using the process-wide cache.

    Raises:
        InputError: If the template is missing or the delimiters are invalid
        StructuralError: If section tags are unbalanced
    """
    if template is None:
        raise InputError("Template text is required")
    if not isinstance(template, str):
        raise InputError(f"Template must be a string, got {type(template).__name__}")
    return default_cache().get_or_parse(template, Delimiters.coerce(delimiters))


def render(
    template: Optional[str],
    view: Any,
    partials: Optional[Mapping[str, str]] = None,
    options: OptionsSpec = None,
) -> str:
    """
    Renders a template against a view.

    Args:
        template: Template source
        view: Root data value (mapping, sequence, scalar or object)
        partials: Partial name -> template source
        options: RenderOptions or a mapping with ``tags`` / ``escape``

    Returns:
        Rendered text

    Raises:
        InputError: If template or view is missing, or options are invalid
        StructuralError: If section tags in the template or a partial are unbalanced
    """
    if template is None:
        raise InputError("Template text is required")
    if view is None:
        raise InputError("View is required")
    if partials is not None and not isinstance(partials, Mapping):
        raise InputError(f"Partials must be a mapping, got {type(partials).__name__}")

    opts = RenderOptions.coerce(options)
    delimiters = Delimiters.coerce(opts.tags)
    escape = resolve_escaper(opts.escape)

    ast = parse(template, delimiters)
    renderer = Renderer(partials, delimiters=delimiters, escape=escape, cache=default_cache())
    return renderer.render(ast, Context(view))


def clear_cache() -> None:
    """Discards all memoized token trees."""
    clear_default_cache()
    logger.debug("Template cache cleared")


__all__ = ["parse", "render", "clear_cache"]
