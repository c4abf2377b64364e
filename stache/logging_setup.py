from __future__ import annotations

import logging
import os

_LOG = logging.getLogger("stache")


def setup_logging(verbose: bool = False) -> None:
    """
    Configures the ``stache`` logger once.

    DEBUG when ``verbose`` or ``STACHE_DEBUG`` is set, WARNING otherwise.
    Library code only logs; handlers are attached here, by the CLI.
    """
    level = logging.DEBUG if verbose or os.environ.get("STACHE_DEBUG") else logging.WARNING
    _LOG.setLevel(level)
    if getattr(setup_logging, "_inited", False):
        return
    setup_logging._inited = True  # type: ignore[attr-defined]
    if not _LOG.handlers:
        h = logging.StreamHandler()
        fmt = logging.Formatter("[%(levelname)s] %(message)s")
        h.setFormatter(fmt)
        _LOG.addHandler(h)


__all__ = ["setup_logging"]
