# -*- coding: utf-8 -*-

"""Logging configuration for focus-gum.

Default level is WARNING so the terminal stays clean while a session runs.

Priority for level resolution (highest to lowest):
    1. Explicit `level` parameter
    2. FOCUS_GUM_LOG_LEVEL env var (DEBUG, INFO, WARNING, ...)
    3. FOCUS_GUM_DEBUG=true env var
    4. `debug=True` parameter (--debug flag or `debug: true` in the config file)
    5. WARNING
"""

import logging
import os
import sys

_DEBUG_FORMAT = "%(asctime)s %(name)s [%(levelname)s] %(message)s"
_DEFAULT_FORMAT = "%(name)s: %(message)s"


def _parse_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    numeric = getattr(logging, level.upper(), None)
    if isinstance(numeric, int):
        return numeric
    try:
        return int(level)
    except ValueError:
        return logging.WARNING


def resolve_level(*, debug: bool = False, level: int | str | None = None) -> int:
    if level is not None:
        return _parse_level(level)
    if env_level := os.environ.get("FOCUS_GUM_LOG_LEVEL"):
        return _parse_level(env_level)
    if os.environ.get("FOCUS_GUM_DEBUG", "").lower() in ("true", "1", "yes"):
        return logging.DEBUG
    if debug:
        return logging.DEBUG
    return logging.WARNING


def configure_logging(
    *,
    debug: bool = False,
    level: int | str | None = None,
    stream: object = None,
) -> int:
    """Install a single stderr handler on the package logger.

    Returns:
        The resolved level
    """
    resolved = resolve_level(debug=debug, level=level)
    fmt = _DEBUG_FORMAT if resolved <= logging.DEBUG else _DEFAULT_FORMAT

    pkg_logger = logging.getLogger("focusgum")
    pkg_logger.setLevel(resolved)
    pkg_logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(resolved)
    handler.setFormatter(logging.Formatter(fmt))
    pkg_logger.addHandler(handler)
    pkg_logger.propagate = False

    pkg_logger.debug("Logging configured: level=%s", logging.getLevelName(resolved))
    return resolved
