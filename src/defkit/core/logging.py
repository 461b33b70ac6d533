"""Logging helpers for defkit.

Provides a fine-grained ``TRACE`` level, small wrappers that log only when the
level is enabled, and an opt-in stdlib configuration for the ``defkit`` logger
hierarchy.
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Optional, TypeVar, Union

from defkit.core.config import get_setting

T = TypeVar("T")

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

PACKAGE_LOGGER_NAME = "defkit"

_CONFIGURED_TARGET: str | None = None
_DEFKIT_HANDLER: logging.Handler | None = None


def _level_from_name(name: Union[str, int]) -> int:
    if isinstance(name, int):
        return name
    if str(name).upper() == "TRACE":
        return TRACE
    try:
        return int(getattr(logging, str(name).upper()))
    except (AttributeError, TypeError, ValueError):
        return logging.INFO


def log(
    logger: logging.Logger,
    level: int,
    message: str,
    *args: Any,
    exc_info: Any = None,
) -> None:
    """Log ``message`` % ``args`` only when ``level`` is enabled on ``logger``."""
    if logger.isEnabledFor(level):
        logger.log(level, message, *args, exc_info=exc_info)


def log_and_return(
    logger: logging.Logger,
    level: int,
    message: str,
    value: T,
    *args: Any,
) -> T:
    """Log ``message`` with ``value`` as its first argument, then return ``value``.

    Example:
        >>> log_and_return(logger, TRACE, "Is blank [%s] for [%s]", True, "  ")
        True
    """
    log(logger, level, message, value, *args)
    return value


def configure_stdlib_logging(
    *,
    level: Optional[Union[str, int]] = None,
    log_path: Optional[Path] = None,
) -> logging.Handler:
    """Install one handler on the ``defkit`` logger.

    Writes to ``log_path`` when given, otherwise to stderr. Idempotent per
    process: if already configured for the same target, the existing handler
    is returned and only the level is refreshed.
    """
    global _CONFIGURED_TARGET, _DEFKIT_HANDLER

    resolved_level = _level_from_name(level if level is not None else get_setting("logging.level"))
    target = str(Path(log_path).resolve()) if log_path is not None else "<stderr>"

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(resolved_level)

    if _CONFIGURED_TARGET == target and _DEFKIT_HANDLER is not None:
        _DEFKIT_HANDLER.setLevel(resolved_level)
        return _DEFKIT_HANDLER

    # Replace the previously installed handler when switching targets.
    if _DEFKIT_HANDLER is not None:
        package_logger.removeHandler(_DEFKIT_HANDLER)
        _DEFKIT_HANDLER.close()
        _DEFKIT_HANDLER = None

    handler: logging.Handler
    if log_path is not None:
        Path(target).parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(target, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(resolved_level)
    handler.setFormatter(logging.Formatter(get_setting("logging.format")))
    package_logger.addHandler(handler)

    _DEFKIT_HANDLER = handler
    _CONFIGURED_TARGET = target
    return handler


def reset_stdlib_logging_for_tests() -> None:
    """Test-only: remove the handler installed by ``configure_stdlib_logging``."""
    global _CONFIGURED_TARGET, _DEFKIT_HANDLER
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if _DEFKIT_HANDLER is not None:
        package_logger.removeHandler(_DEFKIT_HANDLER)
        _DEFKIT_HANDLER.close()
    package_logger.setLevel(logging.NOTSET)
    _CONFIGURED_TARGET = None
    _DEFKIT_HANDLER = None


__all__ = [
    "TRACE",
    "PACKAGE_LOGGER_NAME",
    "log",
    "log_and_return",
    "configure_stdlib_logging",
    "reset_stdlib_logging_for_tests",
]
