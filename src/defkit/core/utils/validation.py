"""Argument validation helpers.

Each ``ensure_*`` helper returns its argument unchanged when it passes the
check, otherwise raises :class:`InvalidArgumentError` carrying the message.
"""
from __future__ import annotations

import logging
from collections.abc import Sized
from typing import Optional, TypeVar

from defkit.core.config import get_setting
from defkit.core.exceptions import InvalidArgumentError
from defkit.core.logging import TRACE, log, log_and_return

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")
S = TypeVar("S", bound=Sized)


def default_error_message() -> str:
    """Message used when a caller passes none (``validation.default_error_message``)."""
    return get_setting("validation.default_error_message")


def is_blank(text: Optional[str], *, logger: Optional[logging.Logger] = None) -> bool:
    """Return True if ``text`` is None, only whitespace, or not a string at all."""
    return log_and_return(
        logger or LOGGER,
        TRACE,
        "Is string blank [%s] for string [%r]",
        not isinstance(text, str) or text.strip() == "",
        text,
    )


def ensure_object(
    value: Optional[T],
    message: Optional[str] = None,
    *,
    logger: Optional[logging.Logger] = None,
) -> T:
    """Return ``value`` if it is not None.

    Raises:
        InvalidArgumentError: If ``value`` is None
    """
    log(logger or LOGGER, TRACE, "Ensuring object [%r]", value)
    if value is None:
        raise InvalidArgumentError(message or default_error_message())
    return value


def ensure_string(
    text: Optional[str],
    message: Optional[str] = None,
    *,
    logger: Optional[logging.Logger] = None,
) -> str:
    """Return ``text`` if it is neither None nor blank.

    Raises:
        InvalidArgumentError: If ``text`` is None, not a string, empty or whitespace only
    """
    if is_blank(text, logger=logger):
        raise InvalidArgumentError(message or default_error_message())
    return text  # type: ignore[return-value]


def ensure_sequence(
    values: Optional[S],
    message: Optional[str] = None,
    *,
    logger: Optional[logging.Logger] = None,
) -> S:
    """Return ``values`` if it is a non-empty sized collection.

    Strings are rejected; use :func:`ensure_string` for text.

    Raises:
        InvalidArgumentError: If ``values`` is None, unsized, a string or empty
    """
    valid = (
        isinstance(values, Sized)
        and not isinstance(values, (str, bytes))
        and len(values) > 0
    )
    log(logger or LOGGER, TRACE, "Ensuring sequence [%r] result [%s]", values, valid)
    if not valid:
        raise InvalidArgumentError(message or default_error_message())
    return values  # type: ignore[return-value]


__all__ = [
    "default_error_message",
    "is_blank",
    "ensure_object",
    "ensure_string",
    "ensure_sequence",
]
