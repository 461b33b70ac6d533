"""Core string assembly utilities.

Contains:
  - separator-aware concatenation that never doubles a separator already
    present at the end of an element
  - small text predicates
"""
from __future__ import annotations

import logging
from typing import Any, List, Optional, Sequence

from defkit.core.logging import TRACE, log, log_and_return
from defkit.core.utils.validation import ensure_object

LOGGER = logging.getLogger(__name__)

DEFAULT_SEPARATOR = ""


def is_separator_appendable(
    separator: str,
    index: int,
    elements: Optional[Sequence[Any]],
    *,
    logger: Optional[logging.Logger] = None,
) -> bool:
    """Return True if ``separator`` belongs after ``elements[index]``.

    That is the case for every element but the last, unless the element's
    text already ends with ``separator``.
    """
    appendable = (
        elements is not None
        and index <= len(elements) - 2
        and not str(elements[index]).endswith(separator)
    )
    return log_and_return(
        logger or LOGGER,
        TRACE,
        "Is the separator appendable [%s] for index [%d]",
        appendable,
        index,
    )


def join_with_separator(
    elements: Sequence[Any],
    separator: str = DEFAULT_SEPARATOR,
    trailing_separator: bool = False,
    *,
    logger: Optional[logging.Logger] = None,
) -> str:
    """Concatenate ``str()`` of each element with ``separator`` between them.

    Args:
        elements: Ordered values to join; may be empty but not None
        separator: Text placed between elements
        trailing_separator: Always append one more ``separator`` at the end

    Raises:
        InvalidArgumentError: If ``elements`` is None

    Examples:
        >>> join_with_separator(["a", "b", "c"], "-")
        'a-b-c'
        >>> join_with_separator(["a-", "b"], "-")
        'a-b'
        >>> join_with_separator(["a", "b"], "-", True)
        'a-b-'
    """
    ensure_object(elements, "Must have a list of objects to concat!", logger=logger)

    # Materialize once so generators and other one-shot iterables work.
    items = list(elements)
    parts: List[str] = []
    for index, element in enumerate(items):
        parts.append(str(element))
        if is_separator_appendable(separator, index, items, logger=logger):
            parts.append(separator)

    if trailing_separator:
        parts.append(separator)

    result = "".join(parts)
    log(logger or LOGGER, TRACE, "Returning [%s]", result)
    return result


def concat(*values: Any) -> str:
    """Concatenate the text of ``values`` with no separator."""
    return join_with_separator(values, DEFAULT_SEPARATOR)


def is_contained(
    text: Optional[str],
    fragment: str,
    *,
    logger: Optional[logging.Logger] = None,
) -> bool:
    """Return True if ``fragment`` occurs in ``text``; False when ``text`` is None."""
    return log_and_return(
        logger or LOGGER,
        TRACE,
        "Contained result [%s] for [%r] in [%r]",
        text is not None and fragment in text,
        fragment,
        text,
    )


__all__ = [
    "DEFAULT_SEPARATOR",
    "is_separator_appendable",
    "join_with_separator",
    "concat",
    "is_contained",
]
