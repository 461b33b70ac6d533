"""Core resource lifecycle helpers.

Quiet closing for anything exposing ``close()``: failures from the release
are logged at WARNING and never propagate, so they cannot mask the outcome of
the operation that used the resource.
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator, Optional, Protocol, TypeVar, Union

LOGGER = logging.getLogger(__name__)

PathLike = Union[str, Path]


class Closeable(Protocol):
    def close(self) -> Any: ...


C = TypeVar("C", bound=Closeable)


def close_quietly(resource: Optional[Closeable], *, logger: Optional[logging.Logger] = None) -> None:
    """Close ``resource``, logging and swallowing any failure.

    Does nothing when ``resource`` is None.

    Examples:
        >>> close_quietly(None)
        >>> close_quietly(open("notes.txt"))
    """
    if resource is None:
        return

    try:
        resource.close()
    except Exception as exc:  # noqa: BLE001 - close failures must never propagate
        (logger or LOGGER).warning(f"Trouble closing {resource!r}: {exc}", exc_info=True)


@contextmanager
def closing_quietly(resource: C, *, logger: Optional[logging.Logger] = None) -> Iterator[C]:
    """Yield ``resource`` and quietly close it on exit.

    Exceptions raised by the body propagate unchanged.

    Example:
        >>> with closing_quietly(open("notes.txt")) as f:
        ...     data = f.read()
    """
    try:
        yield resource
    finally:
        close_quietly(resource, logger=logger)


__all__ = [
    "PathLike",
    "Closeable",
    "close_quietly",
    "closing_quietly",
]
