from __future__ import annotations

from typing import Any, Dict, Mapping, Optional


def _describe_cause(cause: BaseException) -> str:
    detail = str(cause)
    name = type(cause).__name__
    return f"{name}: {detail}" if detail else name


class DefkitError(Exception):
    """Base exception for defkit helpers."""

    context: Dict[str, Any]
    cause: Optional[BaseException]

    def __init__(
        self,
        message: str = "",
        *,
        cause: BaseException | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        if not message and cause is not None:
            message = _describe_cause(cause)
        super().__init__(message)
        self.message = message
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause
        if context is not None:
            # Store a shallow copy to avoid accidental mutation.
            self.context = dict(context)
        else:
            self.context = {}

    def __str__(self) -> str:
        return self.message

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "context": self.context,
        }


class InvalidArgumentError(DefkitError, ValueError):
    """Raised when a caller supplies a null, blank or empty argument."""

    def __init__(
        self,
        message: str = "",
        *,
        cause: BaseException | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        DefkitError.__init__(self, message, cause=cause, context=context)
        ValueError.__init__(self, self.message)


class IoFailureError(DefkitError, OSError):
    """Raised when reading or parsing a configuration source fails."""

    def __init__(
        self,
        message: str = "",
        *,
        cause: BaseException | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        DefkitError.__init__(self, message, cause=cause, context=context)
        OSError.__init__(self, self.message)


__all__ = [
    "DefkitError",
    "InvalidArgumentError",
    "IoFailureError",
]
