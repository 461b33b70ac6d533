"""Closeable test doubles that record how they were used."""
from __future__ import annotations

import io
from typing import Optional


class RecordingCloseable:
    """Counts ``close()`` calls and optionally fails on close."""

    def __init__(self, error: Optional[BaseException] = None) -> None:
        self.error = error
        self.close_calls = 0

    def close(self) -> None:
        self.close_calls += 1
        if self.error is not None:
            raise self.error

    def __repr__(self) -> str:
        return f"RecordingCloseable(close_calls={self.close_calls})"


class RecordingBytesStream(io.BytesIO):
    """BytesIO that counts ``close()`` calls."""

    def __init__(self, data: bytes = b"", *, close_error: Optional[BaseException] = None) -> None:
        super().__init__(data)
        self.close_calls = 0
        self.close_error = close_error

    def close(self) -> None:
        self.close_calls += 1
        super().close()
        if self.close_error is not None:
            raise self.close_error


class RecordingTextReader(io.StringIO):
    """StringIO that counts ``close()`` calls."""

    def __init__(self, text: str = "") -> None:
        super().__init__(text)
        self.close_calls = 0

    def close(self) -> None:
        self.close_calls += 1
        super().close()


class FailingReader:
    """Reader whose ``read()`` always raises ``error``."""

    def __init__(self, error: BaseException) -> None:
        self.error = error
        self.close_calls = 0

    def read(self) -> str:
        raise self.error

    def close(self) -> None:
        self.close_calls += 1


__all__ = [
    "RecordingCloseable",
    "RecordingBytesStream",
    "RecordingTextReader",
    "FailingReader",
]
