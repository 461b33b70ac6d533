"""Test helper modules for the defkit test suite.

- closeables: closeable doubles that count ``close()`` calls
- io_utils: writers for YAML and properties fixture files
- resources: importable package holding bundled properties fixtures
"""
from __future__ import annotations

from tests.helpers.closeables import (
    FailingReader,
    RecordingBytesStream,
    RecordingCloseable,
    RecordingTextReader,
)
from tests.helpers.io_utils import write_properties, write_yaml

__all__ = [
    "FailingReader",
    "RecordingBytesStream",
    "RecordingCloseable",
    "RecordingTextReader",
    "write_properties",
    "write_yaml",
]
