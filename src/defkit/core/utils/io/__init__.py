"""I/O utilities for defkit.

This package provides defensive resource handling:
- Core: quiet closing of closeable resources
- Properties: properties text parsing and loading from streams, files and
  package resources
"""
from __future__ import annotations

from .core import (
    Closeable,
    PathLike,
    close_quietly,
    closing_quietly,
)
from .properties import (
    load_properties,
    load_properties_file,
    load_properties_resource,
    parse_properties,
)

__all__ = [
    # core
    "PathLike",
    "Closeable",
    "close_quietly",
    "closing_quietly",
    # properties
    "parse_properties",
    "load_properties",
    "load_properties_file",
    "load_properties_resource",
]
