"""Utility helpers for defkit.

This package provides consolidated utilities:
- validation: non-null, non-blank and non-empty argument checks
- io/: quiet resource closing and properties loading
- text/: separator-aware string assembly
"""
from __future__ import annotations

# I/O utilities
from .io import (
    Closeable,
    PathLike,
    close_quietly,
    closing_quietly,
    load_properties,
    load_properties_file,
    load_properties_resource,
    parse_properties,
)

# Text utilities
from .text import (
    DEFAULT_SEPARATOR,
    concat,
    is_contained,
    is_separator_appendable,
    join_with_separator,
)

# Validation utilities
from .validation import (
    default_error_message,
    ensure_object,
    ensure_sequence,
    ensure_string,
    is_blank,
)

__all__ = [
    # I/O
    "PathLike",
    "Closeable",
    "close_quietly",
    "closing_quietly",
    "parse_properties",
    "load_properties",
    "load_properties_file",
    "load_properties_resource",
    # Text
    "DEFAULT_SEPARATOR",
    "concat",
    "is_contained",
    "is_separator_appendable",
    "join_with_separator",
    # Validation
    "default_error_message",
    "is_blank",
    "ensure_object",
    "ensure_string",
    "ensure_sequence",
]
