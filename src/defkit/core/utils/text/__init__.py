"""Text utilities.

- core: separator-aware concatenation and small text predicates
"""
from __future__ import annotations

from .core import (
    DEFAULT_SEPARATOR,
    concat,
    is_contained,
    is_separator_appendable,
    join_with_separator,
)

__all__ = [
    "DEFAULT_SEPARATOR",
    "concat",
    "is_contained",
    "is_separator_appendable",
    "join_with_separator",
]
