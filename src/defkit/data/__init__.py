"""Bundled data files for defkit (``config/defaults.yaml``)."""

from __future__ import annotations

from functools import lru_cache
from importlib import resources
from typing import Any

import yaml


@lru_cache(maxsize=None)
def read_bundled_config(filename: str) -> dict[str, Any]:
    """Parse ``config/<filename>`` shipped with defkit (cached, do not mutate)."""
    text = (resources.files(__name__) / "config" / filename).read_text(encoding="utf-8")
    return yaml.safe_load(text) or {}


def clear_caches() -> None:
    read_bundled_config.cache_clear()


__all__ = ["read_bundled_config", "clear_caches"]
