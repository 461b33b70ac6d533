"""Configuration loading for defkit.

Bundled defaults live in ``defkit/data/config/defaults.yaml``. Callers may
layer a YAML file and an in-memory overrides mapping on top. The merged
result becomes the active configuration every helper reads:

    from defkit.core.config import load_config, get_setting

    load_config(overrides={"properties": {"stream_encoding": "utf-8"}})
    get_setting("properties.stream_encoding")  # "utf-8"

No environment variables are consulted.
"""
from __future__ import annotations

import copy
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from defkit.core.exceptions import InvalidArgumentError, IoFailureError
from defkit.core.merge import deep_merge
from defkit.data import read_bundled_config

DEFAULTS_FILE = "defaults.yaml"

_MISSING = object()

_ACTIVE_CONFIG: Optional[Dict[str, Any]] = None


def load_defaults() -> Dict[str, Any]:
    """Return a fresh copy of the bundled defaults."""
    return copy.deepcopy(read_bundled_config(DEFAULTS_FILE))


def _read_config_file(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise IoFailureError(
            f"Config file not readable: {path}", cause=exc, context={"path": str(path)}
        ) from exc

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise IoFailureError(
            f"Config file is not valid YAML: {path}", cause=exc, context={"path": str(path)}
        ) from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidArgumentError(
            f"Config file must contain a mapping: {path}", context={"path": str(path)}
        )
    return data


def load_config(
    path: Optional[Union[str, Path]] = None,
    overrides: Optional[Mapping[str, Any]] = None,
    *,
    activate: bool = True,
) -> Dict[str, Any]:
    """Load configuration layered as defaults < ``path`` < ``overrides``.

    The result becomes the process-wide active configuration read by every
    helper (``get_setting`` with no ``config``) unless ``activate`` is False.
    Each call layers on the bundled defaults, not on the previous active
    configuration.

    Args:
        path: Optional YAML file to merge over the bundled defaults
        overrides: Optional mapping merged last
        activate: Install the result as the active configuration

    Returns:
        A new merged configuration dict

    Raises:
        IoFailureError: If ``path`` cannot be read or parsed
        InvalidArgumentError: If ``path`` or ``overrides`` is not a mapping
    """
    global _ACTIVE_CONFIG

    config = load_defaults()
    if path is not None:
        config = deep_merge(config, _read_config_file(Path(path)))
    if overrides is not None:
        if not isinstance(overrides, Mapping):
            raise InvalidArgumentError("Config overrides must be a mapping!")
        config = deep_merge(config, overrides)

    if activate:
        _ACTIVE_CONFIG = copy.deepcopy(config)
    return config


def reset_config() -> None:
    """Drop the active configuration so helpers fall back to the bundled defaults."""
    global _ACTIVE_CONFIG
    _ACTIVE_CONFIG = None


def get_setting(
    dotted_key: str,
    default: Any = _MISSING,
    config: Optional[Mapping[str, Any]] = None,
) -> Any:
    """Look up ``dotted_key`` (e.g. ``"logging.level"``) in ``config``.

    With no ``config``, reads the active configuration installed by
    :func:`load_config`, or the bundled defaults when none is active.

    Raises:
        KeyError: If the key is missing and no ``default`` was given
    """
    if config is None:
        config = _ACTIVE_CONFIG if _ACTIVE_CONFIG is not None else read_bundled_config(DEFAULTS_FILE)

    current: Any = config
    for part in dotted_key.split("."):
        if not isinstance(current, Mapping) or part not in current:
            if default is _MISSING:
                raise KeyError(f"Config key '{dotted_key}' not found")
            return default
        current = current[part]
    return current


__all__ = [
    "DEFAULTS_FILE",
    "load_defaults",
    "load_config",
    "reset_config",
    "get_setting",
]
