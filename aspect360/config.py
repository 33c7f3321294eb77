"""YAML configuration for aspect360.

Defaults live in ``aspect_config.yaml`` beside this module. A file named by
the ``ASPECT360_CONFIG`` environment variable is merged over them section by
section.
"""
from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from types import SimpleNamespace
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)

CONFIG_ENV = "ASPECT360_CONFIG"
DEFAULT_CONFIG_PATH = Path(__file__).with_name("aspect_config.yaml")


class AspectConfigError(ValueError):
    """Raised when configuration or an aspect pack cannot be used."""


def load_yaml(path: Path) -> Dict[str, Any]:
    """Read a YAML mapping from ``path``."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except OSError as e:
        raise AspectConfigError(f"Cannot read {path}: {e}") from e
    except yaml.YAMLError as e:
        raise AspectConfigError(f"Invalid YAML in {path}: {e}") from e
    if not isinstance(data, dict):
        raise AspectConfigError(f"Expected a mapping at the top of {path}")
    return data


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _to_namespace(value: Any) -> Any:
    if isinstance(value, dict):
        return SimpleNamespace(**{k: _to_namespace(v) for k, v in value.items()})
    return value


def get_config(path: Optional[str] = None) -> SimpleNamespace:
    """Build a fresh configuration tree.

    ``path`` takes precedence over the ``ASPECT360_CONFIG`` environment
    variable.
    """
    data = load_yaml(DEFAULT_CONFIG_PATH)
    override_path = path or os.environ.get(CONFIG_ENV)
    if override_path:
        logger.info(f"Loading configuration override from {override_path}")
        data = _merge(data, load_yaml(Path(override_path)))
    return _to_namespace(data)


@lru_cache(maxsize=1)
def cfg() -> SimpleNamespace:
    """Return the cached configuration."""
    return get_config()


def reset_config() -> None:
    """Drop the cached configuration so the next ``cfg()`` reloads it."""
    cfg.cache_clear()
