"""Configuration loader."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..utils.dict_merge import deep_update
from ..utils.logging import logger
from .schema import VizConfig

__all__ = ["DEFAULTS_PATH", "load_config"]

DEFAULTS_PATH = Path(__file__).with_name("defaults.yaml")


def _read_yaml(path: str | Path) -> Dict[str, Any]:
    p = Path(path)
    with p.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise TypeError(f"Top-level YAML at {path} must be a mapping")
    return data


def load_config(
    path: str | Path | None = None,
    *,
    overrides: Optional[Dict[str, Any]] = None,
) -> VizConfig:
    """Load packaged defaults, then ``path``, then ``overrides``; validate the result.

    A ``path`` that does not exist raises :class:`FileNotFoundError`.  Unknown
    keys and out-of-range values raise :class:`pydantic.ValidationError`.
    """

    cfg = _read_yaml(DEFAULTS_PATH)
    if path is not None:
        if not Path(path).exists():
            raise FileNotFoundError(f"config not found: {path}")
        cfg = deep_update(cfg, _read_yaml(path))
        logger.debug("loaded config from %s", path)
    if overrides:
        cfg = deep_update(cfg, overrides)
    return VizConfig.model_validate(cfg)
