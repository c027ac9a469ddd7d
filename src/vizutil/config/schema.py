"""Pydantic models for the vizutil configuration file."""
from __future__ import annotations

import math
from typing import Literal, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator
from matplotlib.colors import is_color_like

from ..geo.fit import FitOptions
from ..viz.legend import LegendOptions


class MercatorConfig(BaseModel):
    scale: float = Field(default=500.0, gt=0)
    translate: Tuple[float, float] = (480.0, 250.0)
    origin: Tuple[float, float] = (0.0, 0.0)

    model_config = ConfigDict(extra="forbid")

    @field_validator("translate", "origin")
    @classmethod
    def _check_finite(cls, v: Tuple[float, float]) -> Tuple[float, float]:
        if any(not math.isfinite(c) for c in v):
            raise ValueError("must be a finite (x, y) pair")
        return v


class ContrastConfig(BaseModel):
    threshold: float = Field(default=152.0, ge=0, le=255)
    light: str = "#fff"
    dark: str = "#000"

    model_config = ConfigDict(extra="forbid")

    @field_validator("light", "dark")
    @classmethod
    def _check_color(cls, v: str) -> str:
        if not is_color_like(v):
            raise ValueError(f"not a colour: {v!r}")
        return v


class LoggingConfig(BaseModel):
    level: Literal["none", "info", "debug"] = "none"

    model_config = ConfigDict(extra="forbid")


class VizConfig(BaseModel):
    fit: FitOptions = Field(default_factory=FitOptions)
    legend: LegendOptions = Field(default_factory=LegendOptions)
    mercator: MercatorConfig = Field(default_factory=MercatorConfig)
    contrast: ContrastConfig = Field(default_factory=ContrastConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(extra="forbid")


__all__ = ["MercatorConfig", "ContrastConfig", "LoggingConfig", "VizConfig"]
