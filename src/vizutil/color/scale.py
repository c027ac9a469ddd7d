"""Linear colour scales.

A scale maps a numeric domain onto colour stops, interpolating each RGB channel
linearly between consecutive stops.  With more than two stops the scale is
piecewise ("polylinear").  Values outside the domain extrapolate the nearest
segment unless ``clamp`` is set; channels are always limited to ``[0, 1]``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Sequence

import numpy as np
from matplotlib.colors import to_hex, to_rgb

__all__ = ["LinearColorScale", "linear_color_scale", "nice_ticks"]


def nice_ticks(lo: float, hi: float, count: int = 10) -> np.ndarray:
    """Return roughly ``count`` round-numbered ticks covering ``[lo, hi]``.

    The step is a power of ten times 1, 2 or 5.  Ticks never leave the extent.
    """
    if count < 1:
        raise ValueError("count must be >= 1")
    lo, hi = (lo, hi) if lo <= hi else (hi, lo)
    span = hi - lo
    if not math.isfinite(span):
        raise ValueError("tick extent must be finite")
    if span == 0:
        return np.array([lo], dtype=float)
    step = 10.0 ** math.floor(math.log10(span / count))
    err = count / span * step
    if err <= 0.15:
        step *= 10
    elif err <= 0.35:
        step *= 5
    elif err <= 0.75:
        step *= 2
    start = math.ceil(lo / step) * step
    stop = math.floor(hi / step) * step
    n = int(round((stop - start) / step)) + 1
    ticks = start + step * np.arange(n, dtype=float)
    decimals = max(0, -math.floor(math.log10(step)))
    return np.round(ticks, decimals)


@dataclass(frozen=True)
class LinearColorScale:
    """Piecewise-linear map from numbers to colours.

    ``domain`` must be strictly increasing or strictly decreasing and have one
    entry per colour in ``colors`` (at least two).
    """

    domain: tuple
    colors: tuple
    clamp: bool = False
    _rgb: np.ndarray = field(init=False, repr=False, compare=False)
    _x: np.ndarray = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        domain = tuple(float(d) for d in self.domain)
        colors = tuple(self.colors)
        if len(domain) < 2:
            raise ValueError("domain needs at least two values")
        if len(domain) != len(colors):
            raise ValueError(
                f"domain has {len(domain)} values but {len(colors)} colors were given"
            )
        if not all(math.isfinite(d) for d in domain):
            raise ValueError("domain values must be finite")
        x = np.asarray(domain, dtype=float)
        rgb = np.array([to_rgb(c) for c in colors], dtype=float)
        diffs = np.diff(x)
        if np.all(diffs < 0):
            x = x[::-1]
            rgb = rgb[::-1]
        elif not np.all(diffs > 0):
            raise ValueError("domain must be strictly monotonic")
        object.__setattr__(self, "domain", domain)
        object.__setattr__(self, "colors", colors)
        object.__setattr__(self, "_x", x)
        object.__setattr__(self, "_rgb", rgb)

    @property
    def extent(self) -> tuple[float, float]:
        return float(self._x[0]), float(self._x[-1])

    def rgb(self, values) -> np.ndarray:
        """Return an ``(n, 3)`` array of RGB floats for ``values``."""
        v = np.atleast_1d(np.asarray(values, dtype=float))
        x = self._x
        if self.clamp:
            v = np.clip(v, x[0], x[-1])
        i = np.clip(np.searchsorted(x, v, side="right") - 1, 0, len(x) - 2)
        t = (v - x[i]) / (x[i + 1] - x[i])
        c0 = self._rgb[i]
        c1 = self._rgb[i + 1]
        out = c0 + t[:, None] * (c1 - c0)
        return np.clip(out, 0.0, 1.0)

    def __call__(self, values):
        """Hex colour for a scalar, list of hex colours for a sequence."""
        rgb = self.rgb(values)
        if np.ndim(values) == 0:
            return to_hex(rgb[0])
        return [to_hex(c) for c in rgb]

    def ticks(self, count: int = 10) -> List[float]:
        lo, hi = self.extent
        return nice_ticks(lo, hi, count).tolist()


def linear_color_scale(
    domain: Sequence[float], colors: Sequence, clamp: bool = False
) -> LinearColorScale:
    """Build a :class:`LinearColorScale`, e.g. ``linear_color_scale((0, 100), ("white", "red"))``."""
    return LinearColorScale(tuple(domain), tuple(colors), clamp=clamp)
