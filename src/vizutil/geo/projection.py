"""Projections with d3-style scale/translate accessors.

Accessors double as getters and setters: ``p.scale()`` returns the current
value, ``p.scale(250)`` sets it and returns ``p`` so calls can be chained::

    proj = MercatorOrigin().origin((-150, 0)).scale(1000).translate((400, 300))
    x, y = proj((-122.4, 37.8))
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Sequence, Tuple

__all__ = ["Projection", "MercatorOrigin"]

XY = Tuple[float, float]

RADIANS = math.pi / 180.0

_UNSET = object()


class Projection(ABC):
    """Maps ``(lon, lat)`` to planar ``(x, y)``; y grows downward."""

    default_scale = 500.0
    default_translate: XY = (480.0, 250.0)

    def __init__(self):
        self._scale = float(self.default_scale)
        self._translate = tuple(float(t) for t in self.default_translate)

    def __call__(self, coordinates: Sequence[float]) -> XY:
        return self.project(float(coordinates[0]), float(coordinates[1]))

    @abstractmethod
    def project(self, lon: float, lat: float) -> XY:
        ...

    @abstractmethod
    def invert(self, point: Sequence[float]) -> XY:
        ...

    def scale(self, k=_UNSET):
        if k is _UNSET:
            return self._scale
        self._scale = float(k)
        return self

    def translate(self, t=_UNSET):
        if t is _UNSET:
            return self._translate
        if len(t) != 2:
            raise ValueError("translate expects an (x, y) pair")
        self._translate = (float(t[0]), float(t[1]))
        return self


class MercatorOrigin(Projection):
    """Spherical Mercator whose central meridian can be moved.

    ``origin((lon, lat))`` shifts longitudes by ``lon`` before projecting, so
    that e.g. Pacific-centred maps do not split at 180°.  The latitude
    component is stored but has no effect.  Longitudes wrap to one world width
    and latitudes are clipped to the square Mercator world.
    """

    def __init__(self):
        super().__init__()
        self._origin: XY = (0.0, 0.0)

    def origin(self, o=_UNSET):
        if o is _UNSET:
            return self._origin
        if len(o) != 2:
            raise ValueError("origin expects a (lon, lat) pair")
        self._origin = (float(o[0]), float(o[1]))
        return self

    def project(self, lon: float, lat: float) -> XY:
        x = (lon + self._origin[0]) / 360.0
        t = math.tan(math.pi / 4.0 + lat * RADIANS / 2.0)
        if t > 0:
            y = -(math.log(t) / RADIANS) / 360.0
        else:
            y = math.inf
        if x < -0.5:
            x += 1.0
        elif x > 0.5:
            x -= 1.0
        y = max(-0.5, min(0.5, y))
        tx, ty = self._translate
        return (self._scale * x + tx, self._scale * y + ty)

    def invert(self, point: Sequence[float]) -> XY:
        tx, ty = self._translate
        x = (float(point[0]) - tx) / self._scale
        y = (float(point[1]) - ty) / self._scale
        lon = (360.0 * x - self._origin[0] + 180.0) % 360.0 - 180.0
        lat = 2.0 * math.atan(math.exp(-360.0 * y * RADIANS)) / RADIANS - 90.0
        return (lon, lat)
