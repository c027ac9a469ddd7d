"""Fit a projection so that a feature collection fills a pixel box.

:func:`fit_projection` resets the projection, projects the geographic bounds
of every feature through it, and derives the scale and translate that map the
resulting planar extent onto the target box.  The tighter axis determines the
scale, so the content never overflows the box; on the other axis it is either
aligned to the top-left corner or centred.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from typing import Any, Callable, List, Sequence

from pydantic import Field

from ..options import Options, coerce_options
from ..utils.logging import logger
from .bounds import geo_bounds

__all__ = [
    "FitOptions",
    "DegenerateBoundsError",
    "pad_box",
    "projected_extent",
    "fit_projection",
]

Box = List[List[float]]


class FitOptions(Options):
    padding: float = Field(default=0.0, ge=0)
    center: bool = False


class DegenerateBoundsError(ValueError):
    """Projected content collapses to a point, is empty, or is not finite."""


def _width(bb: Sequence[Sequence[float]]) -> float:
    return bb[1][0] - bb[0][0]


def _height(bb: Sequence[Sequence[float]]) -> float:
    return bb[1][1] - bb[0][1]


def _aspect(bb: Sequence[Sequence[float]]) -> float:
    h = _height(bb)
    # a horizontal line is infinitely wide
    return math.inf if h == 0 else _width(bb) / h


def pad_box(box: Sequence[Sequence[float]], padding: float) -> Box:
    """Return a copy of ``[[x1, y1], [x2, y2]]`` shrunk by ``padding`` on every side."""
    (x1, y1), (x2, y2) = box
    p = float(padding)
    return [[float(x1) + p, float(y1) + p], [float(x2) - p, float(y2) - p]]


def _features(data: Any) -> Iterable[Any]:
    if isinstance(data, Mapping):
        if "features" not in data:
            raise ValueError("data must be a FeatureCollection or a sequence of features")
        return data["features"]
    return data


def projected_extent(
    projection: Callable[[Sequence[float]], Sequence[float]],
    data: Any,
    bounds: Callable[[Any], Sequence[Sequence[float]]] = geo_bounds,
) -> Box:
    """Planar ``[[left, top], [right, bottom]]`` of the projected feature bounds.

    Only the two corners of each feature's geographic bounding box are
    projected, which is exact for projections that keep meridians and
    parallels axis-aligned.  Features with a null geometry (allowed by
    RFC 7946) are skipped.
    """
    left = math.inf
    right = -math.inf
    top = math.inf
    bottom = -math.inf
    for feature in _features(data):
        if (
            isinstance(feature, Mapping)
            and feature.get("type") == "Feature"
            and feature.get("geometry") is None
        ):
            logger.debug("projected_extent: skipping feature without geometry")
            continue
        for coords in bounds(feature):
            x, y = projection(coords)[:2]
            if not (math.isfinite(x) and math.isfinite(y)):
                raise DegenerateBoundsError(
                    f"projection of {list(coords)} is not finite: ({x}, {y})"
                )
            left = min(left, x)
            right = max(right, x)
            top = min(top, y)
            bottom = max(bottom, y)
    if left == math.inf:
        raise DegenerateBoundsError("feature collection has no located features")
    return [[left, top], [right, bottom]]


def fit_projection(projection, data, box, options=None, *, bounds=geo_bounds):
    """Set ``projection``'s scale and translate so ``data`` fills ``box``.

    Parameters
    ----------
    projection:
        Callable ``(lon, lat) -> (x, y)`` with ``scale()``/``translate()``
        getter-setters; it is reconfigured in place and returned.
    data:
        GeoJSON FeatureCollection or an iterable of features.
    box:
        Target ``[[x1, y1], [x2, y2]]`` in screen space (y grows downward).
        Not modified.
    options:
        :class:`FitOptions`, a mapping of its fields, or ``None``.
    bounds:
        Returns the geographic ``[[minx, miny], [maxx, maxy]]`` of a feature.

    Raises
    ------
    DegenerateBoundsError
        If the projected content is empty, non-finite or a single point.
        A straight line still fits along its long axis.
    ValueError
        If padding leaves no room in ``box``.
    """

    opts = coerce_options(FitOptions, options)
    target = pad_box(box, opts.padding)
    if _width(target) <= 0 or _height(target) <= 0:
        raise ValueError(f"target box {target} has no area after padding {opts.padding}")

    projection.scale(1).translate((0, 0))

    startbox = projected_extent(projection, data, bounds)
    if _width(startbox) <= 0 and _height(startbox) <= 0:
        raise DegenerateBoundsError(f"projected bounds {startbox} collapse to a point")

    width_determined = _aspect(startbox) > _aspect(target)
    if width_determined:
        scale = _width(target) / _width(startbox)
    else:
        scale = _height(target) / _height(startbox)
    trans_x = target[0][0] - startbox[0][0] * scale
    trans_y = target[0][1] - startbox[0][1] * scale

    if opts.center:
        if width_determined:
            trans_y -= (trans_y + startbox[1][1] * scale - target[1][1]) / 2
        else:
            trans_x -= (trans_x + startbox[1][0] * scale - target[1][0]) / 2

    logger.debug(
        "fit_projection: startbox=%s target=%s %s-determined scale=%g translate=(%g, %g)",
        startbox,
        target,
        "width" if width_determined else "height",
        scale,
        trans_x,
        trans_y,
    )
    return projection.scale(scale).translate((trans_x, trans_y))
