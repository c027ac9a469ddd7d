"""Planar bounding boxes of GeoJSON objects."""
from __future__ import annotations

from typing import Any, Iterator, List, Mapping

import numpy as np

__all__ = ["geo_bounds", "iter_positions"]

# nesting depth of the "coordinates" member per geometry type
_COORD_DEPTH = {
    "Point": 0,
    "MultiPoint": 1,
    "LineString": 1,
    "MultiLineString": 2,
    "Polygon": 2,
    "MultiPolygon": 3,
}


def _flatten(coords: Any, depth: int) -> Iterator[Any]:
    if depth == 0:
        yield coords
        return
    for c in coords:
        yield from _flatten(c, depth - 1)


def iter_positions(obj: Mapping[str, Any] | None) -> Iterator[Any]:
    """Yield every position (``[x, y, ...]``) of a GeoJSON object."""
    if obj is None:
        return
    kind = obj.get("type")
    if kind == "FeatureCollection":
        for feature in obj.get("features", []):
            yield from iter_positions(feature)
    elif kind == "Feature":
        yield from iter_positions(obj.get("geometry"))
    elif kind == "GeometryCollection":
        for geom in obj.get("geometries", []):
            yield from iter_positions(geom)
    elif kind in _COORD_DEPTH:
        yield from _flatten(obj.get("coordinates", []), _COORD_DEPTH[kind])
    else:
        raise ValueError(f"unsupported GeoJSON type: {kind!r}")


def geo_bounds(obj: Mapping[str, Any]) -> List[List[float]]:
    """Return ``[[minx, miny], [maxx, maxy]]`` over all positions of ``obj``.

    Coordinates are treated as planar; boxes crossing the antimeridian are not
    detected.
    """
    pts = [p[:2] for p in iter_positions(obj)]
    if not pts:
        raise ValueError("GeoJSON object has no coordinates")
    arr = np.asarray(pts, dtype=float)
    lo = arr.min(axis=0)
    hi = arr.max(axis=0)
    return [[float(lo[0]), float(lo[1])], [float(hi[0]), float(hi[1])]]
