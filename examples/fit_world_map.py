"""Fit a Pacific-centred Mercator map of a few rectangles into an 800x400 image.

Run with ``python examples/fit_world_map.py``; writes ``out/fit_world_map.png``.
"""

from __future__ import annotations

from pathlib import Path

from matplotlib.figure import Figure
from matplotlib.patches import Polygon

from vizutil import (
    LegendOptions,
    MercatorOrigin,
    draw_color_legend,
    fit_projection,
    linear_color_scale,
    text_on_fill,
)
from vizutil.format import big
from vizutil.utils.logging import configure_logging

W, H = 800, 400

REGIONS = {
    "Japan": ((129.0, 31.0, 146.0, 45.5), 125_000_000),
    "New Zealand": ((166.0, -47.0, 179.0, -34.0), 5_100_000),
    "Hawaii": ((-160.5, 18.9, -154.8, 22.3), 1_400_000),
    "Chile": ((-75.6, -55.9, -66.9, -17.5), 19_500_000),
}


def _feature(x1, y1, x2, y2):
    ring = [[x1, y1], [x2, y1], [x2, y2], [x1, y2], [x1, y1]]
    return {"type": "Feature", "properties": {}, "geometry": {"type": "Polygon", "coordinates": [ring]}}


def main():
    configure_logging(enabled=True)
    data = {"type": "FeatureCollection", "features": [_feature(*r) for r, _ in REGIONS.values()]}
    proj = MercatorOrigin().origin((-180, 0))
    fit_projection(proj, data, [[0, 0], [W, H]], {"padding": 20, "center": True})

    scale = linear_color_scale((0, 125_000_000), ("#fee8c8", "#b30000"))
    fig = Figure(figsize=(W / 100, H / 100), dpi=100)
    ax = fig.add_axes((0, 0, 1, 1))
    ax.set_xlim(0, W)
    ax.set_ylim(H, 0)
    ax.set_axis_off()
    for name, (rect, pop) in REGIONS.items():
        feature = _feature(*rect)
        ring = [proj(c) for c in feature["geometry"]["coordinates"][0]]
        fill = scale(pop)
        ax.add_patch(Polygon(ring, closed=True, facecolor=fill, edgecolor="#333333"))
        cx = sum(p[0] for p in ring[:-1]) / 4
        cy = sum(p[1] for p in ring[:-1]) / 4
        ax.text(cx, cy, f"{name}\n{big(pop)}", ha="center", va="center", fontsize=7, color=text_on_fill(fill))

    draw_color_legend(ax, scale, LegendOptions(steps=4, label_format="big", title="Population"))
    out = Path("out/fit_world_map.png")
    out.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(out)
    print(f"scale={proj.scale():.1f} translate={proj.translate()} -> {out}")


if __name__ == "__main__":
    main()
