"""Colour legend drawn with Matplotlib patches.

The legend is laid out in axes coordinates (``0..1`` on both axes) so it can
be placed on top of a map or chart axes without touching its data limits.
"""

from __future__ import annotations

from typing import Any, List, Literal, Mapping, NamedTuple, Optional, Sequence, Tuple

from matplotlib.figure import Figure
from matplotlib.patches import Rectangle
from pydantic import Field

from ..color.contrast import text_on_fill
from ..color.scale import LinearColorScale
from ..format import get_formatter
from ..options import Options, coerce_options
from ..utils.logging import logger

__all__ = ["LegendOptions", "LegendEntry", "legend_values", "draw_color_legend"]


class LegendOptions(Options):
    """Layout and labelling of a colour legend.

    Sizes and ``origin`` are in axes coordinates; ``origin`` is the top-left
    corner of the first swatch.  Swatches run downward when vertical and to
    the right when horizontal.
    """

    steps: Optional[int] = Field(default=None, ge=1)
    ticks: Optional[Tuple[float, ...]] = None
    orientation: Literal["vertical", "horizontal"] = "vertical"
    swatch_width: float = Field(default=0.05, gt=0)
    swatch_height: float = Field(default=0.05, gt=0)
    gap: float = Field(default=0.01, ge=0)
    origin: Tuple[float, float] = (0.02, 0.95)
    label_format: Optional[str] = None
    label_inside: bool = False
    fontsize: float = Field(default=9.0, gt=0)
    title: Optional[str] = None
    edgecolor: str = "none"


class LegendEntry(NamedTuple):
    value: float
    color: str
    label: str
    patch: Rectangle
    text: Any


def legend_values(scale: LinearColorScale, opts: LegendOptions) -> List[float]:
    """Values shown by the legend: explicit ticks, evenly spaced steps, or nice ticks."""
    if opts.ticks is not None:
        return [float(v) for v in opts.ticks]
    lo, hi = scale.extent
    if opts.steps is not None:
        if opts.steps == 1:
            return [lo]
        step = (hi - lo) / (opts.steps - 1)
        return [lo + i * step for i in range(opts.steps)]
    return scale.ticks()


def _swatch_xy(i: int, opts: LegendOptions) -> Tuple[float, float]:
    x0, y0 = opts.origin
    if opts.orientation == "vertical":
        return x0, y0 - (i + 1) * opts.swatch_height - i * opts.gap
    return x0 + i * (opts.swatch_width + opts.gap), y0 - opts.swatch_height


def draw_color_legend(
    ax,
    scale: LinearColorScale,
    options: LegendOptions | Mapping[str, Any] | None = None,
) -> List[LegendEntry]:
    """Draw one swatch per legend value onto ``ax``.

    Labels sit to the right of vertical swatches, below horizontal ones, or on
    the swatch itself when ``label_inside`` is set (black or white text picked
    by :func:`text_on_fill`).  With ``ax=None`` a fresh figure is created and
    can be reached through ``entries[0].patch.figure``.
    """

    opts = coerce_options(LegendOptions, options)
    fmt = get_formatter(opts.label_format)
    if ax is None:
        ax = Figure().add_subplot()
        ax.set_axis_off()

    values = legend_values(scale, opts)
    colors = scale(values)
    entries: List[LegendEntry] = []
    for i, (value, color) in enumerate(zip(values, colors)):
        x, y = _swatch_xy(i, opts)
        patch = Rectangle(
            (x, y),
            opts.swatch_width,
            opts.swatch_height,
            transform=ax.transAxes,
            facecolor=color,
            edgecolor=opts.edgecolor,
            clip_on=False,
        )
        ax.add_patch(patch)

        label = fmt(value)
        if opts.label_inside:
            tx, ty = x + opts.swatch_width / 2, y + opts.swatch_height / 2
            ha, va, text_color = "center", "center", text_on_fill(color)
        elif opts.orientation == "vertical":
            tx, ty = x + opts.swatch_width + opts.gap, y + opts.swatch_height / 2
            ha, va, text_color = "left", "center", "black"
        else:
            tx, ty = x + opts.swatch_width / 2, y - opts.gap
            ha, va, text_color = "center", "top", "black"
        text = ax.text(
            tx,
            ty,
            label,
            transform=ax.transAxes,
            ha=ha,
            va=va,
            color=text_color,
            fontsize=opts.fontsize,
            clip_on=False,
        )
        entries.append(LegendEntry(value, color, label, patch, text))

    if opts.title:
        x0, y0 = opts.origin
        ax.text(
            x0,
            y0 + opts.gap,
            opts.title,
            transform=ax.transAxes,
            ha="left",
            va="bottom",
            fontsize=opts.fontsize,
            fontweight="bold",
            clip_on=False,
        )

    logger.debug("draw_color_legend: %d entries, values=%s", len(entries), values)
    return entries
