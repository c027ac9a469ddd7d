"""vizutil: small helpers for charts and maps.

``from vizutil import fit_projection, MercatorOrigin`` covers the common map
case; colour, legend and formatting helpers are re-exported as well.
"""

from .color import LinearColorScale, linear_color_scale, text_on_fill
from .format import amount, big, comma, percentage
from .geo import DegenerateBoundsError, FitOptions, MercatorOrigin, fit_projection, geo_bounds
from .options import Options
from .viz import LegendOptions, draw_color_legend

__all__ = [
    "LinearColorScale",
    "linear_color_scale",
    "text_on_fill",
    "amount",
    "big",
    "comma",
    "percentage",
    "DegenerateBoundsError",
    "FitOptions",
    "MercatorOrigin",
    "fit_projection",
    "geo_bounds",
    "Options",
    "LegendOptions",
    "draw_color_legend",
]
