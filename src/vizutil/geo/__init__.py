from .bounds import geo_bounds
from .fit import DegenerateBoundsError, FitOptions, fit_projection, pad_box, projected_extent
from .projection import MercatorOrigin, Projection

__all__ = [
    "geo_bounds",
    "DegenerateBoundsError",
    "FitOptions",
    "fit_projection",
    "pad_box",
    "projected_extent",
    "MercatorOrigin",
    "Projection",
]
