from .contrast import text_on_fill
from .scale import LinearColorScale, linear_color_scale, nice_ticks

__all__ = ["text_on_fill", "LinearColorScale", "linear_color_scale", "nice_ticks"]
