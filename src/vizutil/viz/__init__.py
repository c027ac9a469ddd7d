from .legend import LegendEntry, LegendOptions, draw_color_legend, legend_values

__all__ = ["LegendEntry", "LegendOptions", "draw_color_legend", "legend_values"]
