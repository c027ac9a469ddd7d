from __future__ import annotations

from matplotlib.colors import to_rgb

DEFAULT_THRESHOLD = 152.0
LIGHT_TEXT = "#fff"
DARK_TEXT = "#000"


def text_on_fill(
    fill,
    *,
    threshold: float = DEFAULT_THRESHOLD,
    light: str = LIGHT_TEXT,
    dark: str = DARK_TEXT,
) -> str:
    """Pick black or white text for a label drawn over ``fill``.

    ``fill`` is any Matplotlib colour spec.  The mean of the 0-255 RGB channels
    is compared against ``threshold``: darker fills get ``light`` text.
    """
    r, g, b = to_rgb(fill)
    mean = (round(r * 255) + round(g * 255) + round(b * 255)) / 3.0
    return light if mean < threshold else dark
