"""Number formatting helpers for axis ticks, legends and tooltips."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable, Dict, Union

__all__ = [
    "percentage",
    "comma",
    "big",
    "amount",
    "FORMATTERS",
    "get_formatter",
]

Formatter = Callable[[float], str]

# (suffix, divisor), ascending
ORDERS = [
    ("", 1),
    ("K", 1_000),
    ("M", 1_000_000),
    ("Bn", 1_000_000_000),
]


def percentage(x: float) -> str:
    """Whole percent, halves rounded away from zero: ``0.125 -> '13%'``.

    The product ``x * 100`` is rounded as the float it is, so ``0.145``
    (``14.499...``) gives ``'14%'``.
    """
    if x == 0:
        return "0%"
    q = Decimal(x * 100).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    return f"{q}%"


def comma(x: float) -> str:
    """Group thousands with commas; integral floats lose their ``.0``."""
    if isinstance(x, float) and x.is_integer():
        x = int(x)
    return f"{x:,}"


def big(d: float) -> str:
    """Format large numbers in a concise 1- to 3-digit style.

    ``1234 -> '1.2K'``, ``25000000 -> '25M'``, ``950 -> '950'``.  One decimal
    is kept only below 100 and when the fractional part is noticeable.
    """
    order = 0
    while order < len(ORDERS) - 1 and d > ORDERS[order + 1][1]:
        order += 1
    suffix, divisor = ORDERS[order]
    d = d / divisor
    if d >= 100 or d - math.trunc(d) < 0.059:
        text = f"{d:.0f}"
    else:
        text = f"{d:.1f}"
    return text + suffix


def amount(d: float) -> str:
    """Money in the :func:`big` style: ``1500000 -> '$1.5M'``."""
    return "$" + big(d)


FORMATTERS: Dict[str, Formatter] = {
    "percentage": percentage,
    "comma": comma,
    "big": big,
    "amount": amount,
}


def get_formatter(spec: Union[str, Formatter, None]) -> Formatter:
    """Resolve a formatter by name; callables pass through, ``None`` gives ``str``."""
    if spec is None:
        return str
    if callable(spec):
        return spec
    try:
        return FORMATTERS[spec]
    except KeyError:
        raise KeyError(
            f"unknown formatter {spec!r}; expected one of {sorted(FORMATTERS)}"
        ) from None
