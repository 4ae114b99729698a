"""Display helpers whose output shape the frontend relies on."""

import math

from compound_interest.core.rates import round_half_up


def format_number(num: float) -> str:
    """Round to an integer and group thousands with commas, e.g. ``1,628,895``.

    Non-finite values come back as ``nan``, ``inf`` or ``-inf``.
    """
    if not math.isfinite(num):
        return str(num)
    return f"{round_half_up(num):,}"


def format_percent(percent: float, decimals: int = 2) -> str:
    """Signed percentage: ``+5.00%`` for non-negative values, ``-1.25%`` otherwise."""
    percent = percent + 0.0  # drop a negative zero
    sign = "+" if percent >= 0 else ""
    return f"{sign}{percent:.{decimals}f}%"
