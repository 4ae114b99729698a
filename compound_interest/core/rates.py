"""Helpers shared by the lump-sum and accumulation calculations."""

from __future__ import annotations

import math
from typing import Any, Optional

from pydantic import ValidationError

from compound_interest.core.errors import InvalidInputError
from compound_interest.schemas.calculation import FxOptions

SUPPORTED_FREQUENCIES = (1, 2, 4, 12)


def round_half_up(value: float) -> int:
    """Round to the nearest integer unit, halves towards +infinity."""
    return int(math.floor(value + 0.5))


def require_finite(**totals: float) -> None:
    """Reject results that overflowed the float range."""
    bad = [name for name, value in totals.items() if not math.isfinite(value)]
    if bad:
        raise InvalidInputError(
            [f"{name} is out of the representable range; reduce the rate or horizon" for name in bad]
        )


def ratio_percent(numerator: float, denominator: float) -> float:
    """numerator / denominator * 100 with IEEE results for a zero denominator."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator)
    return numerator / denominator * 100


def resolve_fx(fx: Optional[Any]) -> FxOptions:
    """Return validated FX options; ``None`` means conversion disabled.

    Malformed options are rejected instead of falling back to a default rate.
    """
    if fx is None:
        return FxOptions()
    if isinstance(fx, FxOptions):
        return fx
    try:
        return FxOptions.model_validate(fx)
    except ValidationError as exc:
        raise InvalidInputError(
            [f"fx.{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()]
        ) from exc


def check_frequency(compounding_frequency: int) -> int:
    if compounding_frequency not in SUPPORTED_FREQUENCIES:
        raise InvalidInputError(
            [
                f"compounding_frequency must be one of {SUPPORTED_FREQUENCIES}, "
                f"got {compounding_frequency!r}"
            ]
        )
    return int(compounding_frequency)


def to_foreign(amount: float, fx: FxOptions) -> float:
    return amount / fx.rate_in if fx.enabled else amount


def to_home(amount: float, fx: FxOptions) -> float:
    return amount * fx.rate_out if fx.enabled else amount
