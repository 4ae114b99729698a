"""Lump-sum compounding, with an optional single tax at maturity."""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Union

from compound_interest.core.errors import InvalidInputError
from compound_interest.core.rates import (
    check_frequency,
    ratio_percent,
    require_finite,
    resolve_fx,
    round_half_up,
    to_foreign,
    to_home,
)
from compound_interest.schemas.calculation import (
    CompoundRequest,
    CompoundResult,
    CompoundYear,
    FinalTaxCompoundResult,
)

logger = logging.getLogger(__name__)


def _growth_factor(
    rate: float, year: int, compounding_frequency: int, is_effective_rate: bool
) -> float:
    if is_effective_rate:
        # the stated rate is already the true annual yield
        return (1 + rate) ** year
    return (1 + rate / compounding_frequency) ** (year * compounding_frequency)


def calculate_compound(
    principal: float,
    rate: float,
    years: int,
    compounding_frequency: int = 1,
    is_effective_rate: bool = False,
    fx: Optional[Any] = None,
) -> CompoundResult:
    """
    Grow a lump sum over ``years`` and return the year-by-year schedule.

    ``rate`` is the annual rate in percent. With FX enabled the deposit is
    converted with ``rate_in`` before compounding and each balance is
    converted back with ``rate_out``; the ``principal`` column always shows
    the nominal home-currency deposit.

    Summary totals are rounded to integer units; the schedule is not.
    """
    k = check_frequency(compounding_frequency)
    options = resolve_fx(fx)
    r = rate / 100
    n = max(0, years)

    principal_forex = to_foreign(principal, options)

    yearly: List[CompoundYear] = []
    try:
        for year in range(0, n + 1):
            balance_forex = principal_forex * _growth_factor(r, year, k, is_effective_rate)
            yearly.append(
                CompoundYear(
                    year=year,
                    principal=principal,
                    interest=to_home(balance_forex - principal_forex, options),
                    balance=to_home(balance_forex, options),
                )
            )
        final_value_forex = principal_forex * _growth_factor(r, n, k, is_effective_rate)
    except OverflowError as exc:
        raise InvalidInputError(
            [f"growth over {n} years at {rate}% overflows; reduce the rate or horizon"]
        ) from exc

    final_value = to_home(final_value_forex, options)
    total_interest = final_value - principal
    require_finite(final_value=final_value, total_interest=total_interest)

    return CompoundResult(
        final_value=round_half_up(final_value),
        total_interest=round_half_up(total_interest),
        yield_percent=ratio_percent(total_interest, principal),
        yearly_data=tuple(yearly),
        is_fx=options.enabled,
    )


def calculate_compound_with_final_tax(
    principal: float,
    rate: float,
    years: int,
    compounding_frequency: int,
    tax_rate: float,
    is_effective_rate: bool = False,
    fx: Optional[Any] = None,
) -> FinalTaxCompoundResult:
    """Apply one flat tax to the rounded total interest at maturity.

    The yearly schedule is left exactly as :func:`calculate_compound` returns
    it (pre-tax); only the summary fields carry after-tax figures.
    """
    result = calculate_compound(
        principal, rate, years, compounding_frequency, is_effective_rate, fx
    )
    tax_amount = round_half_up(result.total_interest * (tax_rate / 100))
    after_tax_interest = result.total_interest - tax_amount

    return FinalTaxCompoundResult(
        **dict(result),
        tax_amount=tax_amount,
        after_tax_interest=after_tax_interest,
        after_tax_total=principal + after_tax_interest,
    )


def run_compound_scenario(
    request: CompoundRequest,
) -> Union[CompoundResult, FinalTaxCompoundResult]:
    """Run the lump-sum scenario described by ``request``."""
    logger.debug(
        "compound scenario: principal=%s rate=%s years=%s k=%s effective=%s tax=%s fx=%s",
        request.principal,
        request.annual_rate,
        request.years,
        request.compounding_frequency,
        request.is_effective_rate,
        request.include_tax,
        request.fx.enabled,
    )
    if request.include_tax:
        return calculate_compound_with_final_tax(
            request.principal,
            request.annual_rate,
            request.years,
            request.compounding_frequency,
            request.tax_rate,
            is_effective_rate=request.is_effective_rate,
            fx=request.fx,
        )
    return calculate_compound(
        request.principal,
        request.annual_rate,
        request.years,
        request.compounding_frequency,
        is_effective_rate=request.is_effective_rate,
        fx=request.fx,
    )
