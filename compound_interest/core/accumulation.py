"""Monthly contribution plans with tax deducted every compounding period."""

from __future__ import annotations

import logging
from typing import Any, List, Optional

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
    DEFAULT_TAX_RATE,
    AccumulationRequest,
    AccumulationResult,
    AccumulationYear,
)

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12


def _prorated_installment_interest(
    installment: float, period_rate: float, months_per_period: int, month: int
) -> float:
    """Interest earned inside the period by an installment paid at the start of ``month``.

    ``month`` is 1-indexed within the period; the first month's installment is
    on deposit for the whole period, the last one for a single month.
    """
    months_fraction = (months_per_period - month + 1) / months_per_period
    return installment * period_rate * months_fraction


def calculate_periodic_taxed_accumulation(
    principal: float,
    monthly_installment: float,
    rate: float,
    years: int,
    compounding_frequency: int = 1,
    tax_rate: float = DEFAULT_TAX_RATE,
    fx: Optional[Any] = None,
) -> AccumulationResult:
    """
    Build a year-by-year accumulation table.

    Order of operations (per compounding period, k per year):
      1) The balance at the start of the period earns interest for the full period.
      2) Each month's installment is added at the START of its month and earns
         a prorated share of the period's interest.
      3) The period's interest is taxed; only the after-tax part is capitalised.

    With FX enabled all balance arithmetic runs in foreign units and reported
    figures are converted back with ``rate_out``. ``total_invested`` always
    counts the nominal home-currency installments.
    """
    k = check_frequency(compounding_frequency)
    options = resolve_fx(fx)
    r = rate / 100
    n = max(0, years)
    period_rate = r / k
    months_per_period = MONTHS_PER_YEAR // k
    tax_fraction = tax_rate / 100

    installment_forex = to_foreign(monthly_installment, options)
    balance = to_foreign(principal, options)
    total_tax = 0.0
    total_invested = principal

    yearly: List[AccumulationYear] = [
        AccumulationYear(
            year=0,
            principal=principal,
            installment=0.0,
            interest=0.0,
            tax=0.0,
            balance=principal,
            total_invested=principal,
            balance_forex=balance if options.enabled else None,
        )
    ]

    for year in range(1, n + 1):
        yearly_interest = 0.0
        yearly_tax = 0.0
        yearly_installment = 0.0

        for _ in range(k):
            period_interest = balance * period_rate

            for month in range(1, months_per_period + 1):
                period_interest += _prorated_installment_interest(
                    installment_forex, period_rate, months_per_period, month
                )
                balance += installment_forex
                total_invested += monthly_installment
                yearly_installment += monthly_installment

            period_tax = period_interest * tax_fraction
            after_tax_interest = period_interest - period_tax

            yearly_interest += after_tax_interest
            yearly_tax += period_tax
            balance += after_tax_interest

        total_tax += yearly_tax

        yearly.append(
            AccumulationYear(
                year=year,
                principal=principal,
                installment=yearly_installment,
                interest=to_home(yearly_interest, options),
                tax=to_home(yearly_tax, options),
                balance=to_home(balance, options),
                total_invested=total_invested,
                balance_forex=balance if options.enabled else None,
            )
        )

    final_value = to_home(balance, options)
    total_interest = final_value - total_invested

    # same converted inputs as the taxed run so the comparison is like for like
    no_tax_balance = calculate_accumulation_no_tax(
        to_foreign(principal, options),
        installment_forex,
        rate,
        n,
        k,
    )
    require_finite(
        final_value=final_value,
        total_tax=to_home(total_tax, options),
        no_tax_final_value=to_home(no_tax_balance, options),
    )

    return AccumulationResult(
        final_value=round_half_up(final_value),
        total_interest=round_half_up(total_interest),
        total_tax=round_half_up(to_home(total_tax, options)),
        total_invested=round_half_up(total_invested),
        no_tax_final_value=round_half_up(to_home(no_tax_balance, options)),
        net_yield_percent=(
            ratio_percent(total_interest, total_invested) if total_invested > 0 else 0.0
        ),
        yearly_data=tuple(yearly),
        is_fx=options.enabled,
    )


def calculate_accumulation_no_tax(
    principal: float,
    monthly_installment: float,
    rate: float,
    years: int,
    compounding_frequency: int = 1,
) -> float:
    """Final balance of the same proration model with no tax deducted.

    Amounts are taken as given (already in the currency the caller computes
    in) and the raw, unrounded balance is returned.
    """
    k = check_frequency(compounding_frequency)
    period_rate = rate / 100 / k
    months_per_period = MONTHS_PER_YEAR // k

    balance = principal
    for _ in range(max(0, years)):
        for _ in range(k):
            period_interest = balance * period_rate
            for month in range(1, months_per_period + 1):
                period_interest += _prorated_installment_interest(
                    monthly_installment, period_rate, months_per_period, month
                )
                balance += monthly_installment
            balance += period_interest
    return balance


def run_accumulation_scenario(request: AccumulationRequest) -> AccumulationResult:
    """Run the accumulation scenario described by ``request``."""
    logger.debug(
        "accumulation scenario: principal=%s installment=%s rate=%s years=%s k=%s tax=%s fx=%s",
        request.principal,
        request.monthly_installment,
        request.annual_rate,
        request.years,
        request.compounding_frequency,
        request.tax_rate,
        request.fx.enabled,
    )
    return calculate_periodic_taxed_accumulation(
        request.principal,
        request.monthly_installment,
        request.annual_rate,
        request.years,
        request.compounding_frequency,
        request.tax_rate,
        fx=request.fx,
    )
