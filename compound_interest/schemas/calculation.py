"""Data contracts for lump-sum and accumulation calculations."""

from typing import Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_TAX_RATE = 20.315
DEFAULT_FX_RATE = 150.0
MAX_YEARS = 100
MIN_ANNUAL_RATE = -100.0
MAX_ANNUAL_RATE = 100.0

CompoundingFrequency = Literal[1, 2, 4, 12]


class FxOptions(BaseModel):
    """Single conversion-in / conversion-out rate pair."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    enabled: bool = False
    rate_in: float = Field(
        DEFAULT_FX_RATE,
        gt=0,
        allow_inf_nan=False,
        description="Home-currency units per foreign unit when investing.",
    )
    rate_out: float = Field(
        DEFAULT_FX_RATE,
        gt=0,
        allow_inf_nan=False,
        description="Home-currency units per foreign unit when converting back.",
    )


class CompoundRequest(BaseModel):
    """Inputs for a lump-sum deposit left to compound."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    principal: float = Field(..., ge=0, description="Deposit in home-currency units.")
    annual_rate: float = Field(
        ...,
        ge=MIN_ANNUAL_RATE,
        le=MAX_ANNUAL_RATE,
        allow_inf_nan=False,
        description="Annual rate in percent (e.g. 5 for 5%).",
    )
    years: int = Field(..., ge=0, le=MAX_YEARS, description="Number of years to project.")
    compounding_frequency: CompoundingFrequency = 1
    is_effective_rate: bool = False
    include_tax: bool = False
    tax_rate: float = Field(DEFAULT_TAX_RATE, ge=0, le=100)
    fx: FxOptions = Field(default_factory=FxOptions)


class AccumulationRequest(BaseModel):
    """Inputs for a monthly contribution plan taxed every compounding period."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    principal: float = Field(0.0, ge=0, description="Initial lump sum.")
    monthly_installment: float = Field(
        0.0,
        ge=0,
        description="Contribution added at the start of every month.",
    )
    annual_rate: float = Field(
        ...,
        ge=MIN_ANNUAL_RATE,
        le=MAX_ANNUAL_RATE,
        allow_inf_nan=False,
        description="Annual rate in percent.",
    )
    years: int = Field(..., ge=0, le=MAX_YEARS)
    compounding_frequency: CompoundingFrequency = 1
    tax_rate: float = Field(DEFAULT_TAX_RATE, ge=0, le=100)
    fx: FxOptions = Field(default_factory=FxOptions)


class CompoundYear(BaseModel):
    """Single row of a lump-sum schedule."""

    model_config = ConfigDict(extra="forbid", frozen=True, ser_json_inf_nan="null")

    year: int = Field(..., ge=0)
    principal: float
    interest: float
    balance: float


class AccumulationYear(BaseModel):
    """Single row of an accumulation schedule."""

    model_config = ConfigDict(extra="forbid", frozen=True, ser_json_inf_nan="null")

    year: int = Field(..., ge=0)
    principal: float
    installment: float
    interest: float
    tax: float
    balance: float
    total_invested: float
    # raw foreign-currency balance, only when FX conversion is enabled
    balance_forex: Optional[float] = None


class CompoundResult(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True, ser_json_inf_nan="null")

    final_value: int
    total_interest: int
    yield_percent: float
    yearly_data: Tuple[CompoundYear, ...]
    is_fx: bool


class FinalTaxCompoundResult(CompoundResult):
    """Lump-sum result with a single tax on total interest at maturity.

    The yearly series stays pre-tax; only the summary carries after-tax figures.
    """

    tax_amount: int
    after_tax_interest: int
    after_tax_total: float


class AccumulationResult(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True, ser_json_inf_nan="null")

    final_value: int
    total_interest: int
    total_tax: int
    total_invested: int
    no_tax_final_value: int
    net_yield_percent: float
    yearly_data: Tuple[AccumulationYear, ...]
    is_fx: bool
