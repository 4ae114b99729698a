"""Pydantic contracts shared by the engine and the HTTP layer."""

from compound_interest.schemas.calculation import (
    DEFAULT_FX_RATE,
    DEFAULT_TAX_RATE,
    AccumulationRequest,
    AccumulationResult,
    AccumulationYear,
    CompoundRequest,
    CompoundResult,
    CompoundYear,
    FinalTaxCompoundResult,
    FxOptions,
)
from compound_interest.schemas.history import HistoryItem, SaveHistoryRequest

__all__ = [
    "DEFAULT_FX_RATE",
    "DEFAULT_TAX_RATE",
    "AccumulationRequest",
    "AccumulationResult",
    "AccumulationYear",
    "CompoundRequest",
    "CompoundResult",
    "CompoundYear",
    "FinalTaxCompoundResult",
    "FxOptions",
    "HistoryItem",
    "SaveHistoryRequest",
]
