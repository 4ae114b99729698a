"""Pure calculation engine: no state is kept between calls."""

from compound_interest.core.accumulation import (
    calculate_accumulation_no_tax,
    calculate_periodic_taxed_accumulation,
    run_accumulation_scenario,
)
from compound_interest.core.compound import (
    calculate_compound,
    calculate_compound_with_final_tax,
    run_compound_scenario,
)
from compound_interest.core.errors import InvalidInputError
from compound_interest.core.formatting import format_number, format_percent

__all__ = [
    "InvalidInputError",
    "calculate_accumulation_no_tax",
    "calculate_compound",
    "calculate_compound_with_final_tax",
    "calculate_periodic_taxed_accumulation",
    "format_number",
    "format_percent",
    "run_accumulation_scenario",
    "run_compound_scenario",
]
