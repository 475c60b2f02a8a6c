from __future__ import annotations

from typing import Optional

from mortgage_value.core.inputs import SimulationParameters


def _require(condition: bool, message: str) -> None:
    if not condition:
        raise ValueError(message)


def validate_property(inputs: SimulationParameters) -> None:
    _require(inputs.initial_property_value > 0, "Property value must be positive.")
    _require(inputs.initial_loan_value >= 0, "Loan value cannot be negative.")
    _require(inputs.initial_loan_value <= inputs.initial_property_value, "Loan value exceeds property value.")


def validate_loan(inputs: SimulationParameters) -> None:
    _require(inputs.initial_interest_rate_annual_percent >= 0, "Interest rate cannot be negative.")
    _require(float(inputs.loan_term_years).is_integer(), "Loan term must be a whole number of years.")
    _require(inputs.loan_term_years >= 0, "Loan term cannot be negative.")


def validate_market(inputs: SimulationParameters) -> None:
    _require(inputs.house_price_std_dev >= 0, "House price volatility cannot be negative.")
    _require(inputs.interest_rate_std_dev >= 0, "Interest rate volatility cannot be negative.")
    _require(-1.0 <= inputs.correlation <= 1.0, "Correlation must be between -1 and 1.")


def validate_seed(seed: Optional[int]) -> None:
    _require(seed is None or isinstance(seed, int), "Seed must be an integer or None.")


def validate_parameters(params: SimulationParameters) -> None:
    validate_property(params)
    validate_loan(params)
    validate_market(params)
