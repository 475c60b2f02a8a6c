from __future__ import annotations

from dataclasses import replace

from .inputs import SimulationParameters


def base_parameters() -> SimulationParameters:
    """Provide a reasonable starting point for the UI."""
    property_value = 289_707.0
    return SimulationParameters(
        initial_property_value=property_value,
        initial_loan_value=property_value,
        initial_interest_rate_annual_percent=4.75,
        loan_term_years=30,
        correlation=-0.6,
        house_price_std_dev=0.1,
        interest_rate_std_dev=0.1,
    )


def fixed_rate_parameters(params: SimulationParameters) -> SimulationParameters:
    """Same bundle with both volatilities zeroed: flat house price, fixed-rate loan."""
    return replace(params, house_price_std_dev=0.0, interest_rate_std_dev=0.0)
