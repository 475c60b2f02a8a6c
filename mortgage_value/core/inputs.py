from dataclasses import dataclass


@dataclass(frozen=True)
class SimulationParameters:
    initial_property_value: float
    initial_loan_value: float
    initial_interest_rate_annual_percent: float  # e.g. 4.75
    loan_term_years: int
    correlation: float = 0.0
    house_price_std_dev: float = 0.0  # annualized volatility fraction
    interest_rate_std_dev: float = 0.0

    @property
    def steps(self) -> int:
        return int(self.loan_term_years) * 12

    @property
    def initial_interest_rate(self) -> float:
        """Annual rate as a fraction."""
        return self.initial_interest_rate_annual_percent / 100.0
