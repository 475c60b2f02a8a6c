from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from .inputs import SimulationParameters
from .mortgage import monthly_payment, split_payment
from .random_source import GeneratorUniformSource, UniformSource
from .shocks import clamp_correlation, generate_correlated_shock

logger = logging.getLogger(__name__)

MIN_ANNUAL_RATE = 0.01
MAX_ANNUAL_RATE = 0.20


@dataclass
class SimulationResult:
    house_prices: List[float] = field(default_factory=list)
    total_paid_into_loan: List[float] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.house_prices)


@dataclass
class MonthState:
    month: int  # 1-based; month 0 is the starting state
    house_price: float
    interest_rate: float
    payment: float
    interest: float
    principal: float
    loan_balance: float
    total_paid: float


def clamp_annual_rate(rate: float) -> float:
    return min(MAX_ANNUAL_RATE, max(rate, MIN_ANNUAL_RATE))


def _next_interest_rate(rate: float, interest_rate_std_dev: float, rate_shock: float) -> float:
    return clamp_annual_rate(max(0.0, rate + interest_rate_std_dev * rate_shock))


def _apply_payment(
    balance: float, monthly_rate: float, payment: float, total_paid: float
) -> Tuple[float, float, float, float]:
    """Return (balance, total_paid, interest, principal); a repaid loan is left untouched."""
    if balance <= 0:
        return 0.0, total_paid, 0.0, 0.0
    interest, principal = split_payment(balance, monthly_rate, payment)
    balance -= principal
    total_paid += payment
    if balance <= 0:
        balance = 0.0
    return balance, total_paid, interest, principal


def iter_months(params: SimulationParameters, source: UniformSource) -> Iterator[MonthState]:
    """Advance house price, rate and loan one month at a time."""
    steps = params.steps
    rho = clamp_correlation(params.correlation)
    house_vol = params.house_price_std_dev
    rate_vol = params.interest_rate_std_dev

    house_price = params.initial_property_value
    loan_balance = params.initial_loan_value
    interest_rate = params.initial_interest_rate
    total_paid = 0.0

    for t in range(steps):
        house_shock, rate_shock = generate_correlated_shock(rho, house_vol, rate_vol, source)

        # Asset value compounds on itself
        monthly_return = house_vol * house_shock / 12.0
        house_price += house_price * monthly_return

        interest_rate = _next_interest_rate(interest_rate, rate_vol, rate_shock)

        monthly_rate = interest_rate / 12.0
        payment = monthly_payment(loan_balance, interest_rate, steps - t)

        loan_balance, total_paid, interest, principal = _apply_payment(
            loan_balance, monthly_rate, payment, total_paid
        )

        yield MonthState(
            month=t + 1,
            house_price=house_price,
            interest_rate=interest_rate,
            payment=payment,
            interest=interest,
            principal=principal,
            loan_balance=loan_balance,
            total_paid=total_paid,
        )


def run_simulation(params: SimulationParameters, source: Optional[UniformSource] = None) -> SimulationResult:
    """One sample path of house value and cumulative loan payments, index 0 being the start."""
    if source is None:
        source = GeneratorUniformSource()
    if clamp_correlation(params.correlation) != params.correlation:
        logger.warning("Correlation %s outside [-1, 1]; clamping.", params.correlation)
    logger.debug("Running %d monthly steps for %s", params.steps, params)

    result = SimulationResult(
        house_prices=[params.initial_property_value],
        total_paid_into_loan=[0.0],
    )
    for state in iter_months(params, source):
        result.house_prices.append(state.house_price)
        result.total_paid_into_loan.append(state.total_paid)

    return result
