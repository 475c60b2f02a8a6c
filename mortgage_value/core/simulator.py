from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Dict, Optional

import pandas as pd

from mortgage_value.validation.checks import validate_parameters, validate_seed

from .engine import SimulationResult, iter_months, run_simulation
from .inputs import SimulationParameters
from .random_source import GeneratorUniformSource

logger = logging.getLogger(__name__)

HOUSE_VALUE = "House Value (£)"
TOTAL_PAID = "Total Paid into Loan (£)"
NET_GAIN = "Net Gain (£)"


def simulate(params: SimulationParameters, seed: Optional[int] = None) -> SimulationResult:
    validate_parameters(params)
    validate_seed(seed)

    logger.info("Simulating %d years (seed=%s)", params.loan_term_years, seed)
    result = run_simulation(params, GeneratorUniformSource(seed))

    summary = summarize(result)
    logger.info(
        "Final house value %.2f, total paid %.2f, net gain %.2f",
        summary["final_house_value"],
        summary["final_total_paid"],
        summary["net_gain"],
    )
    return result


def simulate_path(params: SimulationParameters, seed: Optional[int] = None) -> pd.DataFrame:
    """Month-by-month detail of one path, month 0 included."""
    validate_parameters(params)
    validate_seed(seed)

    start = {
        "month": 0,
        "house_price": params.initial_property_value,
        "interest_rate": params.initial_interest_rate,
        "payment": 0.0,
        "interest": 0.0,
        "principal": 0.0,
        "loan_balance": params.initial_loan_value,
        "total_paid": 0.0,
    }
    records = [start] + [asdict(state) for state in iter_months(params, GeneratorUniformSource(seed))]
    return pd.DataFrame.from_records(records).set_index("month")


def summarize(result: SimulationResult) -> Dict[str, float]:
    final_house_value = result.house_prices[-1] if result.house_prices else 0.0
    final_total_paid = result.total_paid_into_loan[-1] if result.total_paid_into_loan else 0.0
    return {
        "final_house_value": final_house_value,
        "final_total_paid": final_total_paid,
        "net_gain": final_house_value - final_total_paid,
    }


def result_frame(result: SimulationResult) -> pd.DataFrame:
    """Chart-ready frame indexed by elapsed month."""
    df = pd.DataFrame(
        {
            HOUSE_VALUE: result.house_prices,
            TOTAL_PAID: result.total_paid_into_loan,
        }
    )
    df[NET_GAIN] = df[HOUSE_VALUE] - df[TOTAL_PAID]
    df.index.name = "month"
    return df
