from __future__ import annotations

import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))


import streamlit as st

from mortgage_value.core.engine import clamp_annual_rate
from mortgage_value.core.inputs import SimulationParameters
from mortgage_value.core.mortgage import amortization_schedule
from mortgage_value.core.scenarios import base_parameters, fixed_rate_parameters
from mortgage_value.core.simulator import result_frame, simulate, simulate_path, summarize

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(name)s - %(message)s")
logger = logging.getLogger(__name__)


st.set_page_config(page_title="Mortgage Value Simulator", layout="wide")


def format_money_amount(value: float) -> str:
    return f"£{value:,.2f}"


def sidebar_inputs() -> tuple[SimulationParameters, int | None]:
    defaults = base_parameters()
    with st.sidebar.expander("Property & Loan", expanded=True):
        property_value = st.number_input(
            "Initial property value", min_value=1.0, max_value=10_000_000.0, value=defaults.initial_property_value, step=1_000.0
        )
        loan_value = st.number_input(
            "Initial loan value",
            min_value=0.0,
            max_value=float(property_value),
            value=min(defaults.initial_loan_value, float(property_value)),
            step=1_000.0,
        )
        interest_rate = st.number_input(
            "Initial interest rate (annual %)",
            min_value=0.0,
            max_value=20.0,
            value=defaults.initial_interest_rate_annual_percent,
            step=0.05,
            format="%.2f",
        )
        term_years = st.number_input("Loan term (years)", min_value=1, max_value=40, value=defaults.loan_term_years, step=1)

    with st.sidebar.expander("Market volatility", expanded=True):
        correlation = st.number_input(
            "House price / rate correlation", min_value=-1.0, max_value=1.0, value=defaults.correlation, step=0.05
        )
        house_std = st.number_input(
            "House price std dev", min_value=0.0, max_value=2.0, value=defaults.house_price_std_dev, step=0.01
        )
        rate_std = st.number_input(
            "Interest rate std dev", min_value=0.0, max_value=2.0, value=defaults.interest_rate_std_dev, step=0.01
        )

    with st.sidebar.expander("Advanced", expanded=False):
        use_seed = st.checkbox("Fix random seed", value=False)
        seed = st.number_input("Seed", min_value=0, max_value=2**31 - 1, value=42, step=1) if use_seed else None

    params = SimulationParameters(
        initial_property_value=float(property_value),
        initial_loan_value=float(loan_value),
        initial_interest_rate_annual_percent=float(interest_rate),
        loan_term_years=int(term_years),
        correlation=float(correlation),
        house_price_std_dev=float(house_std),
        interest_rate_std_dev=float(rate_std),
    )
    return params, (int(seed) if seed is not None else None)


def render_summary(result) -> None:
    summary = summarize(result) if result is not None else {"final_house_value": 0.0, "final_total_paid": 0.0, "net_gain": 0.0}
    cols = st.columns(3)
    cols[0].metric("Property Value", format_money_amount(summary["final_house_value"]))
    cols[1].metric("Total Paid into Loan", format_money_amount(summary["final_total_paid"]))
    cols[2].metric("Net Gain", format_money_amount(summary["net_gain"]))


def render_fixed_rate_reference(params: SimulationParameters) -> None:
    reference = fixed_rate_parameters(params)
    annual_rate = clamp_annual_rate(reference.initial_interest_rate)
    schedule = amortization_schedule(reference.initial_loan_value, annual_rate, reference.loan_term_years)
    if schedule.empty:
        return
    path = simulate_path(reference)
    with st.expander("Fixed-rate reference", expanded=False):
        st.caption(f"Level payments at {annual_rate * 100:.2f}% with no shocks.")
        cols = st.columns(2)
        cols[0].metric("Monthly payment", format_money_amount(schedule["payment"].iloc[0]))
        cols[1].metric("Total paid over term", format_money_amount(path["total_paid"].iloc[-1]))
        st.line_chart(path[["loan_balance"]], height=220)


def main():
    title_col, button_col = st.columns([4, 1])
    title_col.title("Mortgage Value Simulator")
    params, seed = sidebar_inputs()

    if button_col.button("Run", type="primary"):
        try:
            st.session_state["result"] = simulate(params, seed=seed)
        except Exception as exc:  # Streamlit friendly error surface
            logger.error("Simulation failed: %s", exc, exc_info=True)
            st.error(f"Unable to run simulation: {exc}")

    result = st.session_state.get("result")
    render_summary(result)

    if result is None:
        st.info("Adjust inputs in the sidebar and click **Run**.")
    else:
        st.line_chart(result_frame(result), height=400)

    render_fixed_rate_reference(params)


if __name__ == "__main__":
    main()
