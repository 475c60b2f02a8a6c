from __future__ import annotations

from typing import Tuple

import pandas as pd


def monthly_payment(principal: float, annual_rate: float, remaining_months: int) -> float:
    monthly_rate = annual_rate / 12.0
    if remaining_months <= 0:
        return 0.0
    if monthly_rate == 0:
        return principal / remaining_months
    return principal * monthly_rate / (1 - (1 + monthly_rate) ** (-remaining_months))


def split_payment(balance: float, monthly_rate: float, payment: float) -> Tuple[float, float]:
    """Return (interest, principal); principal never exceeds the balance."""
    interest = balance * monthly_rate
    principal = min(balance, payment - interest)
    return interest, principal


def amortization_schedule(principal: float, annual_rate: float, term_years: int) -> pd.DataFrame:
    """Fixed-rate schedule, one row per month starting at month 1."""
    term_months = term_years * 12
    payment = monthly_payment(principal, annual_rate, term_months)
    monthly_rate = annual_rate / 12.0

    balance = principal
    records = []
    for month in range(1, term_months + 1):
        interest, principal_paid = split_payment(balance, monthly_rate, payment)
        ending_balance = max(balance - principal_paid, 0.0)

        records.append(
            {
                "month": month,
                "payment": payment,
                "interest": interest,
                "principal": principal_paid,
                "ending_balance": ending_balance,
            }
        )

        balance = ending_balance

    columns = ["month", "payment", "interest", "principal", "ending_balance"]
    return pd.DataFrame.from_records(records, columns=columns).set_index("month")
