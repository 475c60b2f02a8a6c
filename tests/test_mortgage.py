import pytest

from mortgage_value.core.mortgage import amortization_schedule, monthly_payment, split_payment


def test_zero_rate_is_straight_line():
    assert monthly_payment(120_000, 0.0, 120) == pytest.approx(1_000.0)


def test_no_remaining_months_pays_nothing():
    assert monthly_payment(100_000, 0.05, 0) == 0.0


def test_level_payment_closed_form():
    r = 0.06 / 12
    expected = 100_000 * r / (1 - (1 + r) ** -12)
    assert monthly_payment(100_000, 0.06, 12) == pytest.approx(expected)
    assert monthly_payment(100_000, 0.06, 12) == pytest.approx(8_606.64, abs=0.01)


def test_split_caps_principal_at_balance():
    interest, principal = split_payment(100.0, 0.01, 500.0)
    assert interest == pytest.approx(1.0)
    assert principal == 100.0


def test_split_regular_payment():
    interest, principal = split_payment(10_000.0, 0.005, 200.0)
    assert interest == pytest.approx(50.0)
    assert principal == pytest.approx(150.0)


def test_schedule_pays_off_loan():
    schedule = amortization_schedule(100_000, 0.06, 1)
    assert len(schedule) == 12
    assert schedule.index[0] == 1
    assert schedule["ending_balance"].iloc[-1] == pytest.approx(0.0, abs=1e-6)
    assert schedule["principal"].sum() == pytest.approx(100_000)
    assert (schedule["ending_balance"].diff().dropna() < 0).all()


def test_schedule_for_zero_term_is_empty():
    schedule = amortization_schedule(100_000, 0.06, 0)
    assert schedule.empty
    assert list(schedule.columns) == ["payment", "interest", "principal", "ending_balance"]
