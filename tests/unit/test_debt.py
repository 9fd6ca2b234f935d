"""Unit tests for the debt payoff simulator"""

import math
import pytest
from finance_gateway.domain.debt import default_monthly_payment, run_simulation, simulate
from finance_gateway.domain.models import SimulationInput
from finance_gateway.domain.exceptions import (
    InvalidInputError,
    NonAmortizingPaymentError,
    PayoffHorizonExceededError,
)


def test_zero_interest_exact_division():
    """1200 at 0% paying 100 → 12 months, no interest"""
    result = simulate(1200, 0, 100)

    assert result.months == 12
    assert result.total_interest == 0.0
    assert result.monthly_payment == 100


@pytest.mark.parametrize(
    "debt, payment",
    [(1000, 300), (999.99, 100), (50, 75), (12_345.67, 250), (7.77, 2.59), (1000.10, 33.37), (250.75, 12.5)],
)
def test_zero_interest_months_is_ceiling(debt, payment):
    """With no interest the payoff is ceil(debt / payment) months"""
    result = simulate(debt, 0, payment)

    assert result.months == math.ceil(debt / payment)
    assert result.total_interest == 0.0


@pytest.mark.parametrize(
    "debt, payment, months",
    [(1, 0.1, 10), (16_255.60, 406.39, 40), (7.77, 2.59, 3), (0.3, 0.1, 3)],
)
def test_zero_interest_exact_multiple_has_no_extra_month(debt, payment, months):
    """Float residue from repeated subtraction is treated as paid, not as another month"""
    result = simulate(debt, 0, payment)

    assert result.months == months
    assert result.schedule[-1].payment == pytest.approx(payment)
    assert result.schedule[-1].balance == 0


def test_reference_amortization_18_percent():
    """
    5000 at 18% paying 200.

    Reference values from an independent month-by-month table in double precision:
    31 full payments plus a final partial payment of ~113.96.
    """
    result = simulate(5000, 18, 200)

    assert result.months == 32
    assert result.total_interest == pytest.approx(1313.9639987067, abs=1e-6)
    assert result.monthly_payment == 200


def test_reference_amortization_12_percent():
    result = simulate(5000, 12, 200)

    assert result.months == 29
    assert result.total_interest == pytest.approx(782.4418514915, abs=1e-6)


def test_default_payment_is_five_percent_of_principal():
    """No payment supplied → 5% of principal (250 on 5000)"""
    result = simulate(5000, 18)

    assert result.monthly_payment == 250
    assert result.months == 24
    assert result.total_interest == pytest.approx(989.1338608280, abs=1e-6)


def test_default_payment_fraction_is_configurable():
    result = simulate(1200, 0, default_payment_fraction=0.25)

    assert result.monthly_payment == 300
    assert result.months == 4


def test_default_monthly_payment_rejects_bad_fraction():
    assert default_monthly_payment(5000) == 250
    with pytest.raises(InvalidInputError):
        default_monthly_payment(5000, 0)
    with pytest.raises(InvalidInputError):
        default_monthly_payment(5000, 1.5)


def test_monotonic_in_interest_rate():
    """Higher rate never shortens the payoff or lowers total interest"""
    rates = [0, 3, 6, 12, 18, 24]
    results = [simulate(5000, rate, 200) for rate in rates]

    for lower, higher in zip(results, results[1:]):
        assert higher.months >= lower.months
        assert higher.total_interest >= lower.total_interest

    assert results[-1].months == 36
    assert results[-1].total_interest == pytest.approx(2000.5632814215, abs=1e-6)


def test_schedule_reconciles_with_totals():
    """Principal portions sum to the debt; interest portions sum to total interest"""
    result = simulate(5000, 18, 200)
    schedule = result.schedule

    assert len(schedule) == result.months
    assert [p.period for p in schedule] == list(range(1, 33))
    assert sum(p.principal for p in schedule) == pytest.approx(5000)
    assert sum(p.interest for p in schedule) == pytest.approx(result.total_interest)
    assert schedule[-1].balance == 0
    assert schedule[0].interest == pytest.approx(75.0)
    assert schedule[0].payment == pytest.approx(200.0)


def test_final_payment_is_partial():
    result = simulate(5000, 18, 200)
    last = result.schedule[-1]

    assert last.payment < 200
    assert last.payment == pytest.approx(113.9639987067, abs=1e-6)


def test_payment_equal_to_first_interest_never_amortizes():
    """5000 at 18% accrues 75 in month one; paying exactly 75 never shrinks the debt"""
    with pytest.raises(NonAmortizingPaymentError):
        simulate(5000, 18, 75)


def test_payment_below_interest_never_amortizes():
    with pytest.raises(NonAmortizingPaymentError):
        simulate(10_000, 24, 150)


def test_default_payment_non_amortizing_at_high_rate():
    """5% of principal cannot cover 72% annual interest (6% a month)"""
    with pytest.raises(NonAmortizingPaymentError):
        simulate(1000, 72)


def test_horizon_cap_reached():
    """Payment barely above interest takes more than 100 years"""
    with pytest.raises(PayoffHorizonExceededError):
        simulate(100_000, 11.99999, 1000)


def test_long_payoff_within_horizon():
    result = simulate(100_000, 11.9999, 1000)

    assert result.months == 1176


def test_custom_horizon_cap():
    with pytest.raises(PayoffHorizonExceededError):
        simulate(5000, 18, 200, max_months=31)

    assert simulate(5000, 18, 200, max_months=32).months == 32


@pytest.mark.parametrize(
    "debt, rate, payment",
    [
        (-100, 18, 200),
        (0, 18, 200),
        (5000, -1, 200),
        (5000, 18, 0),
        (5000, 18, -50),
        (float("nan"), 18, 200),
        (5000, float("inf"), 200),
        ("abc", 18, 200),
    ],
)
def test_invalid_input(debt, rate, payment):
    with pytest.raises(InvalidInputError):
        simulate(debt, rate, payment)


def test_deterministic():
    assert simulate(7500, 21.5, 333) == simulate(7500, 21.5, 333)


def test_run_simulation_uses_override():
    result = run_simulation(
        SimulationInput(debt_amount=1200, annual_interest_rate_percent=0, monthly_payment_override=100)
    )
    assert result.months == 12


def test_run_simulation_defaults_payment():
    result = run_simulation(SimulationInput(debt_amount=5000, annual_interest_rate_percent=18))
    assert result.monthly_payment == 250
