"""Unit tests for screen-reader narration"""

from finance_gateway.domain.debt import simulate
from finance_gateway.domain.models import SimulationResult
from finance_gateway.domain.narration import build_debt_narration
from finance_gateway.utils.money_utils import format_amount, format_percent, round_cents


def test_narration_reads_rounded_amounts():
    result = simulate(5000, 18, 200)

    text = build_debt_narration(5000, 18, result)

    assert text == (
        "Your total debt is LKR 5,000.00 at an annual rate of 18%. "
        "Based on the simulation, it will take 32 months to pay off your debt. "
        "Total interest paid will be LKR 1,313.96. "
        "Monthly payment is LKR 200.00."
    )


def test_narration_singular_month_and_currency():
    result = SimulationResult(months=1, total_interest=0.0, monthly_payment=500.0)

    text = build_debt_narration(250, 12.5, result, currency="USD")

    assert "at an annual rate of 12.5%" in text
    assert "it will take 1 month to pay off" in text
    assert "Monthly payment is USD 500.00." in text


def test_format_percent_drops_trailing_zeros():
    assert format_percent(18.0) == "18%"
    assert format_percent(100) == "100%"
    assert format_percent(0) == "0%"
    assert format_percent(7.25) == "7.25%"
    assert format_percent(11.99999) == "11.99999%"


def test_format_amount_and_rounding():
    assert format_amount(1234567.891, "LKR") == "LKR 1,234,567.89"
    assert round_cents(1313.9639987067) == 1313.96


def test_narration_keeps_rate_precision():
    result = SimulationResult(months=1176, total_interest=1075373.54, monthly_payment=1000.0)

    text = build_debt_narration(100000, 11.9999, result)

    assert "at an annual rate of 11.9999%." in text
