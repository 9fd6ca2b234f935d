"""Screen-reader narration for debt simulation results"""

from finance_gateway.domain.models import SimulationResult
from finance_gateway.utils.money_utils import format_amount, format_percent


def build_debt_narration(
    debt_amount: float,
    annual_interest_rate_percent: float,
    result: SimulationResult,
    currency: str = "LKR",
) -> str:
    """
    Render a simulation as the text the dashboard reads aloud.

    Amounts are rounded to cents here, never earlier.

    Example:
        "Your total debt is LKR 5,000.00 at an annual rate of 18%. Based on the
        simulation, it will take 32 months to pay off your debt. Total interest
        paid will be LKR 1,313.96. Monthly payment is LKR 200.00."
    """
    month_word = "month" if result.months == 1 else "months"
    sentences = [
        f"Your total debt is {format_amount(debt_amount, currency)} "
        f"at an annual rate of {format_percent(annual_interest_rate_percent)}.",
        f"Based on the simulation, it will take {result.months} {month_word} to pay off your debt.",
        f"Total interest paid will be {format_amount(result.total_interest, currency)}.",
        f"Monthly payment is {format_amount(result.monthly_payment, currency)}.",
    ]
    return " ".join(sentences)
