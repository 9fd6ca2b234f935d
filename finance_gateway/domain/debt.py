"""Debt payoff simulation - month-by-month amortization"""

import math
from typing import List, Optional
from finance_gateway.domain.models import PaymentPeriod, SimulationInput, SimulationResult
from finance_gateway.domain.exceptions import (
    InvalidInputError,
    NonAmortizingPaymentError,
    PayoffHorizonExceededError,
)

DEFAULT_PAYMENT_FRACTION = 0.05  # 5% of principal per month
DEFAULT_MAX_MONTHS = 1200  # 100 years
BALANCE_TOLERANCE = 1e-9  # relative to principal


def _as_finite(name: str, value) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"{name} must be a number") from e
    if not math.isfinite(number):
        raise InvalidInputError(f"{name} must be a finite number")
    return number


def default_monthly_payment(
    debt_amount: float,
    fraction: float = DEFAULT_PAYMENT_FRACTION,
) -> float:
    """
    Payment used when the caller does not supply one: a fixed fraction of principal.

    Example:
        5000 at the default 5% → 250 per month
    """
    if not 0 < fraction <= 1:
        raise InvalidInputError("Default payment fraction must be in (0, 1]")
    return debt_amount * fraction


def simulate(
    debt_amount: float,
    annual_interest_rate_percent: float,
    monthly_payment: Optional[float] = None,
    *,
    default_payment_fraction: float = DEFAULT_PAYMENT_FRACTION,
    max_months: int = DEFAULT_MAX_MONTHS,
) -> SimulationResult:
    """
    Project how long a fixed monthly payment takes to retire a debt.

    Requirements:
    - Monthly periodic rate = annual percent / 100 / 12
    - Interest accrues on the opening balance each month
    - Final month pays only what is left (partial payment)
    - No rounding until presentation
    - A leftover balance within 1e-9 of the principal (relative, floor 1.0) counts
      as paid, so float residue never adds a near-zero extra month

    Args:
        debt_amount: Principal owed, must be > 0
        annual_interest_rate_percent: Annual rate in percent (18.0 = 18%), must be >= 0
        monthly_payment: Fixed payment; defaults to default_payment_fraction of principal
        default_payment_fraction: Share of principal used when no payment is given
        max_months: Iteration cap guaranteeing termination

    Returns:
        SimulationResult with months, total interest, the payment used and the schedule

    Raises:
        InvalidInputError: Non-positive debt or payment, negative rate, non-finite input
        NonAmortizingPaymentError: Payment does not exceed the month's interest charge
        PayoffHorizonExceededError: Balance still positive after max_months

    Example:
        1200 at 0% paying 100 → 12 months, 0 interest
        5000 at 18% paying 200 → 32 months, ~1313.96 interest
    """
    debt_amount = _as_finite("Debt amount", debt_amount)
    annual_interest_rate_percent = _as_finite("Interest rate", annual_interest_rate_percent)

    if debt_amount <= 0:
        raise InvalidInputError("Debt amount must be greater than zero")
    if annual_interest_rate_percent < 0:
        raise InvalidInputError("Interest rate cannot be negative")

    if monthly_payment is None:
        monthly_payment = default_monthly_payment(debt_amount, default_payment_fraction)
    else:
        monthly_payment = _as_finite("Monthly payment", monthly_payment)
        if monthly_payment <= 0:
            raise InvalidInputError("Monthly payment must be greater than zero")

    monthly_rate = annual_interest_rate_percent / 100 / 12

    tolerance = BALANCE_TOLERANCE * max(1.0, debt_amount)
    balance = debt_amount
    months = 0
    total_interest = 0.0
    schedule: List[PaymentPeriod] = []

    while balance > 0:
        interest = balance * monthly_rate
        if monthly_payment <= interest:
            raise NonAmortizingPaymentError(
                f"Monthly payment of {monthly_payment:.2f} does not cover the "
                f"{interest:.2f} interest charged each month; the debt would never be paid off"
            )

        principal = monthly_payment - interest
        if principal >= balance - tolerance:
            principal = balance
        balance -= principal
        total_interest += interest
        months += 1

        schedule.append(
            PaymentPeriod(
                period=months,
                payment=interest + principal,
                interest=interest,
                principal=principal,
                balance=balance,
            )
        )

        if months >= max_months and balance > 0:
            raise PayoffHorizonExceededError(
                f"Debt is not paid off within {max_months} months at this payment"
            )

    return SimulationResult(
        months=months,
        total_interest=total_interest,
        monthly_payment=monthly_payment,
        schedule=tuple(schedule),
    )


def run_simulation(
    simulation_input: SimulationInput,
    *,
    default_payment_fraction: float = DEFAULT_PAYMENT_FRACTION,
    max_months: int = DEFAULT_MAX_MONTHS,
) -> SimulationResult:
    """Main entry point for callers holding a SimulationInput"""
    return simulate(
        simulation_input.debt_amount,
        simulation_input.annual_interest_rate_percent,
        simulation_input.monthly_payment_override,
        default_payment_fraction=default_payment_fraction,
        max_months=max_months,
    )
