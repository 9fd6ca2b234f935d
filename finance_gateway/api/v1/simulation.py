"""POST /ai/debt-simulation - debt payoff projection endpoints"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException, Request

from finance_gateway.api.v1.schemas import (
    DebtNarrationResponse,
    DebtSimulationRequest,
    DebtSimulationResponse,
    PaymentPeriodSchema,
)
from finance_gateway.api.dependencies import get_current_user, get_request_id
from finance_gateway.config import settings
from finance_gateway.domain.debt import run_simulation
from finance_gateway.domain.models import SimulationInput, SimulationResult
from finance_gateway.domain.narration import build_debt_narration
from finance_gateway.domain.exceptions import (
    InvalidInputError,
    NonAmortizingPaymentError,
    PayoffHorizonExceededError,
)
from finance_gateway.infrastructure.database.models import User
from finance_gateway.infrastructure.observability.metrics import record_simulation
from finance_gateway.infrastructure.observability.logging import log_simulation
from finance_gateway.utils.money_utils import round_cents

router = APIRouter()

_REJECTION_OUTCOMES = {
    InvalidInputError: "invalid_input",
    NonAmortizingPaymentError: "non_amortizing",
    PayoffHorizonExceededError: "horizon_exceeded",
}


def _run(request_body: DebtSimulationRequest, request_id: str, user: User) -> SimulationResult:
    """Run the simulator, recording metrics and mapping domain errors to HTTP errors"""
    start_time = time.time()
    simulation_input = SimulationInput(
        debt_amount=request_body.debt_amount,
        annual_interest_rate_percent=request_body.interest_rate,
        monthly_payment_override=request_body.monthly_payment,
    )

    try:
        result = run_simulation(
            simulation_input,
            default_payment_fraction=settings.default_payment_fraction,
            max_months=settings.payoff_horizon_months,
        )

    except (InvalidInputError, NonAmortizingPaymentError, PayoffHorizonExceededError) as e:
        outcome = _REJECTION_OUTCOMES[type(e)]
        record_simulation(outcome)
        logging.warning(f"Debt simulation rejected: {e}", extra={"request_id": request_id, "outcome": outcome})
        raise HTTPException(status_code=400, detail=str(e))

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    duration_ms = (time.time() - start_time) * 1000
    record_simulation("completed", result.months)
    log_simulation(request_id, str(user.id), "completed", result.months, duration_ms)
    return result


@router.post(
    "/debt-simulation",
    response_model=DebtSimulationResponse,
    response_model_exclude_none=True,
)
def simulate_debt(
    request_body: DebtSimulationRequest,
    request: Request,
    user: User = Depends(get_current_user),
):
    """
    Project how long it takes to pay off a debt.

    Flow:
    1. Validate amounts (400 on non-positive debt, negative rate, bad payment)
    2. Default the payment to a share of principal when none is given
    3. Amortize month by month until the balance reaches zero
    4. Return months, total interest, and the payment used (rounded to cents)
    """
    result = _run(request_body, get_request_id(request), user)

    schedule = None
    if request_body.include_schedule:
        schedule = [
            PaymentPeriodSchema(
                period=p.period,
                payment=round_cents(p.payment),
                interest=round_cents(p.interest),
                principal=round_cents(p.principal),
                balance=round_cents(p.balance),
            )
            for p in result.schedule
        ]

    return DebtSimulationResponse(
        months=result.months,
        total_interest=round_cents(result.total_interest),
        monthly_payment=round_cents(result.monthly_payment),
        schedule=schedule,
    )


@router.post("/debt-simulation/narration", response_model=DebtNarrationResponse)
def narrate_debt(
    request_body: DebtSimulationRequest,
    request: Request,
    user: User = Depends(get_current_user),
):
    """Simulate and return the sentence the dashboard screen reader speaks"""
    result = _run(request_body, get_request_id(request), user)

    text = build_debt_narration(
        request_body.debt_amount,
        request_body.interest_rate,
        result,
        currency=settings.currency_code,
    )
    return DebtNarrationResponse(
        text=text,
        months=result.months,
        total_interest=round_cents(result.total_interest),
        monthly_payment=round_cents(result.monthly_payment),
    )
