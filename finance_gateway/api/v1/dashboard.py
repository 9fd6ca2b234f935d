"""GET /dashboard/summary - income vs expenses overview"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from finance_gateway.api.v1.schemas import CashflowSummaryResponse
from finance_gateway.api.dependencies import get_current_user
from finance_gateway.infrastructure.database.session import get_db
from finance_gateway.infrastructure.database.repositories import EntryRepository
from finance_gateway.infrastructure.database.models import User, Income, Expense
from finance_gateway.domain.summaries import build_cashflow_summary
from finance_gateway.utils.money_utils import round_cents

router = APIRouter()


@router.get("/summary", response_model=CashflowSummaryResponse)
def get_dashboard_summary(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    """
    Totals for the dashboard header.

    Returns:
        Total income, total expenses, net cash flow and savings rate
    """
    summary = build_cashflow_summary(
        total_income=EntryRepository(db, Income).total_for_user(user.id),
        total_expenses=EntryRepository(db, Expense).total_for_user(user.id),
    )

    return CashflowSummaryResponse(
        total_income=round_cents(summary.total_income),
        total_expenses=round_cents(summary.total_expenses),
        net=round_cents(summary.net),
        savings_rate=round(summary.savings_rate, 4),
    )
