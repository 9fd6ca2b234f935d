"""Income and expense aggregation for dashboard charts"""

from typing import Dict, Iterable, List
from finance_gateway.domain.models import CashflowSummary, CategoryTotal, LedgerEntry


def summarize_by_category(entries: Iterable[LedgerEntry]) -> List[CategoryTotal]:
    """
    Group entries by category for the income/expense pie charts.

    Sorted by total descending, ties broken by category name.
    """
    totals: Dict[str, float] = {}
    counts: Dict[str, int] = {}
    for entry in entries:
        totals[entry.category] = totals.get(entry.category, 0.0) + entry.amount
        counts[entry.category] = counts.get(entry.category, 0) + 1

    summary = [
        CategoryTotal(category=category, total=total, count=counts[category])
        for category, total in totals.items()
    ]
    summary.sort(key=lambda c: (-c.total, c.category))
    return summary


def build_cashflow_summary(total_income: float, total_expenses: float) -> CashflowSummary:
    """Net cash flow and savings rate (0.0 when there is no income)"""
    net = total_income - total_expenses
    savings_rate = net / total_income if total_income > 0 else 0.0

    return CashflowSummary(
        total_income=total_income,
        total_expenses=total_expenses,
        net=net,
        savings_rate=savings_rate,
    )
