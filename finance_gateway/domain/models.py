"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Tuple


@dataclass(frozen=True)
class SimulationInput:
    """Debt payoff question as asked by the dashboard"""

    debt_amount: float
    annual_interest_rate_percent: float
    monthly_payment_override: Optional[float] = None


@dataclass(frozen=True)
class PaymentPeriod:
    """One month of an amortization schedule"""

    period: int
    payment: float  # interest + principal actually paid this month
    interest: float
    principal: float
    balance: float  # remaining after this month's payment


@dataclass(frozen=True)
class SimulationResult:
    """Payoff projection for a single debt"""

    months: int
    total_interest: float
    monthly_payment: float
    schedule: Tuple[PaymentPeriod, ...] = field(default=(), repr=False)


@dataclass
class LedgerEntry:
    """Income or expense line as seen by the summary functions"""

    title: str
    amount: float
    category: str
    entry_date: date


@dataclass
class CategoryTotal:
    """Aggregated amount for one category"""

    category: str
    total: float
    count: int


@dataclass
class CashflowSummary:
    """Income against expenses for the dashboard header"""

    total_income: float
    total_expenses: float
    net: float
    savings_rate: float
