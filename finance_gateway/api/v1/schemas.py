"""Pydantic schemas for API request/response validation

JSON bodies use camelCase; Python attributes stay snake_case.
"""

from datetime import date
from typing import List, Optional
from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema: camelCase on the wire, snake_case in code"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# Debt simulation


class DebtSimulationRequest(CamelModel):
    """Request body for POST /ai/debt-simulation"""

    debt_amount: float = Field(..., allow_inf_nan=False, description="Principal owed")
    interest_rate: float = Field(..., allow_inf_nan=False, description="Annual interest rate in percent")
    monthly_payment: Optional[float] = Field(
        default=None,
        allow_inf_nan=False,
        validation_alias=AliasChoices("monthlyPayment", "availablePayment", "monthly_payment"),
        description="Fixed monthly payment; defaults to a share of principal",
    )
    include_schedule: bool = Field(default=False, description="Return the month-by-month schedule")


class PaymentPeriodSchema(CamelModel):
    """Single month of the payoff schedule"""

    period: int
    payment: float
    interest: float
    principal: float
    balance: float


class DebtSimulationResponse(CamelModel):
    """Response for POST /ai/debt-simulation"""

    months: int
    total_interest: float
    monthly_payment: float
    schedule: Optional[List[PaymentPeriodSchema]] = None


class DebtNarrationResponse(CamelModel):
    """Response for POST /ai/debt-simulation/narration"""

    text: str
    months: int
    total_interest: float
    monthly_payment: float


# Auth


class RegisterRequest(CamelModel):
    """Request body for POST /auth/register"""

    email: str = Field(..., min_length=3, pattern=r"^[^@\s]+@[^@\s]+$", description="Login email")
    password: str = Field(..., min_length=8, description="Plain password, at least 8 characters")
    name: str = Field(..., min_length=1, description="Display name")


class LoginRequest(CamelModel):
    """Request body for POST /auth/login"""

    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class TokenResponse(CamelModel):
    access_token: str
    token_type: str = "bearer"


class UserResponse(CamelModel):
    id: str
    email: str
    name: str


# Income / expenses


class EntryCreate(CamelModel):
    """Request body for POST /income and POST /expenses"""

    title: str = Field(..., min_length=1)
    amount: float = Field(..., gt=0, allow_inf_nan=False)
    category: str = Field(..., min_length=1)
    entry_date: date = Field(default_factory=date.today)
    note: Optional[str] = None


class EntryUpdate(CamelModel):
    """Request body for PUT /income/{id} and PUT /expenses/{id}; omitted fields are kept"""

    title: Optional[str] = Field(default=None, min_length=1)
    amount: Optional[float] = Field(default=None, gt=0, allow_inf_nan=False)
    category: Optional[str] = Field(default=None, min_length=1)
    entry_date: Optional[date] = None
    note: Optional[str] = None


class EntryResponse(CamelModel):
    id: str
    title: str
    amount: float
    category: str
    entry_date: date
    note: Optional[str] = None
    created_at: str


class CategoryTotalSchema(CamelModel):
    """One slice of the income/expense pie chart"""

    category: str
    total: float
    count: int


class CashflowSummaryResponse(CamelModel):
    """Response for GET /dashboard/summary"""

    total_income: float
    total_expenses: float
    net: float
    savings_rate: float
