"""Prometheus metrics for monitoring simulations, ledger activity, and HTTP latency"""

from prometheus_client import Counter, Histogram

# Simulation metrics
simulation_counter = Counter(
    "finance_debt_simulation_total",
    "Total debt payoff simulations run",
    ["outcome"],  # completed | invalid_input | non_amortizing | horizon_exceeded
)

payoff_months_histogram = Histogram(
    "finance_debt_payoff_months",
    "Projected months to pay off a debt",
    buckets=[6, 12, 24, 36, 60, 120, 240, 600, 1200],
)

# Ledger metrics
ledger_mutation_counter = Counter(
    "finance_ledger_mutation_total",
    "Income and expense entry changes",
    ["kind", "action"],  # income | expense ; create | update | delete
)

auth_failure_counter = Counter(
    "finance_auth_failures_total",
    "Rejected logins and tokens",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_simulation(outcome: str, months: int | None = None) -> None:
    """Record simulation outcome and, when completed, the payoff horizon"""
    simulation_counter.labels(outcome=outcome).inc()
    if months is not None:
        payoff_months_histogram.observe(months)


def record_ledger_mutation(kind: str, action: str) -> None:
    ledger_mutation_counter.labels(kind=kind, action=action).inc()
