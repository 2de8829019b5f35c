"""Year-by-year projection of a personal budget plan."""

from .data_model import (
    EXPIRED,
    INFINITE,
    INFLATION_RATE,
    INVESTMENTS_ACCOUNT,
    Account,
    BudgetItem,
    Plan,
    PlanConfig,
    PlanError,
    Remaining,
    Year,
)

__all__ = [
    "EXPIRED",
    "INFINITE",
    "INFLATION_RATE",
    "INVESTMENTS_ACCOUNT",
    "Account",
    "BudgetItem",
    "Plan",
    "PlanConfig",
    "PlanError",
    "Remaining",
    "Year",
]
