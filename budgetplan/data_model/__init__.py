from .accounts import Account
from .duration import EXPIRED, INFINITE, Duration, Remaining, as_duration, duration_to_value
from .errors import InvalidDuration, InvalidSeed, MissingSeedYear, PlanError, UnboundedHorizon
from .items import INFLATION_RATE, BudgetItem
from .plan import MAX_HORIZON_YEARS, Plan, PlanConfig
from .year import INVESTMENTS_ACCOUNT, Year

__all__ = [
    "EXPIRED",
    "INFINITE",
    "INFLATION_RATE",
    "INVESTMENTS_ACCOUNT",
    "MAX_HORIZON_YEARS",
    "Account",
    "BudgetItem",
    "Duration",
    "InvalidDuration",
    "InvalidSeed",
    "MissingSeedYear",
    "Plan",
    "PlanConfig",
    "PlanError",
    "Remaining",
    "UnboundedHorizon",
    "Year",
    "as_duration",
    "duration_to_value",
]
