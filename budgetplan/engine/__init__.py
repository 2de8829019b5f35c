from .export import account_balances, extra_cash_series, plan_to_frame, write_plan_csv
from .seed import dataframe_to_years, payload_to_config, payload_to_plan
from .storage import PlanStore, load_seed, save_seed

__all__ = [
    "PlanStore",
    "account_balances",
    "dataframe_to_years",
    "extra_cash_series",
    "load_seed",
    "payload_to_config",
    "payload_to_plan",
    "plan_to_frame",
    "save_seed",
    "write_plan_csv",
]
