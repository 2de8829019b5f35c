"""Flatten projected plans into tables for CSV and reporting."""

from __future__ import annotations

from typing import Optional

import pandas as pd

from ..data_model import Plan
from .storage import ensure_user_data_dir

EXPORT_COLUMNS = ["Year", "Kind", "Name", "Amount", "RateOfIncrease", "Duration"]


def plan_to_frame(plan: Plan, include_accounts: bool = False, start_year: Optional[int] = None) -> pd.DataFrame:
    """One row per item (and optionally per account) per year, ordered by year."""
    records = []
    for index, payload in plan.to_export(include_accounts).items():
        for row in payload["items"]:
            records.append(
                {
                    "Year": index,
                    "Kind": "item",
                    "Name": row["name"],
                    "Amount": row["amount"],
                    "RateOfIncrease": row["rate_of_increase"],
                    "Duration": row["duration"],
                }
            )
        for row in payload.get("accounts", []):
            records.append(
                {
                    "Year": index,
                    "Kind": "account",
                    "Name": row["name"],
                    "Amount": row["amount"],
                    "RateOfIncrease": row["rate_of_increase"],
                    "Duration": None,
                }
            )

    df = pd.DataFrame(records, columns=EXPORT_COLUMNS)
    if start_year is not None:
        df.insert(1, "CalendarYear", df["Year"] + start_year)
    return df


def extra_cash_series(plan: Plan) -> pd.Series:
    cash = plan.extra_cash_by_year()
    return pd.Series(list(cash.values()), index=pd.Index(list(cash.keys()), name="Year"), name="ExtraCash", dtype=float)


def account_balances(plan: Plan) -> pd.DataFrame:
    """Year x account table of balances; duplicate account names are summed."""
    records = [
        {"Year": index, "Account": acct.name, "Amount": acct.amount}
        for index, year in plan.years.items()
        for acct in year.accounts
    ]
    if not records:
        return pd.DataFrame(index=pd.Index([], name="Year"))
    df = pd.DataFrame(records)
    return df.pivot_table(index="Year", columns="Account", values="Amount", aggfunc="sum").sort_index()


def write_plan_csv(plan: Plan, path: str, include_accounts: bool = False, start_year: Optional[int] = None) -> pd.DataFrame:
    ensure_user_data_dir(path)
    df = plan_to_frame(plan, include_accounts=include_accounts, start_year=start_year)
    df.to_csv(path, index=False)
    return df
