"""Build plan seeds from row records, DataFrames and JSON payloads."""

from __future__ import annotations

import math
from typing import Any, Dict, Iterable, List, Mapping

import pandas as pd

from ..data_model import (
    EXPIRED,
    INFINITE,
    INFLATION_RATE,
    Account,
    BudgetItem,
    InvalidDuration,
    InvalidSeed,
    Plan,
    PlanConfig,
    Year,
    as_duration,
)

ITEM_FACTORIES = {
    "recurring_expense": BudgetItem.recurring_expense,
    "one_time_expense": BudgetItem.one_time_expense,
    "recurring_income": BudgetItem.recurring_income,
    "one_time_income": BudgetItem.one_time_income,
}


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    return isinstance(value, str) and not value.strip()


def _to_float(value: Any, field_name: str, default: float = 0.0) -> float:
    if _is_blank(value):
        return default
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidSeed(f"{field_name} must be numeric, got {value!r}") from exc


def _to_index(value: Any) -> int:
    try:
        index = int(str(value).strip())
    except (TypeError, ValueError) as exc:
        raise InvalidSeed(f"Year index must be an integer, got {value!r}") from exc
    if index < 0:
        raise InvalidSeed(f"Year index must be non-negative, got {index}")
    return index


def row_to_budget_item(row: Mapping[str, Any]) -> BudgetItem | None:
    name = str(row.get("name", "") or "").strip()
    if not name:
        return None
    amount = _to_float(row.get("amount"), "amount")
    kind = row.get("kind")
    if not _is_blank(kind):
        factory = ITEM_FACTORIES.get(str(kind).strip().lower())
        if factory is None:
            raise InvalidSeed(f"Unknown item kind {kind!r} for {name!r}")
        return factory(name, amount)
    duration = row.get("duration")
    try:
        duration = INFINITE if _is_blank(duration) else as_duration(duration)
    except InvalidDuration as exc:
        raise InvalidSeed(f"Item {name!r}: {exc}") from exc
    default_rate = 0.0 if duration == EXPIRED else INFLATION_RATE
    rate = _to_float(row.get("rate_of_increase"), "rate_of_increase", default_rate)
    try:
        return BudgetItem(name, amount, rate, duration)
    except InvalidDuration as exc:
        raise InvalidSeed(f"Item {name!r}: {exc}") from exc


def row_to_account(row: Mapping[str, Any]) -> Account | None:
    name = str(row.get("name", "") or "").strip()
    if not name:
        return None
    return Account(
        name=name,
        amount=_to_float(row.get("amount"), "amount"),
        rate_of_increase=_to_float(row.get("rate_of_increase"), "rate_of_increase"),
    )


def rows_to_items(rows: Iterable[Mapping[str, Any]]) -> List[BudgetItem]:
    items = (row_to_budget_item(row) for row in rows or [])
    return [item for item in items if item is not None]


def rows_to_accounts(rows: Iterable[Mapping[str, Any]]) -> List[Account]:
    accounts = (row_to_account(row) for row in rows or [])
    return [acct for acct in accounts if acct is not None]


def dataframe_to_budget_items(df: pd.DataFrame) -> List[BudgetItem]:
    return rows_to_items(df.to_dict("records"))


def dataframe_to_accounts(df: pd.DataFrame) -> List[Account]:
    return rows_to_accounts(df.to_dict("records"))


def dataframe_to_years(df: pd.DataFrame) -> Dict[int, Year]:
    """Group a flat table with a ``year`` column into seeded Years.

    Rows whose ``section`` is ``"account"`` become accounts, everything else
    becomes a budget item.
    """
    if df.empty:
        return {}
    if "year" not in df.columns:
        raise InvalidSeed("Seed table requires a 'year' column")
    frame = df.copy()
    if "section" not in frame.columns:
        frame["section"] = "item"
    frame["section"] = frame["section"].fillna("item").astype(str).str.strip().str.lower()

    years: Dict[int, Year] = {}
    for raw_index, group in frame.groupby("year", sort=True):
        index = _to_index(raw_index)
        accounts = group[group["section"] == "account"]
        items = group[group["section"] != "account"]
        years[index] = Year(dataframe_to_budget_items(items), dataframe_to_accounts(accounts))
    return years


def payload_to_year(payload: Mapping[str, Any]) -> Year:
    return Year(rows_to_items(payload.get("items") or []), rows_to_accounts(payload.get("accounts") or []))


def payload_to_config(payload: Mapping[str, Any]) -> PlanConfig:
    years_payload = payload.get("years") or {}
    if not isinstance(years_payload, Mapping):
        raise InvalidSeed("'years' must map year indices to year definitions")
    years = {_to_index(key): payload_to_year(value or {}) for key, value in years_payload.items()}
    try:
        start_year = int(payload.get("start_year", 0) or 0)
        horizon = int(payload.get("horizon", 0) or 0)
    except (TypeError, ValueError) as exc:
        raise InvalidSeed("start_year and horizon must be integers") from exc
    return PlanConfig(
        name=str(payload.get("name", "") or "Plan").strip() or "Plan",
        start_year=start_year,
        horizon=horizon,
        years=years,
        current_year=_to_index(payload.get("current_year", 0) or 0),
    )


def payload_to_plan(payload: Mapping[str, Any]) -> Plan:
    return payload_to_config(payload).to_plan()


def year_to_payload(year: Year) -> Dict[str, Any]:
    return year.to_dict(include_accounts=True)


def config_to_payload(cfg: PlanConfig) -> Dict[str, Any]:
    return {
        "name": cfg.name,
        "start_year": cfg.start_year,
        "horizon": cfg.horizon,
        "current_year": cfg.current_year,
        "years": {str(index): year_to_payload(year) for index, year in sorted(cfg.years.items())},
    }
