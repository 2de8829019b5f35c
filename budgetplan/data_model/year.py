from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Optional, Tuple

from .accounts import Account
from .items import BudgetItem

# Account that receives each year's leftover cash.
INVESTMENTS_ACCOUNT = "investments"


@dataclass(frozen=True, init=False)
class Year:
    """Items and account balances active in one plan year."""

    items: Tuple[BudgetItem, ...]
    accounts: Tuple[Account, ...]

    def __init__(self, items: Iterable[BudgetItem] = (), accounts: Iterable[Account] = ()) -> None:
        object.__setattr__(self, "items", tuple(items))
        object.__setattr__(self, "accounts", tuple(accounts))

    def extra_cash(self) -> float:
        return sum(item.amount for item in self.items)

    def next_year(self) -> Year:
        """Project every item and account one year forward.

        The investments account grows first and then absorbs this year's
        extra cash.
        """
        extra = self.extra_cash()
        accounts = []
        for account in self.accounts:
            grown = account.annual_increase()
            if account.name == INVESTMENTS_ACCOUNT:
                grown = grown.add(extra)
            accounts.append(grown)
        return Year([item.annual_increase() for item in self.items], accounts)

    def merge(self, other: Optional[Year]) -> Year:
        # Same-named entries are kept side by side, nothing is de-duplicated.
        if other is None:
            return self
        return Year(self.items + other.items, self.accounts + other.accounts)

    def account(self, name: str) -> Optional[Account]:
        return next((acct for acct in self.accounts if acct.name == name), None)

    def active_items(self) -> list[BudgetItem]:
        return [item for item in self.items if not item.is_expired()]

    def to_dict(self, include_accounts: bool = False) -> dict[str, Any]:
        payload: dict[str, Any] = {"items": [item.to_dict() for item in self.items]}
        if include_accounts:
            payload["accounts"] = [acct.to_dict() for acct in self.accounts]
        return payload
