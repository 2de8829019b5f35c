from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Account:
    name: str
    amount: float
    rate_of_increase: float = 0.0

    def annual_increase(self) -> Account:
        return Account(self.name, self.amount * (1 + self.rate_of_increase), self.rate_of_increase)

    def add(self, delta: float) -> Account:
        return Account(self.name, self.amount + delta, self.rate_of_increase)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "amount": self.amount,
            "rate_of_increase": self.rate_of_increase,
        }
