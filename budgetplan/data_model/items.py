from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .duration import EXPIRED, INFINITE, Duration, Remaining, as_duration, duration_to_value
from .errors import InvalidDuration

INFLATION_RATE = 0.03


@dataclass(frozen=True)
class BudgetItem:
    """A single yearly cash-flow line. Expenses carry negative amounts."""

    name: str
    amount: float
    rate_of_increase: float = INFLATION_RATE
    duration: Duration = INFINITE

    def __post_init__(self) -> None:
        duration = as_duration(self.duration)
        if duration == EXPIRED and (self.amount != 0 or self.rate_of_increase != 0):
            raise InvalidDuration(f"Expired item {self.name!r} must have zero amount and rate")
        object.__setattr__(self, "duration", duration)

    @classmethod
    def recurring_expense(cls, name: str, amount: float) -> BudgetItem:
        return cls(name, -amount)

    @classmethod
    def one_time_expense(cls, name: str, amount: float) -> BudgetItem:
        return cls(name, -amount, 0, Remaining(1))

    @classmethod
    def recurring_income(cls, name: str, amount: float) -> BudgetItem:
        return cls(name, amount)

    @classmethod
    def one_time_income(cls, name: str, amount: float) -> BudgetItem:
        return cls(name, amount, 0, Remaining(1))

    def annual_increase(self) -> BudgetItem:
        """Return this item as it stands one year later.

        Items on their last year (or already expired) collapse to a zero-valued
        expired item; everything else compounds by ``rate_of_increase``.
        """
        if self.duration == EXPIRED or self.duration == Remaining(1):
            return BudgetItem(self.name, 0, 0, EXPIRED)
        new_amount = self.amount * self.rate_of_increase + self.amount
        if isinstance(self.duration, Remaining):
            return BudgetItem(self.name, new_amount, self.rate_of_increase, self.duration.tick())
        return BudgetItem(self.name, new_amount, self.rate_of_increase, INFINITE)

    def is_expired(self) -> bool:
        return self.duration == EXPIRED

    def is_expense(self) -> bool:
        return self.amount < 0

    def is_income(self) -> bool:
        return self.amount > 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "amount": self.amount,
            "rate_of_increase": self.rate_of_increase,
            "duration": duration_to_value(self.duration),
        }
