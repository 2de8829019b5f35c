# data_model/plan.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from .errors import MissingSeedYear, UnboundedHorizon
from .year import Year

logger = logging.getLogger(__name__)

MAX_HORIZON_YEARS = 500


def _check_index(value: Any, label: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"{label} must be a non-negative integer, got {value!r}")
    return value


class Plan:
    """Sparse timeline of Years keyed by year index.

    A seed map usually holds index 0 plus any future years that should be
    merged into the projection when it reaches them.
    """

    def __init__(self, years: Mapping[int, Year], current_year: int = 0) -> None:
        self._years: Dict[int, Year] = {_check_index(k, "Year index"): v for k, v in years.items()}
        self._current_year = _check_index(current_year, "current_year")

    @property
    def current_year(self) -> int:
        return self._current_year

    @property
    def years(self) -> Dict[int, Year]:
        return dict(sorted(self._years.items()))

    def year(self, index: int) -> Optional[Year]:
        return self._years.get(index)

    def run_years(self, target_year: int, max_horizon: Optional[int] = MAX_HORIZON_YEARS) -> Plan:
        """Project the plan forward until ``target_year``.

        Returns a new Plan; the receiver is left untouched. Pass
        ``max_horizon=None`` to allow projections of arbitrary length.
        """
        current_year = self.current_year
        if target_year <= current_year:
            return Plan(self._years, current_year)
        if current_year not in self._years:
            raise MissingSeedYear(current_year)
        if max_horizon is not None and target_year - current_year > max_horizon:
            raise UnboundedHorizon(
                f"Projection of {target_year - current_year} years exceeds the {max_horizon}-year cap"
            )

        logger.debug("Projecting plan from year %d to %d", current_year, target_year)
        new_years = dict(self._years)
        while current_year < target_year:
            next_year = new_years[current_year].next_year()
            current_year += 1
            existing_year = new_years.get(current_year)
            if existing_year is not None:
                logger.debug("Merging pre-seeded year %d", current_year)
            new_years[current_year] = next_year.merge(existing_year)
        return Plan(new_years, current_year)

    def extra_cash_by_year(self) -> Dict[int, float]:
        return {index: year.extra_cash() for index, year in self.years.items()}

    def to_export(self, include_accounts: bool = False) -> Dict[int, Dict[str, Any]]:
        return {index: year.to_dict(include_accounts) for index, year in self.years.items()}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Plan):
            return NotImplemented
        return self.current_year == other.current_year and self._years == other._years

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Plan(years={sorted(self._years)}, current_year={self.current_year})"


@dataclass
class PlanConfig:
    name: str
    start_year: int = 0
    horizon: int = 0
    years: Dict[int, Year] = field(default_factory=dict)
    current_year: int = 0

    def calendar_year(self, index: int) -> int:
        return self.start_year + index

    def to_plan(self) -> Plan:
        return Plan(self.years, self.current_year)

    def run(self, max_horizon: Optional[int] = MAX_HORIZON_YEARS) -> Plan:
        return self.to_plan().run_years(self.horizon, max_horizon=max_horizon)
