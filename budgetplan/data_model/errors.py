class PlanError(Exception):
    """Base class for errors raised by the projection engine."""


class MissingSeedYear(PlanError, KeyError):
    def __init__(self, year_index: int) -> None:
        super().__init__(f"No year seeded at index {year_index}")
        self.year_index = year_index

    def __str__(self) -> str:
        return self.args[0]


class InvalidDuration(PlanError, ValueError):
    pass


class UnboundedHorizon(PlanError, ValueError):
    pass


class InvalidSeed(PlanError, ValueError):
    pass
