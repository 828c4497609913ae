"""Year-by-year retirement savings projection.

Starting at the client's current age and the baseline calendar year, each
simulated year applies, in order:

1. Social Security income for the year's age and the client's salary.
2. Retirement drawdown of the configured expense.
3. The RMD on the balance carried in from the prior year, before growth.
4. One market return drawn from the sampler.
5. ``balance += contribution + growth + income - drawdown - rmd``.

The loop runs through ``max_age`` inclusive.  Growth and withdrawals are
truncated toward zero, so balances stay whole dollars.

Example
-------

>>> from retirement_projector.calculators.returns import SamplerPolicy, make_sampler
>>> from retirement_projector.models import SimulationRequest
>>> request = SimulationRequest(age=98, current_savings=100000, current_salary=70000,
...                             retirement_expenses=40000, action="simulate")
>>> result = project(request, make_sampler(SamplerPolicy.SEQUENTIAL))
>>> [(r.year, r.age) for r in result]
[(2025, 98), (2026, 99)]
>>> result.records[0].ss_payment, result.records[0].rmd_withdrawal
(21360, 10273)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Mapping, Optional, Tuple

from ..models import SimulationRequest
from . import rmd, social_security as ss
from .returns import ReturnSampler

MAX_AGE = 99
BASELINE_YEAR = 2025


class ContributionMode(str, Enum):
    """How ``current_savings`` enters the recurrence."""

    # seeds the balance once
    INITIAL_BALANCE = "initial_balance"
    # balance starts at zero, amount re-added every simulated year
    ANNUAL_CONTRIBUTION = "annual_contribution"


class EngineVariant(str, Enum):
    """FULL folds in income, drawdown and RMDs; MINIMAL only compounds savings."""

    FULL = "full"
    MINIMAL = "minimal"


@dataclass(frozen=True)
class ProjectionOptions:
    """Constants and lookup tables for one projection.

    Parameters
    ----------
    max_age : int
        Last simulated age, inclusive (default 99).
    baseline_year : int
        Calendar year of the first record.
    contribution_mode : ContributionMode
        Whether ``current_savings`` is a starting balance or a yearly deposit.
    variant : EngineVariant
        Which recurrence to run.
    eligibility_age : int
        Income and drawdown start the year after this age.
    ss_bands, rmd_divisors : mapping
        Lookup tables; default to the read-only module tables.
    """

    max_age: int = MAX_AGE
    baseline_year: int = BASELINE_YEAR
    contribution_mode: ContributionMode = ContributionMode.INITIAL_BALANCE
    variant: EngineVariant = EngineVariant.FULL
    eligibility_age: int = ss.ELIGIBILITY_AGE
    ss_bands: Mapping[int, int] = field(default_factory=lambda: ss.SOCIAL_SECURITY_BANDS)
    rmd_divisors: Mapping[int, float] = field(default_factory=lambda: rmd.RMD_DIVISORS)


@dataclass(frozen=True)
class YearlyRecord:
    """One row of output: the balance at the end of ``year``.

    ``ss_payment`` and ``rmd_withdrawal`` are None when the engine does not track them.
    """

    year: int
    age: int
    savings: int
    ss_payment: Optional[int] = None
    rmd_withdrawal: Optional[int] = None

    def to_dict(self) -> Dict[str, int]:
        row = {"year": self.year, "age": self.age, "savings": self.savings}
        if self.ss_payment is not None:
            row["ss_payment"] = self.ss_payment
        if self.rmd_withdrawal is not None:
            row["rmd_withdrawal"] = self.rmd_withdrawal
        return row


@dataclass(frozen=True)
class SimulationResult:
    """Ordered yearly records, one per simulated year."""

    records: Tuple[YearlyRecord, ...] = ()

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[YearlyRecord]:
        return iter(self.records)

    @property
    def final_savings(self) -> Optional[int]:
        return self.records[-1].savings if self.records else None

    def to_dicts(self) -> List[Dict[str, int]]:
        return [r.to_dict() for r in self.records]


def simulated_years(age: int, max_age: int = MAX_AGE) -> int:
    """Number of yearly records for a client aged ``age``; never negative."""
    return max(0, max_age - age + 1)


def project(
    request: SimulationRequest,
    sampler: ReturnSampler,
    options: Optional[ProjectionOptions] = None,
) -> SimulationResult:
    """Project savings year by year from ``request.age`` through ``max_age``.

    One return is drawn from ``sampler`` per simulated year; the sampler is
    reset first so a sequential walk always starts at the newest year.
    Ages past ``max_age`` produce an empty result.
    """
    opts = options or ProjectionOptions()
    full = opts.variant is EngineVariant.FULL
    sampler.reset()

    if opts.contribution_mode is ContributionMode.ANNUAL_CONTRIBUTION:
        balance = 0
        contribution = request.current_savings
    else:
        balance = request.current_savings
        contribution = 0

    age = request.age
    year = opts.baseline_year
    records: List[YearlyRecord] = []

    for _ in range(simulated_years(request.age, opts.max_age)):
        if full:
            income = ss.social_security_income(age, request.current_salary, opts.ss_bands, opts.eligibility_age)
            drawdown = ss.retirement_drawdown(age, request.retirement_expenses, opts.eligibility_age)
            # RMD is taken on the balance before this year's growth
            withdrawal = rmd.required_minimum_distribution(age, balance, opts.rmd_divisors)
        else:
            income = drawdown = withdrawal = 0

        multiplier = sampler.next_return() / 100
        growth = int(balance * multiplier)
        balance += contribution + growth + income - drawdown - withdrawal

        if full:
            records.append(YearlyRecord(year, age, balance, income, withdrawal))
        else:
            records.append(YearlyRecord(year, age, balance))

        age += 1
        year += 1

    return SimulationResult(tuple(records))


__all__ = [
    "MAX_AGE",
    "BASELINE_YEAR",
    "ContributionMode",
    "EngineVariant",
    "ProjectionOptions",
    "YearlyRecord",
    "SimulationResult",
    "simulated_years",
    "project",
]
