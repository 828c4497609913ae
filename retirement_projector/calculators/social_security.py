"""Social Security income and retirement drawdown rules.

Both rules switch on only once the simulated age is strictly greater than the
eligibility age (67 by default).

Social Security income is a coarse lookup keyed by exact salary.  Each band
stores a monthly benefit; the annual amount is twelve times that.  Salaries
that do not match a band exactly earn no modelled benefit.

Example
-------

>>> social_security_income(age=68, salary=70000)
21360
>>> social_security_income(age=67, salary=70000)
0
>>> retirement_drawdown(age=70, configured_expense=40000)
40000
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Mapping, Optional

ELIGIBILITY_AGE = 67

# Monthly benefit keyed by annual salary.
_MONTHLY_BENEFIT_BY_SALARY: Dict[int, int] = {
    50000: 1300,
    60000: 1540,
    70000: 1780,
    80000: 2020,
    90000: 2260,
    100000: 2500,
}

SOCIAL_SECURITY_BANDS: Mapping[int, int] = MappingProxyType(
    {salary: monthly * 12 for salary, monthly in _MONTHLY_BENEFIT_BY_SALARY.items()}
)


def social_security_income(
    age: int,
    salary: int,
    bands: Optional[Mapping[int, int]] = None,
    eligibility_age: int = ELIGIBILITY_AGE,
) -> int:
    """Annual Social Security income for ``age`` and ``salary``.

    Parameters
    ----------
    age : int
        Simulated age for the year.
    salary : int
        Current annual salary; matched exactly against the bands.
    bands : mapping, optional
        Salary to annual benefit.  Defaults to ``SOCIAL_SECURITY_BANDS``.
    eligibility_age : int, optional
        Income starts the year after this age (default 67).

    Returns
    -------
    int
        Annual benefit, or zero when not yet eligible or the salary has no band.
    """
    if age <= eligibility_age:
        return 0
    table = SOCIAL_SECURITY_BANDS if bands is None else bands
    return int(table.get(salary, 0))


def retirement_drawdown(age: int, configured_expense: int, eligibility_age: int = ELIGIBILITY_AGE) -> int:
    """Annual retirement spending withdrawn from savings once past the eligibility age."""
    if age <= eligibility_age:
        return 0
    return configured_expense


__all__ = [
    "ELIGIBILITY_AGE",
    "SOCIAL_SECURITY_BANDS",
    "social_security_income",
    "retirement_drawdown",
]
