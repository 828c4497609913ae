"""Required Minimum Distribution (RMD) calculator.

Once the account owner reaches 73 a minimum amount must be withdrawn each
year.  The amount is derived from the balance and a distribution period
(life expectancy divisor) taken from the IRS Uniform Lifetime Table.  This
system covers ages 73 through 99 only.

Only three quarters of the balance is treated as subject to distribution,
so the withdrawal is ``(balance * 3/4) / divisor``, truncated to whole
dollars.

Example
-------

>>> required_minimum_distribution(age=73, balance=100000)
2830
>>> required_minimum_distribution(age=72, balance=100000)
0
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

RMD_DIVISORS: Mapping[int, float] = MappingProxyType({
    73: 26.5,
    74: 25.5,
    75: 24.6,
    76: 23.7,
    77: 22.9,
    78: 22.0,
    79: 21.1,
    80: 20.2,
    81: 19.4,
    82: 18.5,
    83: 17.7,
    84: 16.8,
    85: 16.0,
    86: 15.2,
    87: 14.4,
    88: 13.7,
    89: 12.9,
    90: 12.2,
    91: 11.5,
    92: 10.8,
    93: 10.1,
    94: 9.5,
    95: 8.9,
    96: 8.4,
    97: 7.8,
    98: 7.3,
    99: 6.8,
})

SUBJECT_FRACTION = 3 / 4


def rmd_divisor(age: int, divisors: Optional[Mapping[int, float]] = None) -> Optional[float]:
    """Distribution period for ``age``, or None outside the table."""
    table = RMD_DIVISORS if divisors is None else divisors
    return table.get(age)


def required_minimum_distribution(
    age: int,
    balance: int,
    divisors: Optional[Mapping[int, float]] = None,
) -> int:
    """Compute the RMD for a given age and balance.

    Parameters
    ----------
    age : int
        Age of the account owner in the distribution year.
    balance : int
        Balance before this year's growth is applied.
    divisors : mapping, optional
        Age to distribution period.  Defaults to ``RMD_DIVISORS``.

    Returns
    -------
    int
        The RMD amount.  Zero if the balance is non-positive or the age is
        not in the table.
    """
    if balance <= 0:
        return 0
    period = rmd_divisor(age, divisors)
    if period is None:
        return 0
    return int(balance * SUBJECT_FRACTION / period)


__all__ = ["RMD_DIVISORS", "rmd_divisor", "required_minimum_distribution"]
