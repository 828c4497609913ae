"""Historical market returns and the samplers that draw from them.

The projection engine needs one market return per simulated year.  Returns
come from a fixed table of S&P 500 total annual returns (dividends
reinvested), expressed as percentages, e.g. ``25.02`` for +25.02 %.

Two sampling policies are supported:

* ``SamplerPolicy.RANDOM`` – pick a year uniformly at random from the table,
  with replacement, for every simulated year.
* ``SamplerPolicy.SEQUENTIAL`` – walk the table in order starting from the
  newest year.  The walk restarts on :meth:`ReturnSampler.reset` and wraps
  to the newest year if a run is longer than the table.

Example
-------

>>> sampler = make_sampler(SamplerPolicy.SEQUENTIAL)
>>> sampler.next_return()
25.02
>>> sampler.next_return()
26.29
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Iterator, Optional, Sequence, Tuple

import numpy as np

# S&P 500 total annual returns in percent, newest year first.
_SP500_TOTAL_RETURNS: Tuple[Tuple[int, float], ...] = (
    (2024, 25.02),
    (2023, 26.29),
    (2022, -18.11),
    (2021, 28.71),
    (2020, 18.40),
    (2019, 31.49),
    (2018, -4.38),
    (2017, 21.83),
    (2016, 11.96),
    (2015, 1.38),
    (2014, 13.69),
    (2013, 32.39),
    (2012, 16.00),
    (2011, 2.11),
    (2010, 15.06),
    (2009, 26.46),
    (2008, -37.00),
    (2007, 5.49),
    (2006, 15.79),
    (2005, 4.91),
    (2004, 10.88),
    (2003, 28.68),
    (2002, -22.10),
    (2001, -11.89),
    (2000, -9.10),
    (1999, 21.04),
    (1998, 28.58),
    (1997, 33.36),
    (1996, 22.96),
    (1995, 37.58),
    (1994, 1.32),
    (1993, 10.08),
    (1992, 7.62),
    (1991, 30.47),
    (1990, -3.10),
    (1989, 31.69),
    (1988, 16.61),
    (1987, 5.25),
    (1986, 18.67),
    (1985, 31.73),
    (1984, 6.27),
    (1983, 22.56),
    (1982, 21.55),
    (1981, -4.91),
    (1980, 32.42),
    (1979, 18.44),
    (1978, 6.56),
    (1977, -7.18),
    (1976, 23.84),
    (1975, 37.20),
    (1974, -26.47),
    (1973, -14.66),
    (1972, 18.98),
    (1971, 14.31),
    (1970, 4.01),
    (1969, -8.50),
    (1968, 11.06),
    (1967, 23.98),
    (1966, -10.06),
    (1965, 12.45),
    (1964, 16.48),
    (1963, 22.80),
    (1962, -8.73),
    (1961, 26.89),
    (1960, 0.47),
    (1959, 11.96),
    (1958, 43.36),
    (1957, -10.78),
    (1956, 6.56),
    (1955, 31.56),
    (1954, 52.62),
    (1953, -0.99),
    (1952, 18.37),
    (1951, 24.02),
    (1950, 31.71),
    (1949, 18.79),
    (1948, 5.50),
    (1947, 5.71),
    (1946, -8.07),
    (1945, 36.44),
    (1944, 19.75),
    (1943, 25.90),
    (1942, 20.34),
    (1941, -11.59),
    (1940, -9.78),
    (1939, -0.41),
    (1938, 31.12),
    (1937, -35.03),
    (1936, 33.92),
    (1935, 47.67),
    (1934, -1.44),
    (1933, 53.99),
    (1932, -8.19),
    (1931, -43.34),
    (1930, -24.90),
    (1929, -8.42),
    (1928, 43.61),
    (1927, 37.49),
    (1926, 11.62),
)


class HistoricalReturnTable:
    """Read-only sequence of ``(year, percent_return)`` pairs, newest first.

    Parameters
    ----------
    entries : iterable of (int, float)
        Calendar year and annual return in percent.  Order does not matter;
        the table sorts by year, newest first.

    Raises
    ------
    ValueError
        If ``entries`` is empty or repeats a year.
    """

    __slots__ = ("_years", "_returns")

    def __init__(self, entries: Iterable[Tuple[int, float]]):
        rows = sorted(((int(y), float(r)) for y, r in entries), key=lambda row: row[0], reverse=True)
        if not rows:
            raise ValueError("historical return table must not be empty")
        years = tuple(y for y, _ in rows)
        if len(set(years)) != len(years):
            raise ValueError("historical return table repeats a year")
        self._years = years
        self._returns = tuple(r for _, r in rows)

    @property
    def years(self) -> Tuple[int, ...]:
        return self._years

    @property
    def returns(self) -> Tuple[float, ...]:
        return self._returns

    @property
    def newest_year(self) -> int:
        return self._years[0]

    def __len__(self) -> int:
        return len(self._years)

    def __iter__(self) -> Iterator[Tuple[int, float]]:
        return iter(zip(self._years, self._returns))

    def __getitem__(self, index: int) -> Tuple[int, float]:
        return self._years[index], self._returns[index]

    def __repr__(self) -> str:
        return (
            f"HistoricalReturnTable({len(self)} years, "
            f"{self._years[-1]}-{self._years[0]})"
        )


_DEFAULT_TABLE = HistoricalReturnTable(_SP500_TOTAL_RETURNS)


def default_return_table() -> HistoricalReturnTable:
    """Return the built-in S&P 500 total return table (1926–2024)."""
    return _DEFAULT_TABLE


class SamplerPolicy(str, Enum):
    RANDOM = "random"
    SEQUENTIAL = "sequential"


class ReturnSampler:
    """Draws one annual return (in percent) per call from a historical table.

    Usage:
        sampler = ReturnSampler(default_return_table(), SamplerPolicy.RANDOM,
                                rng=np.random.default_rng(7))
        pct = sampler.next_return()   # e.g. 13.69
        growth = balance * pct / 100
    """

    def __init__(
        self,
        table: HistoricalReturnTable,
        policy: SamplerPolicy = SamplerPolicy.RANDOM,
        rng: Optional[np.random.Generator] = None,
    ):
        self.table = table
        self.policy = SamplerPolicy(policy)
        self.rng = rng if rng is not None else np.random.default_rng()
        self._cursor = 0

    def reset(self) -> None:
        """Restart a sequential walk at the newest year."""
        self._cursor = 0

    def next_return(self) -> float:
        returns = self.table.returns
        if self.policy is SamplerPolicy.RANDOM:
            return returns[int(self.rng.integers(len(returns)))]
        pct = returns[self._cursor % len(returns)]
        self._cursor += 1
        return pct

    def draw(self, n: int) -> Sequence[float]:
        """Draw ``n`` consecutive returns."""
        return [self.next_return() for _ in range(n)]


def make_sampler(
    policy: SamplerPolicy = SamplerPolicy.RANDOM,
    table: Optional[HistoricalReturnTable] = None,
    seed: int | None = None,
) -> ReturnSampler:
    return ReturnSampler(table or default_return_table(), policy, np.random.default_rng(seed))


__all__ = [
    "HistoricalReturnTable",
    "default_return_table",
    "SamplerPolicy",
    "ReturnSampler",
    "make_sampler",
]
