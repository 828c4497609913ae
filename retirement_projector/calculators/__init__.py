"""Helper package that exposes the projection calculators.

The `calculators` package contains small, focused modules that each implement
one piece of the retirement projection:

* ``returns`` – historical S&P 500 return table and the return samplers.
* ``social_security`` – Social Security income bands and retirement drawdown.
* ``rmd`` – Required Minimum Distribution divisors and withdrawal rule.
* ``projection`` – the year-by-year engine combining all of the above.

The engine only depends on the lookup tables through ``ProjectionOptions``, so
alternate tables can be passed in without touching module state.
"""

from . import returns, social_security, rmd, projection  # noqa: F401

__all__ = ["returns", "social_security", "rmd", "projection"]
