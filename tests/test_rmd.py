"""Tests for the RMD calculator functions."""

import pytest

from retirement_projector.calculators import rmd


def test_required_minimum_distribution():
    """Three quarters of the balance divided by the period, truncated."""
    assert rmd.required_minimum_distribution(73, 100000) == 2830
    assert rmd.required_minimum_distribution(99, 100000) == int(75000 / 6.8)


def test_no_rmd_for_non_positive_balance():
    for age in (50, 73, 85, 99, 110):
        assert rmd.required_minimum_distribution(age, 0) == 0
        assert rmd.required_minimum_distribution(age, -50000) == 0


def test_no_rmd_outside_covered_ages():
    assert rmd.required_minimum_distribution(72, 100000) == 0
    assert rmd.required_minimum_distribution(100, 100000) == 0
    assert rmd.rmd_divisor(72) is None


def test_divisor_table_covers_73_to_99():
    assert sorted(rmd.RMD_DIVISORS) == list(range(73, 100))
    assert rmd.rmd_divisor(73) == 26.5
    assert rmd.rmd_divisor(96) == 8.4


def test_custom_divisors():
    assert rmd.required_minimum_distribution(60, 1000, divisors={60: 10.0}) == 75


def test_divisor_table_is_read_only():
    with pytest.raises(TypeError):
        rmd.RMD_DIVISORS[73] = 1.0
    assert rmd.rmd_divisor(73) == 26.5
