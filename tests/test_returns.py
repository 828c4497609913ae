"""Tests for the historical return table and samplers."""

import numpy as np
import pytest

from retirement_projector.calculators import returns


def test_default_table_is_newest_first():
    table = returns.default_return_table()
    assert len(table) == 99
    assert table.newest_year == 2024
    assert table[0] == (2024, 25.02)
    assert table.years[-1] == 1926
    assert list(table.years) == sorted(table.years, reverse=True)


def test_table_sorts_entries_and_rejects_bad_input():
    table = returns.HistoricalReturnTable([(2001, -11.89), (2003, 28.68), (2002, -22.10)])
    assert table.years == (2003, 2002, 2001)
    assert table.returns == (28.68, -22.10, -11.89)
    with pytest.raises(ValueError):
        returns.HistoricalReturnTable([])
    with pytest.raises(ValueError):
        returns.HistoricalReturnTable([(2001, 1.0), (2001, 2.0)])


def test_sequential_walk_starts_at_newest_year_and_resets():
    sampler = returns.make_sampler(returns.SamplerPolicy.SEQUENTIAL)
    assert sampler.draw(3) == [25.02, 26.29, -18.11]
    sampler.reset()
    assert sampler.next_return() == 25.02


def test_sequential_walk_wraps_past_oldest_year():
    table = returns.HistoricalReturnTable([(2000, 1.0), (2001, 2.0)])
    sampler = returns.ReturnSampler(table, returns.SamplerPolicy.SEQUENTIAL)
    assert sampler.draw(5) == [2.0, 1.0, 2.0, 1.0, 2.0]


def test_random_draws_come_from_table():
    table = returns.default_return_table()
    sampler = returns.ReturnSampler(table, returns.SamplerPolicy.RANDOM, rng=np.random.default_rng(0))
    draws = sampler.draw(500)
    assert set(draws) <= set(table.returns)
    # with replacement: 500 draws from 99 years must repeat
    assert len(set(draws)) < len(draws)


def test_random_draws_repeatable_with_seed():
    a = returns.make_sampler(returns.SamplerPolicy.RANDOM, seed=12345).draw(20)
    b = returns.make_sampler(returns.SamplerPolicy.RANDOM, seed=12345).draw(20)
    assert a == b
