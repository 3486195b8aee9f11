from __future__ import annotations

import pytest

from lottowheel.config import WheelLimits
from lottowheel.engine.combinatorics import binomial
from lottowheel.engine.coverage import calculate_coverage
from lottowheel.engine.wheels import FullWheelGenerator
from lottowheel.engine.wheels.base import savings_percent
from lottowheel.errors import ResourceLimitError


def test_full_wheel_of_four_numbers_in_pairs():
    result = FullWheelGenerator().generate([1, 2, 3, 4], 2)

    assert result.tickets == ((1, 2), (1, 3), (1, 4), (2, 3), (2, 4), (3, 4))
    assert result.full_wheel_count == 6
    assert result.ticket_count == 6
    assert result.savings_percent == 0
    assert result.coverage_or_balance_score == 100
    assert result.wheel_type == "full"


def test_full_wheel_cardinality_and_ticket_shape():
    pool = [3, 8, 11, 17, 21, 26, 34, 40]

    result = FullWheelGenerator().generate(pool, 3)

    assert result.ticket_count == binomial(len(pool), 3) == 56
    assert len(set(result.tickets)) == result.ticket_count
    for ticket in result.tickets:
        assert len(ticket) == 3
        assert len(set(ticket)) == 3
        assert tuple(sorted(ticket)) == ticket
        assert set(ticket) <= set(pool)


def test_full_wheel_sorts_tickets_from_unordered_pool():
    result = FullWheelGenerator().generate([4, 2, 3, 1], 2)

    assert all(ticket[0] < ticket[1] for ticket in result.tickets)
    assert (1, 4) in result.tickets


def test_full_wheel_covers_every_guarantee():
    pool = [1, 2, 3, 4, 5, 6, 7]
    result = FullWheelGenerator().generate(pool, 4)

    for must_match, guaranteed in [(4, 4), (5, 3), (6, 2), (7, 4)]:
        coverage = calculate_coverage(result.tickets, pool, must_match, guaranteed)
        assert coverage.percent == 100


def test_pool_equal_to_ticket_size_yields_single_ticket():
    result = FullWheelGenerator().generate([9, 5, 7], 3)

    assert result.tickets == ((5, 7, 9),)
    assert result.full_wheel_count == 1


def test_pool_smaller_than_ticket_size_is_empty():
    result = FullWheelGenerator().generate([1, 2, 3], 5)

    assert result.tickets == ()
    assert result.full_wheel_count == 0


def test_full_wheel_rejects_combinatorial_explosion():
    with pytest.raises(ResourceLimitError, match="50,063,860") as exc_info:
        FullWheelGenerator().generate(list(range(1, 61)), 6)

    assert exc_info.value.estimated == 50_063_860
    assert exc_info.value.limit == 50_000


def test_large_ticket_size_uses_smaller_ceiling():
    with pytest.raises(ResourceLimitError) as exc_info:
        FullWheelGenerator().generate(list(range(1, 53)), 50)

    assert exc_info.value.estimated == 1326
    assert exc_info.value.limit == 500


def test_ceiling_is_configurable():
    generator = FullWheelGenerator(WheelLimits(max_full_wheel_tickets=10))

    with pytest.raises(ResourceLimitError):
        generator.generate([1, 2, 3, 4, 5, 6], 3)


def test_savings_percent_bounds():
    assert savings_percent(6, 6) == 0
    assert savings_percent(2, 6) == 67
    assert savings_percent(2, 48_620) == 99
    assert savings_percent(200, 593_775) == 99
    assert savings_percent(0, 0) == 0
